# server.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse

from .backend import Backend
from .config import TransformerConfig
from .display.page import render_page
from .logger import Logger
from .transformer import Failed, PromptTransformer, Succeeded
from .transformer.instruction import error_message


def create_app(config: Optional[TransformerConfig] = None,
               backend: Optional[Backend] = None,
               logger=None) -> FastAPI:
    """
    Build the web app around one shared backend.

    Each request gets its own PromptTransformer, so concurrent visitors never
    see each other's prompts.
    """
    config = config or TransformerConfig.from_env()
    logger = logger or Logger(__name__)
    backend = backend or Backend.create(config, logger=logger)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await backend.aclose()

    app = FastAPI(title="Prompt Engineer", lifespan=lifespan)
    app.state.config = config
    app.state.backend = backend

    def new_transformer() -> PromptTransformer:
        return PromptTransformer(backend.generate, logger=logger,
                                 copy_reset_delay=config.copy_reset_delay)

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return render_page(new_transformer().state, config.copy_reset_delay)

    @app.post("/", response_class=HTMLResponse)
    async def transform_form(prompt: str = Form("")):
        """
        Handle the form post: run one submission and render its outcome.
        The typed prompt stays in the textarea.
        """
        transformer = new_transformer()
        await transformer.submit(prompt)
        return render_page(transformer.state, config.copy_reset_delay)

    @app.post("/api/transform")
    async def transform(request: Request):
        body = await request.json()
        prompt = body.get('prompt', '') if isinstance(body, dict) else ''
        if not isinstance(prompt, str) or not prompt.strip():
            return JSONResponse({'error': 'Prompt cannot be empty'}, status_code=400)

        outcome = await new_transformer().submit(prompt)
        if isinstance(outcome, Succeeded):
            return {'status': 'succeeded', 'text': outcome.text}
        if isinstance(outcome, Failed):
            return {'status': 'failed', 'error': outcome.message}
        return JSONResponse({'error': 'Submission did not complete'}, status_code=500)

    @app.post("/api/generate")
    async def generate(request: Request):
        """Raw outbound call for remote promptline clients."""
        body = await request.json()
        instruction = body.get('instruction', '') if isinstance(body, dict) else ''
        if not isinstance(instruction, str) or not instruction.strip():
            return JSONResponse({'error': 'Instruction cannot be empty'}, status_code=400)
        try:
            text = await backend.generate(instruction)
        except Exception as e:
            logger.error(f"Error during generation: {e}")
            return JSONResponse({'error': error_message(e)}, status_code=502)
        return {'text': text}

    @app.get("/health")
    async def health():
        return {'status': 'ok', 'model': config.model_id}

    return app
