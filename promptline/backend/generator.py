# backend/generator.py

import asyncio
from functools import partial
from typing import Any, Optional

import boto3
from botocore.config import Config
from google import genai
from google.genai import types

from ..config import TransformerConfig
from ..errors import ConfigurationError


def get_gemini_client(config: TransformerConfig, logger=None) -> genai.Client:
    """
    Build a Gemini client from the injected credential.

    Raises:
        ConfigurationError: If no API key was configured.
    """
    if not config.api_key:
        raise ConfigurationError("Missing API key: set GEMINI_API_KEY or pass --api-key")
    if logger:
        logger.debug(f"Initializing Gemini client for model: {config.model_id}")
    return genai.Client(
        api_key=config.api_key,
        http_options=types.HttpOptions(timeout=int(config.timeout * 1000)),
    )


def get_bedrock_client(config: TransformerConfig, logger=None) -> Any:
    """Build a Bedrock runtime client using the default AWS credential chain."""
    boto_config = Config(
        region_name=config.region,
        retries={'max_attempts': 0},
        read_timeout=config.timeout,
        connect_timeout=config.timeout
    )
    if logger:
        logger.debug(f"Initializing Bedrock client in region: {config.region}")
        logger.debug(f"Using model: {config.model_id}")
    session = boto3.Session()
    return session.client('bedrock-runtime', config=boto_config)


async def generate_gemini(client: genai.Client, instruction: str, model_id: str) -> Optional[str]:
    """Send the instruction to Gemini and return the response text, if any."""
    response = await client.aio.models.generate_content(model=model_id, contents=instruction)
    return response.text


async def generate_bedrock(client: Any, instruction: str, model_id: str) -> Optional[str]:
    """Send the instruction through Bedrock's converse API and join the text blocks."""
    # boto3 is blocking, keep the event loop free while it runs
    loop = asyncio.get_running_loop()
    response = await loop.run_in_executor(None, partial(
        client.converse,
        modelId=model_id,
        messages=[{"role": "user", "content": [{"text": instruction}]}]
    ))
    blocks = response.get('output', {}).get('message', {}).get('content', [])
    return ''.join(block.get('text', '') for block in blocks)


CLIENT_FACTORIES = {
    "gemini": get_gemini_client,
    "bedrock": get_bedrock_client,
}

GENERATORS = {
    "gemini": generate_gemini,
    "bedrock": generate_bedrock,
}
