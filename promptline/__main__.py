# __main__.py

import argparse

from .config import PROVIDERS, TransformerConfig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Prompt Engineer: improve prompts with a generative model')
    parser.add_argument('-e', '--endpoint',
                        help='Remote promptline server URL (e.g., http://localhost:5000)')
    parser.add_argument('--serve', action='store_true',
                        help='Serve the web form instead of the terminal form')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind with --serve')
    parser.add_argument('--port', type=int, default=5000, help='Port to bind with --serve')
    parser.add_argument('--provider', choices=PROVIDERS, help='Text-generation provider')
    parser.add_argument('--model', help='Model identifier passed to the provider')
    parser.add_argument('--api-key', help='Provider API key (defaults to GEMINI_API_KEY)')
    parser.add_argument('--log', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Log file path, "-" for stdout')
    return parser.parse_args(argv)


def build_config(args) -> TransformerConfig:
    return TransformerConfig.from_env({
        'endpoint': args.endpoint,
        'provider': args.provider,
        'model_id': args.model,
        'api_key': args.api_key,
    })


def main(argv=None):
    args = parse_args(argv)
    config = build_config(args)
    if args.serve:
        import uvicorn
        from .logger import Logger
        from .server import create_app

        logger = Logger('promptline.server', args.log, args.log_file)
        uvicorn.run(create_app(config, logger=logger), host=args.host, port=args.port)
    else:
        from .interface import Interface

        interface = Interface(config, endpoint=args.endpoint,
                              logging_enabled=args.log, log_file=args.log_file)
        interface.start()


if __name__ == "__main__":
    main()
