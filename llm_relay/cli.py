"""CLI entry point for LLM Relay."""

import argparse
import asyncio
import json
import sys
from typing import Any, Optional

from dotenv import load_dotenv

from .config.settings import RelaySettings
from .main import RelayClient
from .models.generation import ProviderType
from .providers.base import ProviderError


def json_value(text: str) -> Any:
    """argparse type for ``--meta``: any JSON value."""
    try:
        return json.loads(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid JSON: {text}")


async def ask(prompt: str, provider: str, system: Optional[str] = None,
              meta: Any = None) -> int:
    """Send one prompt and print the normalized content."""
    client = RelayClient()

    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})

    try:
        result = await client.generate(messages, meta=meta, provider=provider)
    except ProviderError as e:
        print(f"Error ({e.status_code}): {e.message}", file=sys.stderr)
        return 1

    print(f"Response from {result.provider} ({result.model}):\n")
    print(result.content)
    return 0


def serve(host: Optional[str], port: Optional[int], log_level: str) -> None:
    """Run the HTTP service with uvicorn."""
    import uvicorn

    settings = RelaySettings.from_env()
    uvicorn.run(
        "llm_relay.http.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        log_level=log_level,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LLM Relay CLI")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Ask command
    ask_parser = subparsers.add_parser('ask', help='Send one prompt through a provider')
    ask_parser.add_argument('prompt', help='Text prompt')
    ask_parser.add_argument('--provider', default=ProviderType.DEEPSEEK.value,
                            choices=[p.value for p in ProviderType], help='Provider to use')
    ask_parser.add_argument('--system', help='Optional system message')
    ask_parser.add_argument('--meta', type=json_value,
                            help='Optional JSON value echoed back in the response')

    # Serve command
    serve_parser = subparsers.add_parser('serve', help='Run the HTTP relay')
    serve_parser.add_argument('--host', help='Interface to bind (default: LLM_RELAY_HOST or 127.0.0.1)')
    serve_parser.add_argument('--port', type=int, help='Port to bind (default: LLM_RELAY_PORT or 8000)')
    serve_parser.add_argument('--log-level', default='info', help='uvicorn log level')

    return parser


def main(argv: Optional[list] = None):
    """Main CLI function."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'ask':
        sys.exit(asyncio.run(ask(args.prompt, args.provider, args.system, args.meta)))
    elif args.command == 'serve':
        serve(args.host, args.port, args.log_level)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
