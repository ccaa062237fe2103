"""Provider registry command line entry point.

Lists the configured providers and prepares requests without sending them:

    python -m main list
    python -m main show anthropic
    python -m main request openai --config ~/.config/providers.toml
"""
import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from core.logger import redact
from di import Container, cleanup_di, setup_di
from providers.config_loader import dump_provider_info
from providers.models import ProviderError
from providers.policy import provider_policy
from providers.url import is_azure_responses_endpoint


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        description="Inspect LLM providers and the requests prepared for them"
    )
    parser.add_argument(
        "--config",
        help="TOML or JSON file with a model_providers table",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List provider IDs")

    show = subparsers.add_parser("show", help="Show a provider definition")
    show.add_argument("provider_id")

    request = subparsers.add_parser(
        "request", help="Prepare a request for a provider (headers are redacted)"
    )
    request.add_argument("provider_id")

    return parser


async def prepare_request(container: Container, provider_id: str) -> Dict[str, Any]:
    """Prepare a request and describe it."""
    provider = container.provider_manager().get_provider(provider_id)
    builder = await container.request_factory().create_request_builder(provider)
    policy = provider_policy(provider)
    return {
        "method": builder.method,
        "url": builder.url,
        "headers": {
            name: redact(name, value) for name, value in builder.header_dict().items()
        },
        "azure": is_azure_responses_endpoint(provider),
        "request_max_retries": policy.request_max_retries,
        "stream_max_retries": policy.stream_max_retries,
        "stream_idle_timeout_ms": int(policy.stream_idle_timeout.total_seconds() * 1000),
    }


def run(args: argparse.Namespace) -> Any:
    """Run a parsed command."""
    container = setup_di()
    manager = container.provider_manager()
    if args.config:
        manager.load_from_file(args.config)

    if args.command == "list":
        return manager.list_providers()
    if args.command == "show":
        return dump_provider_info(manager.get_provider(args.provider_id))
    return asyncio.run(prepare_request(container, args.provider_id))


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)
    try:
        result = run(args)
    except ProviderError as e:
        print(json.dumps({"error": e.message, "details": e.details}), file=sys.stderr)
        return 1
    except RuntimeError as e:
        cause = e.__cause__
        message = cause.message if isinstance(cause, ProviderError) else str(e)
        print(json.dumps({"error": message}), file=sys.stderr)
        return 1
    finally:
        cleanup_di()

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
