#!/usr/bin/env python3
"""Command-line interface for the Steam Web API client.

Every registered endpoint is exposed as a subcommand whose options mirror
the method signature:

    steam-web-api get_news_for_app --appid 440 --count 5
    steam-web-api get_player_bans --steamids 76561197960435530 76561197960287930
    steam-web-api --list

The validated response is printed to stdout as JSON. Logs go to stderr.
"""

import argparse
import asyncio
import inspect
import logging
import sys
from typing import Any, Callable

import httpx

from steam_web_api.client import SteamClient, SteamResponse
from steam_web_api.config import get_api_key
from steam_web_api.endpoints import EndpointRegistry, EndpointSpec


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_bool(value: str) -> bool:
    """Parse a command-line boolean ("true"/"false", "1"/"0", "yes"/"no")."""
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise argparse.ArgumentTypeError(f"Expected a boolean, got '{value}'")


def _handler_parameters(handler: Callable[..., Any]) -> list[inspect.Parameter]:
    """Get the caller-facing parameters of an endpoint method."""
    params = list(inspect.signature(handler).parameters.values())
    return [p for p in params if p.name != "self"]


def _add_handler_arguments(
    parser: argparse.ArgumentParser, handler: Callable[..., Any]
) -> None:
    """Add one option per endpoint method parameter."""
    for param in _handler_parameters(handler):
        flag = f"--{param.name.replace('_', '-')}"
        required = param.default is inspect.Parameter.empty
        kwargs: dict[str, Any] = {"dest": param.name, "required": required}
        if not required:
            kwargs["default"] = param.default

        if param.name == "steamids":
            kwargs["nargs"] = "+"
            kwargs["help"] = "One or more SteamID64 values"
        elif param.annotation is bool:
            kwargs["type"] = _parse_bool
            kwargs["metavar"] = "{true,false}"
        elif param.annotation is int:
            kwargs["type"] = int

        if not required and "help" not in kwargs:
            kwargs["help"] = f"(default: {param.default})"

        parser.add_argument(flag, **kwargs)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser from the endpoint registry."""
    parser = argparse.ArgumentParser(
        prog="steam-web-api",
        description="Call a Steam Web API endpoint and print the JSON response.",
    )
    parser.add_argument(
        "--api-key",
        help="Steam Web API key (default: STEAM_API_KEY from environment or .env)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--list", action="store_true", help="List available endpoints and exit"
    )

    subparsers = parser.add_subparsers(dest="operation", metavar="operation")
    for spec in EndpointRegistry.get_all_endpoints():
        if spec.handler is None:
            continue
        subparser = subparsers.add_parser(spec.name, help=spec.description)
        _add_handler_arguments(subparser, spec.handler)

    return parser


def format_endpoint_table(specs: list[EndpointSpec]) -> str:
    """Render the endpoint table shown by --list."""
    lines = []
    for spec in specs:
        key = "key" if spec.requires_key else "public"
        lines.append(f"{spec.name:<45} {key:<7} {spec.path}")
    return "\n".join(lines)


async def run_operation(
    client: SteamClient, name: str, arguments: dict[str, Any]
) -> SteamResponse[Any]:
    """
    Call a registered endpoint on a client.

    Args:
        client: SteamClient to issue the request with
        name: Registered endpoint name (e.g., "get_owned_games")
        arguments: Keyword arguments for the endpoint method

    Raises:
        ValueError: If the endpoint is not registered
    """
    spec = EndpointRegistry.get_endpoint(name)
    if spec is None or spec.handler is None:
        raise ValueError(f"Unknown endpoint: {name}")

    handler = getattr(client, spec.handler.__name__)
    return await handler(**arguments)


async def _call(api_key: str, name: str, arguments: dict[str, Any]) -> SteamResponse[Any]:
    async with SteamClient(api_key) as client:
        return await run_operation(client, name, arguments)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Log to stderr so stdout stays valid JSON
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if args.list:
        print(format_endpoint_table(EndpointRegistry.get_all_endpoints()))
        return

    if not args.operation:
        parser.print_help(sys.stderr)
        sys.exit(2)

    try:
        api_key = get_api_key(args.api_key)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    spec = EndpointRegistry.get_endpoint(args.operation)
    assert spec is not None and spec.handler is not None  # argparse restricts choices
    arguments = {
        param.name: getattr(args, param.name)
        for param in _handler_parameters(spec.handler)
    }

    try:
        response = asyncio.run(_call(api_key, args.operation, arguments))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(130)
    except httpx.HTTPStatusError as e:
        logger.error(
            f"Steam returned HTTP {e.response.status_code} for {args.operation}"
        )
        sys.exit(1)
    except httpx.HTTPError as e:
        logger.error(f"Request failed: {e}")
        sys.exit(1)
    except ValueError as e:
        # Malformed JSON or a body that doesn't match the response model
        logger.error(f"Invalid response for {args.operation}: {e}")
        sys.exit(1)

    print(response.data.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
