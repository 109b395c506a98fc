from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import orjson

from .api import api_state, get_api_functions
from .config import get_settings
from .errors import ThingsError
from .logging import configure_logging
from .services import ServiceContext


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Things MCP server command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the MCP server for the Things app.")
    serve_parser.add_argument("--transport", choices=("stdio", "http"), default="stdio")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8765)

    subparsers.add_parser("tools", help="Print the tool catalogue as JSON.")

    return parser


def _serve(args: argparse.Namespace) -> int:
    from .services.mcp import run_mcp_server

    logger = logging.getLogger(__name__)
    settings = get_settings()
    try:
        api_state.install(ServiceContext(settings))
    except ThingsError as exc:
        logger.error("Failed to start Things MCP server: %s", exc)
        return 1
    if not settings.things.has_auth_token:
        logger.warning(
            "%s not set; only navigation and search tools will work.",
            ", ".join(settings.things.missing_env_vars),
        )
    logger.info("Things MCP server starting (%s transport)", args.transport)
    run_mcp_server(transport=args.transport, host=args.host, port=args.port)
    return 0


def _print_tools() -> int:
    catalogue = [spec.as_tool() for spec in get_api_functions()]
    sys.stdout.buffer.write(orjson.dumps(catalogue, option=orjson.OPT_INDENT_2) + b"\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    log_dir = settings.logging.directory
    configure_logging(
        settings.logging.level,
        log_path=Path(log_dir) / "things_mcp.log" if log_dir else None,
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        return _serve(args)
    if args.command == "tools":
        return _print_tools()
    parser.print_help()  # pragma: no cover - argparse enforces choices
    return 2


if __name__ == "__main__":
    sys.exit(main())
