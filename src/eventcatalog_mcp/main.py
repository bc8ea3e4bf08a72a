"""Main entry point for the EventCatalog MCP server.

Usage::

    eventcatalog-mcp URL [LICENSE_KEY [TRANSPORT [PORT [BASE_PATH]]]]
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from mcp.shared.exceptions import McpError

from .config import POSITIONAL_KEYS, load_config
from .server import create_server


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eventcatalog-mcp",
        description="MCP server answering questions about an EventCatalog site",
    )
    for key in POSITIONAL_KEYS:
        parser.add_argument(key, nargs="?", default=None)
    return parser


async def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments, build the server and serve until stopped."""
    args = build_parser().parse_args(argv)
    config = load_config(argv=[getattr(args, key) or "" for key in POSITIONAL_KEYS])
    server = create_server(config)
    await server.start()


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nServer interrupted by user", file=sys.stderr)
        sys.exit(0)
    except McpError as e:
        print(f"Failed to start server: {e.error.message}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Failed to start server: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
