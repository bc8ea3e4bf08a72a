#!/usr/bin/env python3
"""Convenience script to run the EventCatalog MCP server from a checkout.

Usage:
    python run_mcp_server.py https://demo.eventcatalog.dev [LICENSE_KEY [TRANSPORT [PORT [BASE_PATH]]]]
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from eventcatalog_mcp.main import run  # noqa: E402

if __name__ == "__main__":
    run()
