"""
Main entry point for the DumbMoney MCP server.

Runs over stdio by default; MCP_TRANSPORT=streamable-http (or sse) serves
the same tools over HTTP on MCP_SERVER_HOST:MCP_SERVER_PORT.
"""
from __future__ import annotations

import sys

from .config import load_settings
from .server import create_server


def main() -> None:
    """Start the MCP server; exit 1 on any startup failure."""
    try:
        settings = load_settings()
        server = create_server(settings)
        print(f"DumbMoney MCP server running on {settings.transport}", file=sys.stderr)
        server.run(transport=settings.transport)
    except KeyboardInterrupt:
        print("\nServer shutdown requested...", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
