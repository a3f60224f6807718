from __future__ import annotations

import asyncio
import json
import os
import sys
from typing import Any, Dict

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


SERVER = StdioServerParameters(command=sys.executable, args=["-m", "dumbmoney_mcp.main"])


async def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python scripts/call_tool.py <tool_name> ['<json-args>']")
        raise SystemExit(1)

    tool_name = sys.argv[1]
    raw_args = sys.argv[2] if len(sys.argv) > 2 else "{}"

    try:
        params: Dict[str, Any] = json.loads(raw_args)
    except Exception as exc:
        print("Failed to parse JSON arguments")
        print(repr(exc))
        raise SystemExit(1)

    # StdioServerParameters.env=None passes the default safe environment only
    server = SERVER.model_copy(update={"env": _forwarded_env()})
    async with stdio_client(server) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()
            result = await session.call_tool(tool_name, params)
            print("Tool call failed:" if result.isError else "Tool call result:")
            for block in result.content:
                print(getattr(block, "text", block))


def _forwarded_env() -> Dict[str, str]:
    return {
        key: value
        for key, value in os.environ.items()
        if key.startswith(("DUMBMONEY_", "MCP_")) or key in ("PATH", "HOME", "PYTHONPATH")
    }


if __name__ == "__main__":
    asyncio.run(main())
