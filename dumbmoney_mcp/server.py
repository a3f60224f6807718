from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx
from mcp import types
from mcp.server.fastmcp import FastMCP

from .client import DumbMoneyClient, build_http_client
from .config import Settings
from .dispatcher import Dispatcher
from .tools import CATALOG


class ToolFailure(Exception):
    """
    Carries an error envelope out of call_tool.

    The MCP runtime turns any exception raised by the call_tool handler into
    CallToolResult(isError=True) whose only text content is str(exc), so the
    message must be the envelope text itself.
    """
    pass


def setup_logger(level_name: str = "INFO") -> logging.Logger:
    logger = logging.getLogger("dumbmoney_mcp")
    if logger.handlers:
        return logger
    logger.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    # stderr: stdout belongs to the stdio transport
    handler = logging.StreamHandler()

    class StructuredFormatter(logging.Formatter):
        """Custom formatter that handles missing structured fields gracefully."""

        def format(self, record: logging.LogRecord) -> str:
            for field in ("tool", "status", "duration_ms"):
                if not hasattr(record, field):
                    setattr(record, field, "")
            return super().format(record)

    handler.setFormatter(StructuredFormatter(
        '{"ts":"%(asctime)s","level":"%(levelname)s","tool":"%(tool)s","status":"%(status)s",'
        '"duration_ms":"%(duration_ms)s","msg":"%(message)s"}'
    ))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


@dataclass
class AppContext:
    settings: Settings
    client: DumbMoneyClient
    dispatcher: Dispatcher
    logger: logging.Logger


class DumbMoneyMCP(FastMCP):
    """
    FastMCP server backed by the declarative tool catalog.

    Tools are not registered as Python functions: listing reads CATALOG and
    every call goes through the Dispatcher kept in the lifespan context.
    """

    async def list_tools(self) -> List[types.Tool]:
        return [definition.to_mcp_tool() for definition in CATALOG]

    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        app: AppContext = self.get_context().request_context.lifespan_context
        result = await app.dispatcher.dispatch(name, arguments)
        if result.is_error:
            raise ToolFailure(result.text)
        return [types.TextContent(type="text", text=result.text)]


def create_server(
    settings: Settings,
    http_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DumbMoneyMCP:
    """
    Build the MCP server for the given settings.

    http_transport replaces the network layer of the shared httpx client
    (tests pass an httpx.MockTransport or ASGITransport).
    """
    logger = setup_logger(settings.log_level)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
        http_client = build_http_client(settings, transport=http_transport)
        client = DumbMoneyClient(http_client, api_key=settings.api_key)
        if not settings.api_key:
            logger.warning(
                "DUMBMONEY_API_KEY not set. create_token and get_my_agent_info are disabled."
            )
        app_ctx = AppContext(
            settings=settings,
            client=client,
            dispatcher=Dispatcher(client, api_key=settings.api_key, logger=logger),
            logger=logger,
        )
        try:
            yield app_ctx
        finally:
            await http_client.aclose()

    server = DumbMoneyMCP(
        settings.server_name,
        lifespan=lifespan,
        host=settings.host,
        port=settings.port,
    )
    server._mcp_server.version = settings.server_version
    return server
