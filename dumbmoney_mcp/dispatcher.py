"""
Request dispatcher: validated tool arguments in, one HTTP call, one envelope out.

Every failure (bad input, missing credential, remote or transport error)
becomes an error ToolResult. Nothing raised inside dispatch() reaches the
MCP runtime.
"""
from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from mcp import types

from .client import DumbMoneyClient
from .errors import DumbMoneyError, InvalidInput, MissingCredential, RemoteError
from .tools import ToolDefinition, get_tool


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False

    @classmethod
    def success(cls, payload: Any) -> "ToolResult":
        return cls(text=json.dumps(payload, indent=2, ensure_ascii=False))

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(text=json.dumps({"error": message}, ensure_ascii=False), is_error=True)

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )


class Dispatcher:
    def __init__(
        self,
        client: DumbMoneyClient,
        api_key: str = "",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.client = client
        self.api_key = api_key
        self.logger = logger or logging.getLogger("dumbmoney_mcp")

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        start = time.perf_counter()
        definition: Optional[ToolDefinition] = None
        try:
            definition = get_tool(name)
            params = definition.validate(arguments)
            if definition.requires_credential and not self.api_key:
                raise MissingCredential(definition.credential_hint)
            if definition.method == "GET":
                payload = await self.client.get(
                    definition.build_path(params),
                    authenticated=definition.requires_credential,
                )
            else:
                payload = await self.client.post(definition.path, definition.build_body(params))
        except DumbMoneyError as exc:
            status = _status_for(exc)
            self.logger.warning(
                f"Tool call failed: {exc}",
                extra={"tool": name, "status": status, "duration_ms": _elapsed_ms(start)},
            )
            return ToolResult.failure(_message(exc, definition))
        except Exception as exc:
            self.logger.error(
                f"Unexpected error: {exc}",
                extra={"tool": name, "status": "error", "duration_ms": _elapsed_ms(start)},
                exc_info=True,
            )
            return ToolResult.failure(_message(exc, definition))

        self.logger.info(
            "Tool call succeeded",
            extra={"tool": name, "status": "ok", "duration_ms": _elapsed_ms(start)},
        )
        return ToolResult.success(payload)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000.0, 2)


def _status_for(exc: DumbMoneyError) -> str:
    if isinstance(exc, InvalidInput):
        return "invalid_input"
    if isinstance(exc, MissingCredential):
        return "missing_credential"
    if isinstance(exc, RemoteError):
        return "remote_error"
    return "transport_error"


def _message(exc: Exception, definition: Optional[ToolDefinition]) -> str:
    message = str(exc)
    if message:
        return message
    return definition.failure_message if definition else "Request failed"
