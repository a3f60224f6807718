"""
DumbMoney tool catalog.

Each tool is a declarative ToolDefinition: input model, HTTP method, path
template and credential requirement. The dispatcher turns a definition plus
validated arguments into exactly one HTTP request.
"""
from __future__ import annotations

from .catalog import CATALOG, TOOLS_BY_NAME, ToolDefinition, get_tool

__all__ = ["CATALOG", "TOOLS_BY_NAME", "ToolDefinition", "get_tool"]
