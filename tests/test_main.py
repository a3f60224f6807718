from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from dumbmoney_mcp import main as main_module
from dumbmoney_mcp.config import Settings
from dumbmoney_mcp.server import create_server


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DUMBMONEY_MCP_CONFIG", "MCP_TRANSPORT", "MCP_LOG_LEVEL", "MCP_SERVER_PORT"):
        monkeypatch.delenv(name, raising=False)


def test_startup_failure_exits_1(monkeypatch, capsys):
    monkeypatch.setenv("MCP_TRANSPORT", "bogus")
    with pytest.raises(SystemExit) as exc_info:
        main_module.main()
    assert exc_info.value.code == 1
    assert "Fatal error: Unsupported transport 'bogus'" in capsys.readouterr().err


def test_keyboard_interrupt_exits_0(monkeypatch, capsys):
    stub = MagicMock()
    stub.run.side_effect = KeyboardInterrupt
    monkeypatch.setattr(main_module, "create_server", lambda settings: stub)
    with pytest.raises(SystemExit) as exc_info:
        main_module.main()
    assert exc_info.value.code == 0
    stub.run.assert_called_once_with(transport="stdio")
    assert "DumbMoney MCP server running on stdio" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_missing_credential_warned_at_startup(spy):
    server = create_server(Settings(api_key=""), http_transport=spy.transport())
    logger = logging.getLogger("dumbmoney_mcp")
    with patch.object(logger, "warning") as warning:
        async with create_connected_server_and_client_session(server._mcp_server):
            pass
    assert any("DUMBMONEY_API_KEY not set" in call.args[0] for call in warning.call_args_list)


@pytest.mark.asyncio
async def test_no_warning_with_credential(spy):
    server = create_server(Settings(api_key="key-123"), http_transport=spy.transport())
    logger = logging.getLogger("dumbmoney_mcp")
    with patch.object(logger, "warning") as warning:
        async with create_connected_server_and_client_session(server._mcp_server):
            pass
    assert warning.call_count == 0
