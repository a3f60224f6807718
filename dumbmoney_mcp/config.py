from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .env_utils import CONFIG_PATH_ENV, read_api_key, read_env

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "server.yaml"
DEFAULT_BASE_URL = "https://dumbmoney.win"
TRANSPORTS = ("stdio", "streamable-http", "sse")


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    server_name: str = "dumbmoney"
    server_version: str = "1.2.0"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "INFO"
    # None disables the client-side timeout
    http_timeout: Optional[float] = None
    max_connections: int = 100
    max_keepalive_connections: int = 20


def load_config(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"DumbMoney MCP config not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")
    return data


def _resolve_config(path: Optional[Path]) -> Dict[str, Any]:
    if path is not None:
        return load_config(path)
    explicit = read_env(CONFIG_PATH_ENV)
    if explicit:
        return load_config(Path(explicit))
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return {}


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Build Settings from the YAML config plus environment overrides.

    Precedence: environment > YAML > built-in defaults. The API key comes
    from DUMBMONEY_API_KEY only.
    """
    config = _resolve_config(path)
    server_cfg = config.get("server", {}) or {}
    api_cfg = config.get("api", {}) or {}
    http_cfg = config.get("http", {}) or {}
    defaults = Settings()

    transport = read_env("MCP_TRANSPORT") or str(server_cfg.get("transport", defaults.transport))
    if transport not in TRANSPORTS:
        raise ValueError(f"Unsupported transport '{transport}', expected one of {TRANSPORTS}")

    timeout = http_cfg.get("timeout")
    return Settings(
        base_url=(read_env("DUMBMONEY_BASE_URL") or str(api_cfg.get("base_url", defaults.base_url))).rstrip("/"),
        api_key=read_api_key(),
        server_name=str(server_cfg.get("name", defaults.server_name)),
        server_version=str(server_cfg.get("version", defaults.server_version)),
        transport=transport,
        host=read_env("MCP_SERVER_HOST") or str(server_cfg.get("host", defaults.host)),
        port=int(read_env("MCP_SERVER_PORT") or server_cfg.get("port", defaults.port)),
        log_level=(read_env("MCP_LOG_LEVEL") or str(server_cfg.get("log_level", defaults.log_level))).upper(),
        http_timeout=float(timeout) if timeout is not None else None,
        max_connections=int(http_cfg.get("max_connections", defaults.max_connections)),
        max_keepalive_connections=int(
            http_cfg.get("max_keepalive_connections", defaults.max_keepalive_connections)
        ),
    )
