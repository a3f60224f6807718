"""
Environment helpers.

The API key is only ever read from the environment, never from the YAML
config, so it does not end up in checked-in files.
"""
from __future__ import annotations

import os
from typing import Optional

API_KEY_ENV = "DUMBMONEY_API_KEY"
CONFIG_PATH_ENV = "DUMBMONEY_MCP_CONFIG"


def read_env(name: str) -> Optional[str]:
    """
    Return a stripped environment value, or None when unset or blank.
    """
    value = os.getenv(name, "").strip()
    return value or None


def read_api_key() -> str:
    return read_env(API_KEY_ENV) or ""
