"""
Dev stub of the DumbMoney API.

Serves the seven routes the MCP tools call, with canned token data and an
in-memory agent registry. Run with:

    uvicorn dev_backend.main:app --port 8787
    DUMBMONEY_BASE_URL=http://127.0.0.1:8787 python -m dumbmoney_mcp.main
"""
from __future__ import annotations

import os
import secrets
import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Header, HTTPException, Query, Request

SERVICE_NAME = os.getenv("SERVICE_NAME", "dumbmoney-dev")

app = FastAPI(title=f"Dev stub backend for {SERVICE_NAME}")

TOKENS: List[Dict[str, Any]] = [
    {
        "name": "Dev Reflect",
        "symbol": "DREF",
        "mint": "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R",
        "reflection_bps": 500,
        "burn_bps": 100,
        "price_sol": 0.000012,
        "market_cap_usd": 42000.0,
        "bonding_curve_progress": 0.37,
        "total_reflections_sol": 12.5,
    },
    {
        "name": "Stub Coin",
        "symbol": "STUB",
        "mint": "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU",
        "reflection_bps": 300,
        "burn_bps": 0,
        "price_sol": 0.000003,
        "market_cap_usd": 9100.0,
        "bonding_curve_progress": 0.08,
        "total_reflections_sol": 1.75,
    },
]

AGENTS: Dict[str, Dict[str, Any]] = {}


def _find_token(mint: str) -> Dict[str, Any]:
    for token in TOKENS:
        if token["mint"] == mint:
            return token
    raise HTTPException(status_code=404, detail=f"Token {mint} not found")


def _require_agent(api_key: Optional[str]) -> Dict[str, Any]:
    agent = AGENTS.get(api_key or "")
    if agent is None:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return agent


@app.get("/api/tokens")
async def list_tokens() -> List[Dict[str, Any]]:
    return TOKENS


@app.get("/api/top-earners")
async def top_earners() -> List[Dict[str, Any]]:
    ranked = sorted(TOKENS, key=lambda t: t["total_reflections_sol"], reverse=True)
    return ranked[:10]


@app.post("/api/tokens/create")
async def create_token(
    request: Request,
    x_api_key: Optional[str] = Header(default=None),
) -> Dict[str, Any]:
    agent = _require_agent(x_api_key)
    payload = await request.json()
    mint = "".join(secrets.choice("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz") for _ in range(44))
    agent["tokens_created"] += 1
    return {"success": True, "mint": mint, "request": payload, "timestamp": time.time()}


@app.get("/api/tokens/{mint}")
async def get_token(mint: str) -> Dict[str, Any]:
    return _find_token(mint)


@app.get("/api/tokens/{mint}/earnings")
async def check_earnings(mint: str, wallet: str = Query(...)) -> Dict[str, Any]:
    _find_token(mint)
    return {
        "mint": mint,
        "wallet": wallet,
        "pending_sol": 0.0,
        "pending_usd": 0.0,
        "share_percent": 0.0,
        "holder_shares": 0,
    }


@app.post("/api/agents/register")
async def register_agent(request: Request) -> Dict[str, Any]:
    payload = await request.json()
    api_key = f"dm_{secrets.token_hex(16)}"
    AGENTS[api_key] = {
        "name": payload.get("name"),
        "description": payload.get("description"),
        "fee_wallet": payload.get("fee_wallet"),
        "tokens_created": 0,
        "registered_at": time.time(),
    }
    return {"success": True, "api_key": api_key, "name": payload.get("name")}


@app.get("/api/agents/me")
async def agent_me(x_api_key: Optional[str] = Header(default=None)) -> Dict[str, Any]:
    agent = _require_agent(x_api_key)
    return {**agent, "rate_limit_remaining": max(0, 10 - agent["tokens_created"])}
