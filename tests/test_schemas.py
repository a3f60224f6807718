"""
Input validation for the tool catalog: address pattern, length bounds,
basis-point ranges and optional-field omission.
"""
from __future__ import annotations

import pytest

from dumbmoney_mcp.errors import InvalidInput
from dumbmoney_mcp.tools import get_tool

from conftest import MINT, WALLET


class TestSolanaAddress:
    @pytest.mark.parametrize(
        "address",
        [
            "1" * 32,
            "z" * 44,
            MINT,
            WALLET,
        ],
    )
    def test_valid_addresses_accepted(self, address):
        params = get_tool("get_token").validate({"mint": address})
        assert params.mint == address

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "1" * 31,
            "1" * 45,
            "0" + "1" * 31,
            "O" + "1" * 31,
            "I" + "1" * 31,
            "l" + "1" * 31,
            "1" * 20 + " " + "1" * 20,
            "1" * 20 + "-" + "1" * 20,
        ],
    )
    def test_invalid_addresses_rejected(self, address):
        with pytest.raises(InvalidInput) as exc_info:
            get_tool("get_token").validate({"mint": address})
        assert "mint" in str(exc_info.value)

    def test_wallet_checked_on_earnings(self):
        with pytest.raises(InvalidInput) as exc_info:
            get_tool("check_earnings").validate({"mint": MINT, "wallet": "not-a-wallet"})
        assert "wallet" in str(exc_info.value)

    def test_fee_wallet_optional_but_checked(self):
        tool = get_tool("register_agent")
        assert tool.validate({"name": "bot"}).fee_wallet is None
        with pytest.raises(InvalidInput):
            tool.validate({"name": "bot", "fee_wallet": "0OIl" * 10})


class TestLengthBounds:
    def test_token_name_bound(self):
        tool = get_tool("create_token")
        tool.validate({"name": "n" * 32, "symbol": "SYM"})
        with pytest.raises(InvalidInput):
            tool.validate({"name": "n" * 33, "symbol": "SYM"})

    def test_symbol_bound(self):
        tool = get_tool("create_token")
        tool.validate({"name": "Token", "symbol": "S" * 10})
        with pytest.raises(InvalidInput):
            tool.validate({"name": "Token", "symbol": "S" * 11})

    def test_agent_name_and_description_bounds(self):
        tool = get_tool("register_agent")
        tool.validate({"name": "a" * 64, "description": "d" * 256})
        with pytest.raises(InvalidInput):
            tool.validate({"name": "a" * 65})
        with pytest.raises(InvalidInput):
            tool.validate({"name": "bot", "description": "d" * 257})

    def test_required_fields(self):
        with pytest.raises(InvalidInput) as exc_info:
            get_tool("create_token").validate({"name": "Token"})
        assert "symbol" in str(exc_info.value)


class TestBasisPoints:
    @pytest.mark.parametrize("field", ["reflection_bps", "burn_bps", "creator_fee_bps", "creator_reflection_bps"])
    def test_range_edges(self, field):
        tool = get_tool("create_token")
        base = {"name": "Token", "symbol": "TKN"}
        assert getattr(tool.validate({**base, field: 0}), field) == 0
        assert getattr(tool.validate({**base, field: 5000}), field) == 5000
        with pytest.raises(InvalidInput):
            tool.validate({**base, field: -1})
        with pytest.raises(InvalidInput):
            tool.validate({**base, field: 5001})
        with pytest.raises(InvalidInput):
            tool.validate({**base, field: 2.5})

    @pytest.mark.parametrize("value", ["500", True, False, 500.0])
    def test_non_integers_rejected(self, value):
        with pytest.raises(InvalidInput):
            get_tool("create_token").validate({"name": "Token", "symbol": "TKN", "reflection_bps": value})


class TestCreateTokenBody:
    def test_absent_fields_omitted(self):
        tool = get_tool("create_token")
        params = tool.validate({"name": "Token", "symbol": "TKN", "burn_bps": 0})
        assert tool.build_body(params) == {"name": "Token", "symbol": "TKN", "burn_bps": 0}

    def test_image_url_forwarded_verbatim(self):
        tool = get_tool("create_token")
        params = tool.validate({"name": "Token", "symbol": "TKN", "image_url": "https://example.com"})
        assert tool.build_body(params)["image_url"] == "https://example.com"

    def test_image_url_must_be_url(self):
        with pytest.raises(InvalidInput):
            get_tool("create_token").validate({"name": "Token", "symbol": "TKN", "image_url": "not a url"})

    def test_image_options_not_exclusive(self):
        tool = get_tool("create_token")
        params = tool.validate({
            "name": "Token",
            "symbol": "TKN",
            "image_url": "https://example.com/logo.png",
            "image_base64": "aGVsbG8=",
            "dalle_prompt": "a cat",
        })
        body = tool.build_body(params)
        assert {"image_url", "image_base64", "dalle_prompt"} <= set(body)

    def test_unknown_fields_rejected(self):
        with pytest.raises(InvalidInput):
            get_tool("create_token").validate({"name": "Token", "symbol": "TKN", "supply": 10})
