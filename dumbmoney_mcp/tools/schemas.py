"""
Input models for the DumbMoney tools.

Every tool argument object is a pydantic model. The models double as the
published MCP input schema (``model_json_schema``) and as the validator the
dispatcher runs before any network call.
"""
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter

# Base58 alphabet without 0, I, O and l
SOLANA_ADDRESS_PATTERN = r"^[1-9A-HJ-NP-Za-km-z]{32,44}$"

MAX_BPS = 5000

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate only; the caller's string is forwarded untouched.
    _URL_ADAPTER.validate_python(value)
    return value


SolanaAddress = Annotated[str, Field(pattern=SOLANA_ADDRESS_PATTERN)]
# strict: "500" and true are not integers
BasisPoints = Annotated[int, Field(ge=0, le=MAX_BPS, strict=True)]
UrlString = Annotated[str, AfterValidator(_check_url), Field(json_schema_extra={"format": "uri"})]


class ToolInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class NoArguments(ToolInput):
    pass


class GetTokenInput(ToolInput):
    mint: SolanaAddress = Field(description="Solana mint address of the token")


class CheckEarningsInput(ToolInput):
    mint: SolanaAddress = Field(description="Solana mint address of the token")
    wallet: SolanaAddress = Field(description="Solana wallet address to check earnings for")


class CreateTokenInput(ToolInput):
    """
    Token launch parameters.

    Provide one of image_url, image_base64 or dalle_prompt. The remote API
    decides what happens when several are given.
    """

    name: str = Field(max_length=32, description="Token name (max 32 chars)")
    symbol: str = Field(max_length=10, description="Token ticker symbol (max 10 chars)")
    description: Optional[str] = Field(default=None, description="Token description")
    reflection_bps: Optional[BasisPoints] = Field(
        default=None,
        description="Reflection fee in basis points (default 500 = 5%)",
    )
    burn_bps: Optional[BasisPoints] = Field(
        default=None,
        description="Burn fee in basis points (default 100 = 1%)",
    )
    creator_fee_bps: Optional[BasisPoints] = Field(
        default=None,
        description="Creator fee in basis points (default 100 = 1%)",
    )
    creator_reflection_bps: Optional[BasisPoints] = Field(
        default=None,
        description="Creator reflection share in basis points (default 100)",
    )
    image_url: Optional[UrlString] = Field(
        default=None,
        description="Existing image URL to use for the token",
    )
    image_base64: Optional[str] = Field(
        default=None,
        description="Base64-encoded image data (max 5MB)",
    )
    dalle_prompt: Optional[str] = Field(
        default=None,
        description="DALL-E prompt to generate token image",
    )


class RegisterAgentInput(ToolInput):
    name: str = Field(max_length=64, description="Agent name (e.g., 'my-trading-bot')")
    description: Optional[str] = Field(
        default=None,
        max_length=256,
        description="What this agent does",
    )
    fee_wallet: Optional[SolanaAddress] = Field(
        default=None,
        description="Optional Solana wallet address to receive creator fees from tokens you create",
    )
