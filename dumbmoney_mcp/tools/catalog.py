from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from mcp import types
from pydantic import ValidationError

from ..errors import InvalidInput
from .schemas import (
    CheckEarningsInput,
    CreateTokenInput,
    GetTokenInput,
    NoArguments,
    RegisterAgentInput,
    ToolInput,
)


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_model: Type[ToolInput]
    method: str
    path: str
    requires_credential: bool = False
    credential_hint: str = ""
    failure_message: str = "Request failed"

    @property
    def read_only(self) -> bool:
        return self.method == "GET"

    def validate(self, arguments: Optional[Mapping[str, Any]]) -> ToolInput:
        """Validate raw tool arguments, raising InvalidInput on any violation."""
        try:
            return self.input_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            raise InvalidInput(_describe_validation_error(self.name, exc)) from exc

    def build_path(self, params: ToolInput) -> str:
        # Values are interpolated as-is; address fields are Base58 only.
        return self.path.format(**params.model_dump())

    def build_body(self, params: ToolInput) -> Dict[str, Any]:
        return params.model_dump(mode="json", exclude_none=True)

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(),
            annotations=types.ToolAnnotations(
                readOnlyHint=self.read_only,
                openWorldHint=True,
            ),
        )


def _describe_validation_error(tool_name: str, exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return f"Invalid input for {tool_name}: " + "; ".join(problems)


CATALOG: Tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list_tokens",
        description=(
            "List all reflection tokens on DumbMoney. Returns name, symbol, mint address, "
            "reflection rate, price, market cap, bonding curve progress, and total reflections paid."
        ),
        input_model=NoArguments,
        method="GET",
        path="/api/tokens",
    ),
    ToolDefinition(
        name="get_token",
        description=(
            "Get detailed info about a specific DumbMoney reflection token by its Solana mint "
            "address. Returns on-chain data including price, reflection rate, burn rate, market "
            "cap, bonding curve progress, and total reflections paid."
        ),
        input_model=GetTokenInput,
        method="GET",
        path="/api/tokens/{mint}",
    ),
    ToolDefinition(
        name="check_earnings",
        description=(
            "Check a wallet's pending reflection earnings for a specific DumbMoney token. Returns "
            "pending SOL and USD earnings, share percentage, and holder shares. Returns zero "
            "values if the wallet has no position."
        ),
        input_model=CheckEarningsInput,
        method="GET",
        path="/api/tokens/{mint}/earnings?wallet={wallet}",
    ),
    ToolDefinition(
        name="top_earners",
        description=(
            "Get the top 10 DumbMoney tokens ranked by total reflections paid to holders. Shows "
            "which tokens have generated the most passive income for their holders."
        ),
        input_model=NoArguments,
        method="GET",
        path="/api/top-earners",
    ),
    ToolDefinition(
        name="create_token",
        description=(
            "Launch a new reflection token on DumbMoney. Creates the token on-chain with "
            "Token-2022 transfer fees. Requires DUMBMONEY_API_KEY to be set. The server handles "
            "image upload, metadata, and on-chain creation. Provide one of: image_url (existing "
            "URL), image_base64 (raw image), or dalle_prompt (AI-generated image)."
        ),
        input_model=CreateTokenInput,
        method="POST",
        path="/api/tokens/create",
        requires_credential=True,
        credential_hint=(
            "DUMBMONEY_API_KEY not set. Set it as an environment variable to create tokens."
        ),
        failure_message="Token creation failed",
    ),
    ToolDefinition(
        name="register_agent",
        description=(
            "Register as a new agent on DumbMoney to get your own API key for creating tokens. "
            "The API key is shown only once - save it securely. No authentication required."
        ),
        input_model=RegisterAgentInput,
        method="POST",
        path="/api/agents/register",
        failure_message="Registration failed",
    ),
    ToolDefinition(
        name="get_my_agent_info",
        description=(
            "Get your agent profile, token creation count, and remaining rate limits. Requires "
            "DUMBMONEY_API_KEY to be set."
        ),
        input_model=NoArguments,
        method="GET",
        path="/api/agents/me",
        requires_credential=True,
        credential_hint=(
            "DUMBMONEY_API_KEY not set. Register first with register_agent, then set the "
            "returned API key."
        ),
        failure_message="Failed to get agent info",
    ),
)

TOOLS_BY_NAME: Mapping[str, ToolDefinition] = MappingProxyType(
    {definition.name: definition for definition in CATALOG}
)


def get_tool(name: str) -> ToolDefinition:
    definition = TOOLS_BY_NAME.get(name)
    if definition is None:
        raise InvalidInput(f"Unknown tool '{name}'")
    return definition
