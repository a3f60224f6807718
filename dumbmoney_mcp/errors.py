from __future__ import annotations


class DumbMoneyError(Exception):
    """Base exception for all adapter errors."""
    pass


class InvalidInput(DumbMoneyError):
    """Tool arguments failed the declared shape, pattern or bound checks."""
    pass


class MissingCredential(DumbMoneyError):
    """A credential-gated tool was called without DUMBMONEY_API_KEY."""
    pass


class RemoteError(DumbMoneyError):
    """The DumbMoney API answered with a non-success status."""
    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"API error {status}: {body}")


class TransportError(DumbMoneyError):
    """Network-level failure talking to the DumbMoney API."""
    pass
