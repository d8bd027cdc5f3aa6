"""Shared Schemas - envelopes reused by every module."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Write acknowledgement."""
    message: str


class ErrorResponse(BaseModel):
    """Error envelope produced by CommerceError.to_response()."""
    error: str
    code: str
    details: list[dict[str, str]] | None = None
