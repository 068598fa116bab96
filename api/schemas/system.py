"""
System Chat Schemas.
"""

from pydantic import BaseModel, Field, field_validator

MAX_MESSAGE_LENGTH = 1000


class SystemChatRequest(BaseModel):
    """Request body for POST /api/system/chat."""

    message: str = Field(..., description="Message for The System")

    @field_validator("message")
    @classmethod
    def check_message(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Valid message is required")
        if len(v) > MAX_MESSAGE_LENGTH:
            raise ValueError(f"Message too long. Maximum {MAX_MESSAGE_LENGTH} characters.")
        return v
