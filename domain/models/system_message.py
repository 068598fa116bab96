"""
System chat transcript entries. Append-only.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class SystemMessage(BaseModel):
    """One line of a hunter's conversation with The System."""

    model_config = ConfigDict(extra="ignore")

    id: int
    user_id: str
    role: MessageRole
    content: str
    created_at: Optional[datetime] = None
