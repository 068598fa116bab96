"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- profile: Profile update shapes
- system: System chat request
"""

from api.schemas.profile import ProfileUpdateRequest
from api.schemas.system import MAX_MESSAGE_LENGTH, SystemChatRequest

__all__ = [
    "ProfileUpdateRequest",
    "SystemChatRequest",
    "MAX_MESSAGE_LENGTH",
]
