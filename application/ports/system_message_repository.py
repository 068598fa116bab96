"""
System Message Repository Interface (Port).

Append-only storage for a hunter's chat transcript with The System.
"""
from typing import Protocol, List

from domain.models import MessageRole, SystemMessage


class SystemMessageRepository(Protocol):
    """
    Abstract interface for chat transcript persistence.
    """

    def list_recent(self, user_id: str, limit: int = 50) -> List[SystemMessage]:
        """Get a hunter's most recent messages, newest first."""
        ...

    def create(self, user_id: str, role: MessageRole, content: str) -> SystemMessage:
        """Append a message to the transcript."""
        ...
