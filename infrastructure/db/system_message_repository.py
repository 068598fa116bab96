"""
Supabase implementation of SystemMessageRepository.
"""
from typing import List

from supabase import Client

from application.exceptions import PersistenceError
from domain.models import MessageRole, SystemMessage
from infrastructure.db.errors import persistence_errors

MESSAGES_TABLE = "system_messages"


class SupabaseSystemMessageRepository:
    """Append-only chat transcript storage."""

    def __init__(self, client: Client):
        self._client = client

    def list_recent(self, user_id: str, limit: int = 50) -> List[SystemMessage]:
        with persistence_errors("list system messages"):
            result = (
                self._client.table(MESSAGES_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .order("id", desc=True)
                .limit(limit)
                .execute()
            )
        return [SystemMessage.model_validate(row) for row in result.data or []]

    def create(self, user_id: str, role: MessageRole, content: str) -> SystemMessage:
        with persistence_errors("create system message"):
            result = (
                self._client.table(MESSAGES_TABLE)
                .insert({"user_id": user_id, "role": role.value, "content": content})
                .execute()
            )
        if not result.data:
            raise PersistenceError("Insert into system_messages returned no row")
        return SystemMessage.model_validate(result.data[0])
