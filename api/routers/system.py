"""
System chat router.

Endpoints:
- GET /api/system/messages: transcript, newest first
- POST /api/system/chat: one turn of conversation with The System
"""

import logging

from fastapi import APIRouter, Depends, Query

from api.deps import get_current_user, get_system_chat_use_case
from api.schemas import SystemChatRequest
from application.use_cases import SystemChatUseCase
from backend.auth import AuthenticatedUser

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/system",
    tags=["System"],
)


@router.get("/messages")
def list_messages(
    limit: int = Query(default=50, ge=1, le=100),
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: SystemChatUseCase = Depends(get_system_chat_use_case),
):
    messages = use_case.history(user.id, limit)
    return {"success": True, "data": [m.model_dump(mode="json") for m in messages]}


@router.post("/chat")
async def chat(
    body: SystemChatRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: SystemChatUseCase = Depends(get_system_chat_use_case),
):
    """
    Send a message to The System.

    Provider failures are answered with a fixed "temporarily unavailable"
    reply; nothing is stored in that case.
    """
    result = await use_case.execute(user.id, body.message)
    return {"success": True, "data": {"response": result.reply}}
