"""
Translation of Supabase client failures into application errors.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from application.exceptions import (
    HunterNotFoundError,
    PersistenceError,
    QuestNotCompletableError,
)

logger = logging.getLogger(__name__)

# Raised deliberately by repositories; never re-wrapped
_PASSTHROUGH = (PersistenceError, HunterNotFoundError, QuestNotCompletableError)


@contextmanager
def persistence_errors(action: str) -> Iterator[None]:
    """
    Re-raise any client or transport failure as PersistenceError.

    Args:
        action: Short description used in the log line and error message
    """
    try:
        yield
    except _PASSTHROUGH:
        raise
    except Exception as e:
        error_msg = str(e)
        logger.exception("Supabase %s failed", action)
        if "PGRST" in error_msg or "row-level security" in error_msg.lower():
            logger.error(
                "RLS/Permissions error: the backend must use SUPABASE_SERVICE_ROLE_KEY"
            )
        raise PersistenceError(f"{action} failed: {e}") from e
