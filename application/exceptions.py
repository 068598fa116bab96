"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers and
mapped onto HTTP status codes by the API layer:

- PersistenceError          -> 503 (store unreachable; never retried)
- HunterNotFoundError       -> 404
- QuestNotCompletableError  -> 409 (unknown quest or already completed)
- ProfileValidationError    -> 400
- InvalidXPGainError        -> 400 (re-exported from domain.progression)

Quest generation failures never surface: the generator recovers with a
fallback quest.
"""

from domain.progression import InvalidXPGainError


class PersistenceError(Exception):
    """Error talking to the backing store.

    Raised by repository implementations when a query or RPC fails. The
    current request fails as a whole; callers must re-submit.
    """

    pass


class HunterNotFoundError(Exception):
    """No hunter profile exists for the given user ID."""

    def __init__(self, user_id: str):
        super().__init__(f"Hunter not found: {user_id}")
        self.user_id = user_id


class QuestNotCompletableError(Exception):
    """The quest does not exist, is not owned by the caller, or is already completed.

    Distinct from PersistenceError: nothing was written and no XP was awarded.
    """

    def __init__(self, quest_id: int):
        super().__init__(f"Quest {quest_id} not found or already completed")
        self.quest_id = quest_id


class ProfileValidationError(Exception):
    """A profile update violates a business rule."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


__all__ = [
    "PersistenceError",
    "HunterNotFoundError",
    "QuestNotCompletableError",
    "ProfileValidationError",
    "InvalidXPGainError",
]
