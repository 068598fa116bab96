"""
AI Request Context for tracking metadata in AI API calls.

This module provides the AIRequestContext dataclass that should be passed
to all text-generation calls for observability in tools like Helicone.

Usage:
    from shared.ai_context import AIRequestContext

    context = AIRequestContext(
        user_id="user_123",
        feature_name="quest_generation",
        environment="production",
    )

    # Pass to the provider
    await text_generator.complete(messages, model=model, context=context)
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional


VALID_ENVIRONMENTS = {"production", "staging", "development", "test"}

# Header name validation pattern (RFC 7230)
_VALID_HEADER_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\-]+$")


def _sanitize_header_value(value: str) -> str:
    """
    Sanitize a header value to prevent header injection.

    Keeps only printable ASCII characters.
    """
    return "".join(char for char in value if char.isprintable() and ord(char) < 128)


def _sanitize_header_name(name: str) -> str:
    """Normalise a property name into a header name, or '' if invalid."""
    sanitized = name.replace("_", "-").title()
    if _VALID_HEADER_NAME_PATTERN.match(sanitized):
        return sanitized
    return ""


@dataclass
class AIRequestContext:
    """
    Context to attach to AI API calls for tracking and observability.

    This enables:
    - Per-user cost attribution (user_id)
    - Feature cost breakdown (feature_name)
    - Environment tracking (environment)

    Args:
        user_id: The hunter making the request
        feature_name: The feature triggering the AI call
        session_id: Optional session identifier
        environment: Deployment environment
        extra: Additional metadata key-value pairs
    """
    user_id: Optional[str] = None
    feature_name: Optional[str] = None
    session_id: Optional[str] = None
    environment: str = "production"
    extra: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate context after initialization."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment '{self.environment}'. "
                f"Must be one of: {', '.join(sorted(VALID_ENVIRONMENTS))}"
            )

        if self.user_id is not None and not self.user_id:
            raise ValueError("user_id must be a non-empty string if provided")

        if self.feature_name is not None and not self.feature_name:
            raise ValueError("feature_name must be a non-empty string if provided")

    def to_tracking_headers(self) -> Dict[str, str]:
        """
        Convert context to Helicone tracking headers.

        Header values are sanitized to prevent header injection attacks.
        """
        headers: Dict[str, str] = {
            "Helicone-Property-Environment": _sanitize_header_value(self.environment),
        }

        if self.user_id:
            headers["Helicone-User-Id"] = _sanitize_header_value(self.user_id)
        if self.session_id:
            headers["Helicone-Session-Id"] = _sanitize_header_value(self.session_id)
        if self.feature_name:
            headers["Helicone-Property-Feature"] = _sanitize_header_value(self.feature_name)

        for key, value in self.extra.items():
            header_name = _sanitize_header_name(key)
            if header_name:
                headers[f"Helicone-Property-{header_name}"] = _sanitize_header_value(str(value))

        return headers
