"""
Unit tests for api/schemas
"""

import pytest
from pydantic import ValidationError

from api.schemas import MAX_MESSAGE_LENGTH, ProfileUpdateRequest, SystemChatRequest


@pytest.mark.unit
class TestProfileUpdateRequest:
    """PATCH /api/profile accepts three shapes."""

    def test_avatar_only(self):
        update = ProfileUpdateRequest(profile_image_url="https://cdn.example.com/a.png").to_update()
        assert update.model_dump(exclude_unset=True) == {"profile_image_url": "https://cdn.example.com/a.png"}

    def test_avatar_must_be_url(self):
        with pytest.raises(ValidationError):
            ProfileUpdateRequest(profile_image_url="not a url")

    def test_class_only(self):
        update = ProfileUpdateRequest(character_class="  Assassin ").to_update()
        assert update.model_dump(exclude_unset=True) == {"character_class": "Assassin"}

    def test_class_with_other_fields_rejected(self):
        with pytest.raises(ValidationError, match="on its own"):
            ProfileUpdateRequest(first_name="Jin", character_class="Assassin")

    def test_full_profile(self):
        update = ProfileUpdateRequest(
            first_name=" Jin ", age=24, weight=70.5, body_fat_percentage=14, onboarding_completed=True,
        ).to_update()
        data = update.model_dump(exclude_unset=True)
        assert data["first_name"] == "Jin"
        assert data["onboarding_completed"] is True

    @pytest.mark.parametrize("body", [{}, {"last_name": "Woo"}, {"first_name": "   "}])
    def test_full_profile_requires_first_name(self, body):
        with pytest.raises(ValidationError):
            ProfileUpdateRequest(**body)

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            ProfileUpdateRequest(first_name="Jin", xp=999999)

    def test_out_of_range_values(self):
        with pytest.raises(ValidationError):
            ProfileUpdateRequest(first_name="Jin", age=7)


@pytest.mark.unit
class TestSystemChatRequest:
    def test_message_stripped(self):
        assert SystemChatRequest(message="  hello  ").message == "hello"

    @pytest.mark.parametrize("message", ["", "   ", "x" * (MAX_MESSAGE_LENGTH + 1)])
    def test_invalid_messages(self, message):
        with pytest.raises(ValidationError):
            SystemChatRequest(message=message)

    def test_max_length_accepted(self):
        assert len(SystemChatRequest(message="x" * MAX_MESSAGE_LENGTH).message) == MAX_MESSAGE_LENGTH
