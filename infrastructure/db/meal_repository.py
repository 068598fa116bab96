"""
Supabase implementation of MealRepository.
"""
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

from supabase import Client

from application.exceptions import PersistenceError
from domain.models import Meal, MealCreate
from infrastructure.db.errors import persistence_errors

MEALS_TABLE = "meals"


class SupabaseMealRepository:
    """Meal log storage."""

    def __init__(self, client: Client):
        self._client = client

    def list(self, user_id: str, day: Optional[date] = None) -> List[Meal]:
        with persistence_errors("list meals"):
            query = self._client.table(MEALS_TABLE).select("*").eq("user_id", user_id)
            if day is not None:
                start = datetime.combine(day, time.min, tzinfo=timezone.utc)
                query = (
                    query.gte("date", start.isoformat())
                    .lt("date", (start + timedelta(days=1)).isoformat())
                )
            result = query.order("date", desc=True).execute()
        return [Meal.model_validate(row) for row in result.data or []]

    def create(self, user_id: str, meal: MealCreate) -> Meal:
        record = meal.model_dump(mode="json", exclude_none=True)
        record["user_id"] = user_id

        with persistence_errors("create meal"):
            result = self._client.table(MEALS_TABLE).insert(record).execute()
        if not result.data:
            raise PersistenceError("Insert into meals returned no row")
        return Meal.model_validate(result.data[0])
