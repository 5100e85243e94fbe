"""Supabase repository for nutrition statistics."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_nutrition_log_repository import (
    COLUMNS,
    TABLE,
    parse_log,
)
from fitness_tracker.domain.nutrition import NutritionLog
from fitness_tracker.services.nutrition_stats import NutritionStatsRepository


@dataclass
class SupabaseNutritionStatsRepository(NutritionStatsRepository):
    """Supabase implementation for stats queries."""

    client: Client

    def list_logs_in_range(
        self, user_id: UUID, start_date: date | None, end_date: date | None
    ) -> list[NutritionLog]:
        """Return the user's logs between the given days, oldest first."""
        query = self.client.table(TABLE).select(COLUMNS).eq("user_id", str(user_id))
        if start_date is not None:
            query = query.gte("log_date", start_date.isoformat())
        if end_date is not None:
            query = query.lte("log_date", end_date.isoformat())
        response = query.order("log_date", desc=False).execute()
        return [parse_log(row) for row in response.data or []]
