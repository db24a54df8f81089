"""Supabase repository for gamification counters."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from health_track.domain.scores import GamificationState
from health_track.services.progress import GamificationRepository


def _parse_day(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


@dataclass
class SupabaseGamificationRepository(GamificationRepository):
    """Supabase implementation for XP, streaks and trophies."""

    client: Client

    def get_state(self, user_id: UUID) -> GamificationState | None:
        """Return the stored counters for a user."""
        response = (
            self.client.table("gamification")
            .select(
                "xp, current_streak, longest_streak, health_points, trophies, "
                "last_checked"
            )
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return GamificationState(
            xp=int(row.get("xp", 0)),
            current_streak=int(row.get("current_streak", 0)),
            longest_streak=int(row.get("longest_streak", 0)),
            health_points=int(row.get("health_points", 100)),
            trophies=frozenset(row.get("trophies") or []),
            last_checked=_parse_day(row.get("last_checked")),
        )

    def save_state(self, user_id: UUID, state: GamificationState) -> None:
        """Insert or replace the user's counters."""
        self.client.table("gamification").upsert(
            {
                "user_id": str(user_id),
                "xp": state.xp,
                "current_streak": state.current_streak,
                "longest_streak": state.longest_streak,
                "health_points": state.health_points,
                "trophies": sorted(state.trophies),
                "last_checked": (
                    state.last_checked.isoformat() if state.last_checked else None
                ),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
