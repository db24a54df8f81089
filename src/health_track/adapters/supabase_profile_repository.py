"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from health_track.domain.profile import (
    Sex,
    UserProfile,
    parse_conditions,
    parse_goals,
    parse_restrictions,
)
from health_track.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("profiles")
            .select(
                "age, sex, height_cm, weight_kg, conditions, dietary_restrictions, "
                "goals"
            )
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Insert or replace the user's profile row."""
        self.client.table("profiles").upsert(
            {
                "user_id": str(user_id),
                "age": profile.age,
                "sex": profile.sex.value,
                "height_cm": profile.height_cm,
                "weight_kg": profile.weight_kg,
                "conditions": sorted(profile.conditions),
                "dietary_restrictions": sorted(profile.dietary_restrictions),
                "goals": sorted(profile.goals),
            },
            on_conflict="user_id",
        ).execute()


def _parse_row(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        age=int(row["age"]),
        sex=Sex(str(row["sex"]).lower()),
        height_cm=float(row["height_cm"]),
        weight_kg=float(row["weight_kg"]),
        conditions=parse_conditions(row.get("conditions") or []),
        dietary_restrictions=parse_restrictions(row.get("dietary_restrictions") or []),
        goals=parse_goals(row.get("goals") or []),
    )
