"""User profile service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from health_track.calculators.targets import compute_targets
from health_track.domain.errors import ProfileNotFoundError
from health_track.domain.profile import UserProfile


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile, if any."""

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Create or replace the user's profile."""


@dataclass
class ProfileService:
    """Service for reading and updating profiles."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the user's profile or raise ProfileNotFoundError."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(f"No profile for user {user_id}")
        return profile

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Validate that the profile yields usable targets, then store it."""
        compute_targets(profile)
        self.repository.save_profile(user_id, profile)
