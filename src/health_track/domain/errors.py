"""Domain errors."""


class InvalidProfileError(ValueError):
    """Raised when a profile produces non-finite or non-positive targets."""


class ProfileNotFoundError(LookupError):
    """Raised when a user has no stored profile."""
