"""Mapping of domain errors onto HTTP responses."""

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from health_track.domain.errors import ProfileNotFoundError


@contextmanager
def domain_errors() -> Iterator[None]:
    """Translate missing profiles to 404 and invalid input to 422."""
    try:
        yield
    except ProfileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except (ValueError, TypeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
