"""ASGI entrypoint for the HealthTrack API."""

from health_track.api.app import create_app
from health_track.containers import build_container

app = create_app(build_container())
