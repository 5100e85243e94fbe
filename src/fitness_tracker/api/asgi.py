"""ASGI entrypoint, served as `fitness_tracker.api.asgi:app`."""

from fitness_tracker.api.app import create_app
from fitness_tracker.config import Settings
from fitness_tracker.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
