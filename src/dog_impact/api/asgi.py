"""ASGI entrypoint for the dog impact API."""

from dog_impact.api.app import create_app
from dog_impact.containers import build_container

app = create_app(build_container())
