"""ASGI entrypoint for the Bitewise API."""

from bitewise.api.app import create_app
from bitewise.containers import build_container

app = create_app(build_container())
