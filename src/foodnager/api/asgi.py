"""ASGI entrypoint for the Foodnager API."""

from foodnager.api.app import create_app
from foodnager.containers import build_container

app = create_app(build_container())
