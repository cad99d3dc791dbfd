"""ASGI entrypoint for the caffeine check API."""

from caffeine_check.api.app import create_app
from caffeine_check.containers import build_container

app = create_app(build_container())
