"""ASGI entrypoint for the FoodCheck API."""

from foodcheck.api.app import create_app
from foodcheck.containers import build_container

app = create_app(build_container())
