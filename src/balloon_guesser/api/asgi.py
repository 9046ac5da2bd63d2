"""ASGI entrypoint for the balloon guesser API."""

from balloon_guesser.api.app import create_app
from balloon_guesser.containers import build_container

app = create_app(build_container())
