"""Declaration of the root package newsfeed."""

from newsfeed.app import app
from newsfeed.server import run

__all__ = ["app", "main"]


def main() -> None:
    """Run the application server."""
    run()
