"""API module for the Decade Movie Filter."""

from .main import create_app

__all__ = ["create_app"]
