"""Command-line interface for the authorship tool."""

from .main import app

__all__ = ["app"]
