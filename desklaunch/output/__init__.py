"""Output rendering module."""

from .render import render_registry

__all__ = ["render_registry"]
