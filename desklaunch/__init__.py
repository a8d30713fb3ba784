"""Launch desktop applications through an external menu program."""

__version__ = "0.3.0"
