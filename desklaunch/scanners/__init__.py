"""Scanners for locating application descriptors."""

from .desktop import scan_desktop_files

__all__ = ["scan_desktop_files"]
