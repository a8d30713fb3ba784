"""Utility module for desklaunch."""

from .shell import ShellResult, run, run_attached

__all__ = ["ShellResult", "run", "run_attached"]
