"""Launching the selected application, directly or inside a terminal emulator."""

import sys
from collections.abc import Callable, Mapping

from desklaunch.config import get_env
from desklaunch.models import ApplicationBody
from desklaunch.util.shell import run_attached

FALLBACK_TERMINAL = "xterm"
TERMINAL_ENV_VAR = "TERM"


class LaunchError(RuntimeError):
    """The application (or its terminal emulator) could not be started."""


def _warn_stderr(message: str) -> None:
    print(message, file=sys.stderr)


def resolve_terminal(
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
    warn: Callable[[str], None] = _warn_stderr
) -> str:
    """
    Pick the terminal emulator for Terminal=true applications.
    
    Order: explicit override, then $TERM, then xterm (with a warning).
    """
    if override:
        return override
    
    terminal = get_env(TERMINAL_ENV_VAR, environ)
    if terminal:
        return terminal
    
    warn(f"could not infer terminal emulator, assuming {FALLBACK_TERMINAL}")
    return FALLBACK_TERMINAL


def build_command(body: ApplicationBody, terminal: str | None = None) -> list[str]:
    """
    Build the argv used to launch ``body``.
    
    Terminal applications are wrapped as ``<terminal> -e <exec...>``; the
    terminal argument is ignored for the others.
    
    Raises:
        LaunchError: If the application needs a terminal but none was given,
            or a direct launch has no command tokens
    """
    if body.terminal:
        if not terminal:
            raise LaunchError(f"'{body.path}' needs a terminal emulator")
        return [terminal, "-e", *body.exec]
    
    if not body.exec:
        raise LaunchError(f"'{body.path}' has no command to execute")
    
    return list(body.exec)


def launch(
    body: ApplicationBody,
    terminal_override: str | None = None,
    environ: Mapping[str, str] | None = None,
    warn: Callable[[str], None] = _warn_stderr
) -> None:
    """
    Start the application and wait for it to exit.
    
    The application's own exit status is not inspected; only a failure
    to spawn it is an error.
    
    Raises:
        LaunchError: If the process cannot be spawned
    """
    terminal = resolve_terminal(terminal_override, environ, warn) if body.terminal else None
    cmd = build_command(body, terminal)
    
    try:
        run_attached(cmd)
    except OSError as e:
        if terminal:
            raise LaunchError(f"error when executing '{terminal} -e {body.command_line}': {e}") from e
        raise LaunchError(f"error when executing '{body.command_line}': {e}") from e
