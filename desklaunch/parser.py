"""Parsing of freedesktop .desktop entry files."""

import configparser
from pathlib import Path

from desklaunch.models import Application

DESKTOP_ENTRY_SECTION = "Desktop Entry"
FIELD_CODE_PREFIX = "%"


class MalformedEntryError(ValueError):
    """A desktop entry field holds a value that cannot be interpreted."""


def parse_desktop_file(path: Path | str) -> Application | None:
    """
    Parse a .desktop file into an Application.

    Files that should not appear in the menu are skipped by returning None:
    unreadable or syntactically broken files, entries with NoDisplay=true,
    entries whose Type is not Application, entries missing Name or Exec,
    and entries whose Terminal value is not a boolean.

    Args:
        path: Path to the .desktop file

    Returns:
        The parsed Application, or None if the file is skipped

    Example:
        >>> app = parse_desktop_file("/usr/share/applications/htop.desktop")
        >>> app.name, app.body.exec, app.body.terminal
        ('Htop', ['htop'], True)
    """
    try:
        path = Path(path).resolve()
        entry = _read_desktop_entry(path)
    except (OSError, RuntimeError, UnicodeDecodeError, configparser.Error):
        return None

    if entry is None:
        return None

    if entry.get("NoDisplay") == "true":
        return None

    if entry.get("Type") != "Application":
        return None

    try:
        terminal = parse_terminal(entry.get("Terminal"))
    except MalformedEntryError:
        return None

    name = entry.get("Name")
    exec_line = entry.get("Exec")
    if name is None or exec_line is None:
        return None

    return Application.create(
        name=name,
        path=path,
        exec=split_exec(exec_line),
        terminal=terminal
    )


def split_exec(exec_line: str) -> list[str]:
    """
    Split an Exec value into command tokens.

    Tokens starting with % are field codes (%f, %u, %F, %U, %i, ...) and are
    dropped without substitution.

    Example:
        >>> split_exec("firefox %u --new-window")
        ['firefox', '--new-window']
    """
    return [token for token in exec_line.strip().split() if not token.startswith(FIELD_CODE_PREFIX)]


def parse_terminal(value: str | None) -> bool:
    """
    Interpret the Terminal field.

    Absent means False. Otherwise the value is compared case-insensitively
    against "true" and "false".

    Raises:
        MalformedEntryError: If the value is neither true nor false
    """
    if value is None:
        return False

    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    raise MalformedEntryError(f"Terminal must be true or false, got {value!r}")


def _read_desktop_entry(path: Path) -> dict[str, str] | None:
    """Read the [Desktop Entry] section of a file, or None if it has none."""
    parser = configparser.ConfigParser(
        interpolation=None,
        delimiters=("=",),
        strict=False,
        comment_prefixes=("#",),
        inline_comment_prefixes=None,
        empty_lines_in_values=False,
        default_section="\x00no-defaults",
    )
    # Keys are case-sensitive in desktop entries
    parser.optionxform = str  # type: ignore[assignment, method-assign]

    # No continuation lines in desktop entries: an indented line is its own key
    with open(path, "r", encoding="utf-8") as f:
        parser.read_string("".join(line.lstrip() for line in f), source=str(path))

    if not parser.has_section(DESKTOP_ENTRY_SECTION):
        return None

    return dict(parser.items(DESKTOP_ENTRY_SECTION))
