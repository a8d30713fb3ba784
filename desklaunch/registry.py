"""Application registry built from one or more directories of .desktop files."""

from collections.abc import Iterable, Mapping
from pathlib import Path

from desklaunch.config import home_directory
from desklaunch.models import Application, ApplicationBody
from desklaunch.parser import parse_desktop_file
from desklaunch.scanners.desktop import scan_desktop_files

SYSTEM_APPLICATIONS_DIR = Path("/usr/share/applications")
USER_APPLICATIONS_SUBDIR = Path(".local") / "share" / "applications"


def default_search_dirs(environ: Mapping[str, str] | None = None) -> list[Path]:
    """
    Return the default search directories in merge order.

    The user directory comes last so that user entries override system
    entries with the same name.

    Raises:
        MissingEnvironmentError: If $HOME is not set
    """
    return [
        SYSTEM_APPLICATIONS_DIR,
        home_directory(environ) / USER_APPLICATIONS_SUBDIR,
    ]


def load_directory(directory: Path | str) -> list[Application]:
    """
    Parse every visible application in a directory.

    A directory that is missing or unreadable contributes no applications.
    """
    try:
        candidates = scan_desktop_files(directory)
    except OSError:
        return []

    apps = []
    # Duplicate names within one directory: last path in sorted order wins
    for candidate in sorted(candidates):
        app = parse_desktop_file(candidate)
        if app is not None:
            apps.append(app)

    return apps


def build_registry(directories: Iterable[Path | str]) -> dict[str, ApplicationBody]:
    """
    Merge the applications of ``directories`` into a name -> body mapping.

    Directories are processed in the order given; when two entries share
    a name, the one from the later directory wins.

    Example:
        >>> registry = build_registry(default_search_dirs())
        >>> registry["Htop"].exec
        ['htop']
    """
    registry: dict[str, ApplicationBody] = {}

    for directory in directories:
        for app in load_directory(directory):
            registry[app.name] = app.body

    return registry
