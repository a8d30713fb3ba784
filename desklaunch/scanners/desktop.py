"""Desktop entry file scanner."""

from pathlib import Path

DESKTOP_SUFFIX = "desktop"


def scan_desktop_files(directory: Path | str) -> list[Path]:
    """
    Enumerate candidate .desktop files in a single directory.
    
    An entry is a candidate when its name ends with "desktop" and it
    resolves (following symlinks) to an existing regular file. Note that
    the check is on the trailing characters only, so "mydesktop" matches.
    
    Args:
        directory: Directory to list (not searched recursively)
    
    Returns:
        Canonical absolute paths of the candidates, in filesystem order
    
    Raises:
        OSError: If the directory does not exist or cannot be read
    
    Example:
        >>> scan_desktop_files("/usr/share/applications")
        [PosixPath('/usr/share/applications/firefox.desktop'), ...]
    """
    candidates = []
    
    for entry in Path(directory).iterdir():
        location = _resolve_desktop_file(entry)
        if location is not None:
            candidates.append(location)
    
    return candidates


def _resolve_desktop_file(entry: Path) -> Path | None:
    """Return the canonical path of ``entry`` if it is a desktop file, else None."""
    if not entry.name.endswith(DESKTOP_SUFFIX):
        return None
    
    try:
        location = entry.resolve(strict=True)
    except (OSError, RuntimeError):
        # Dangling symlink or symlink loop
        return None
    
    if not location.is_file():
        return None
    
    return location
