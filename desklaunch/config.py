"""Configuration file management and environment lookups for desklaunch."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml


class MissingEnvironmentError(RuntimeError):
    """A required environment variable is not set."""

    def __init__(self, variable: str):
        super().__init__(f"environment variable ${variable} is not set")
        self.variable = variable


@dataclass
class Config:
    """Configuration for desklaunch."""

    # Terminal emulator for Terminal=true applications (overrides $TERM)
    terminal: str | None = None

    # Directories to search instead of the system and user defaults
    search_dirs: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.terminal is not None and not str(self.terminal).strip():
            raise ValueError("terminal must not be empty")
        if isinstance(self.search_dirs, str):
            raise ValueError("search_dirs must be a list of directories")

    def expanded_search_dirs(self) -> list[Path]:
        """Return the configured search directories with ~ expanded."""
        return [Path(d).expanduser() for d in self.search_dirs]


def get_env(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Look up an environment variable in ``environ`` (defaults to the process environment)."""
    if environ is None:
        environ = os.environ
    return environ.get(name)


def home_directory(environ: Mapping[str, str] | None = None) -> Path:
    """
    Return the user's home directory from $HOME.

    Raises:
        MissingEnvironmentError: If HOME is not set
    """
    home = get_env("HOME", environ)
    if home is None:
        raise MissingEnvironmentError("HOME")
    return Path(home)


def default_config_paths(environ: Mapping[str, str] | None = None) -> list[Path]:
    """Locations checked for a config file when none is given explicitly."""
    try:
        home = home_directory(environ)
    except MissingEnvironmentError:
        return []
    return [
        home / ".config" / "desklaunch" / "config.yaml",
        home / ".config" / "desklaunch" / "config.yml",
        home / ".desklaunch.yaml",
    ]


def load_config(
    config_path: Path | str | None = None,
    environ: Mapping[str, str] | None = None
) -> Config:
    """
    Load configuration from file.

    Args:
        config_path: Path to config file. If None, checks default locations:
            1. ~/.config/desklaunch/config.yaml
            2. ~/.config/desklaunch/config.yml
            3. ~/.desklaunch.yaml
        environ: Environment used to find the home directory

    Returns:
        Config object with loaded settings (or defaults if no config found)

    Raises:
        FileNotFoundError: If an explicit config path does not exist
        ValueError: If the config file cannot be parsed
    """
    if config_path:
        config_file = Path(config_path).expanduser()
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
    else:
        config_file = None
        for path in default_config_paths(environ):
            if path.exists():
                config_file = path
                break

        if not config_file:
            return Config()

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("top level must be a mapping")
        return Config(**data)
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_file}: {e}") from e


def save_example_config(output_path: Path | str) -> None:
    """
    Save an example configuration file with all options documented.

    Args:
        output_path: Where to save the example config
    """
    example = """# desklaunch configuration file
# Place at ~/.config/desklaunch/config.yaml or ~/.desklaunch.yaml

# Terminal emulator for applications with Terminal=true.
# The --term option wins over this; $TERM is used when neither is set.
terminal: alacritty

# Directories to search for .desktop files, in order.
# Later directories override earlier ones for applications with the same name.
# Leave empty to use /usr/share/applications and ~/.local/share/applications.
search_dirs: []
  # - /usr/share/applications
  # - /var/lib/flatpak/exports/share/applications
  # - ~/.local/share/applications
"""

    path = Path(output_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(example, encoding='utf-8')
