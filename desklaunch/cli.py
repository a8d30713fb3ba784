"""Command-line interface for desklaunch."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from desklaunch import __version__
from desklaunch.chooser import ChooserError, choose
from desklaunch.config import Config, MissingEnvironmentError, load_config, save_example_config
from desklaunch.launcher import LaunchError, build_command, launch, resolve_terminal
from desklaunch.output.render import render_registry
from desklaunch.registry import build_registry, default_search_dirs


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        print(f"desklaunch version {__version__}")
        raise typer.Exit()


def generate_config_callback(value: Optional[Path]):
    """Write an example configuration file and exit."""
    if value is None:
        return
    try:
        save_example_config(value)
    except OSError as e:
        print(f"Error generating config: {e}", file=sys.stderr)
        raise typer.Exit(code=2)
    print(f"✓ Example configuration saved to {value}", file=sys.stderr)
    raise typer.Exit()


def run_menu(
    menu: str = typer.Argument(
        ...,
        metavar="MENU",
        help="The menu program to be used, such as dmenu or 'rofi -dmenu'"
    ),
    searchdirs: Optional[list[Path]] = typer.Argument(
        None,
        help="Directories to search, defaults to /usr/share/applications and ~/.local/share/applications"
    ),
    term: Optional[str] = typer.Option(
        None,
        "--term",
        "-t",
        metavar="TERMINAL EMULATOR",
        help="Terminal emulator for terminal applications, defaults to $TERM"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to configuration file (default: ~/.config/desklaunch/config.yaml)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the discovered applications on stderr before opening the menu"
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the command that would be executed instead of running it"
    ),
    generate_config: Optional[Path] = typer.Option(
        None,
        "--generate-config",
        callback=generate_config_callback,
        is_eager=True,
        help="Generate example configuration file at specified path and exit"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """
    Search desktop files and launch an application using a menu of your choice.

    The names of all visible applications are piped to MENU, one per line.
    The line MENU prints back is the application that gets launched.
    Applications with Terminal=true are run as '<terminal> -e <command>'.

    Examples:
        desklaunch dmenu                              # System and user applications
        desklaunch 'rofi -dmenu -i'                   # Menu with its own arguments
        desklaunch fzf ~/.local/share/applications    # Only user applications
        desklaunch dmenu --term alacritty             # Terminal for Terminal=true apps
        desklaunch dmenu --dry-run                    # Show the command, don't run it
    """
    stderr = Console(stderr=True)

    # Load configuration
    try:
        config = load_config(config_file)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        print("Continuing with default settings...", file=sys.stderr)
        config = Config()

    # Positional directories replace the defaults entirely
    if searchdirs:
        directories = list(searchdirs)
    elif config.search_dirs:
        directories = config.expanded_search_dirs()
    else:
        try:
            directories = default_search_dirs()
        except MissingEnvironmentError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    registry = build_registry(directories)

    if verbose:
        stderr.print(f"Searched {', '.join(str(d) for d in directories)}", style="dim", markup=False, highlight=False)
        sys.stderr.write(render_registry(registry, color=stderr.is_terminal))

    try:
        selected = choose(registry.keys(), menu.split())
    except ChooserError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if selected is None:
        # Cancelled in the menu
        sys.exit(0)

    print(f"chosen program: {selected}")

    body = registry.get(selected)
    if body is None:
        print(f"Error: no application named '{selected}'", file=sys.stderr)
        sys.exit(1)

    terminal_override = term or config.terminal

    try:
        if dry_run:
            terminal = resolve_terminal(terminal_override) if body.terminal else None
            print(f"would execute: {' '.join(build_command(body, terminal))}", file=sys.stderr)
        else:
            launch(body, terminal_override)
    except LaunchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


def main() -> None:
    """Entry point for the CLI."""
    typer.run(run_menu)


if __name__ == "__main__":
    main()
