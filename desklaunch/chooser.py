"""Interaction with the external menu program (dmenu, rofi, fzf, ...)."""

from collections.abc import Iterable

from desklaunch.util.shell import run


class ChooserError(RuntimeError):
    """The menu program could not be run or its answer could not be read."""


def format_menu_input(names: Iterable[str]) -> str:
    """
    Serialize application names for the menu's stdin.
    
    Names are sorted by codepoint (so uppercase sorts before lowercase) and
    each one is followed by a newline, including the last.
    
    Example:
        >>> format_menu_input({"Zed", "Atom", "vim"})
        'Atom\\nZed\\nvim\\n'
    """
    return "".join(f"{name}\n" for name in sorted(names))


def choose(names: Iterable[str], chooser_argv: list[str]) -> str | None:
    """
    Let the user pick one of ``names`` with an external menu program.
    
    Args:
        names: Application names to offer
        chooser_argv: Menu program followed by its arguments
    
    Returns:
        The selected name, or None if the user cancelled (the menu exited
        with a failure status or printed nothing but whitespace)
    
    Raises:
        ChooserError: If the menu cannot be spawned or prints undecodable output
    """
    if not chooser_argv:
        raise ChooserError("no menu program given")
    
    menu_input = format_menu_input(names).encode("utf-8")
    
    try:
        result = run(chooser_argv, input=menu_input)
    except OSError as e:
        raise ChooserError(f"failed to spawn menu '{' '.join(chooser_argv)}': {e}") from e
    
    if not result.success:
        return None
    
    try:
        selection = result.out.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise ChooserError(f"menu '{' '.join(chooser_argv)}' printed invalid UTF-8: {e}") from e
    
    if not selection:
        return None
    
    return selection
