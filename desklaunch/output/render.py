"""Output rendering for the discovered application registry."""

from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from desklaunch.models import ApplicationBody


def render_registry(registry: dict[str, ApplicationBody], color: bool = True) -> str:
    """
    Render the registry as a table, one row per application.
    
    Args:
        registry: Mapping of application name to launch body
        color: Emit ANSI styling (disable when writing to a file or in tests)
    
    Returns:
        Formatted string suitable for terminal display
    """
    output_buffer = StringIO()
    console = Console(file=output_buffer, width=120, force_terminal=color, no_color=not color)
    
    if not registry:
        console.print("[yellow]No applications found.[/yellow]")
        return output_buffer.getvalue()
    
    table = Table(box=box.ROUNDED, show_lines=False, header_style="bold cyan")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Command", overflow="fold")
    table.add_column("Terminal", justify="center")
    table.add_column("Source", style="dim", overflow="fold")
    
    for name in sorted(registry):
        body = registry[name]
        table.add_row(
            Text(name),
            Text(body.command_line) if body.exec else Text("<empty>", style="red"),
            "[green]yes[/green]" if body.terminal else "no",
            Text(str(body.path))
        )
    
    console.print(table)
    console.print(f"[dim]{len(registry)} applications[/dim]")
    
    return output_buffer.getvalue()
