"""Safe subprocess execution utilities."""

import subprocess
from dataclasses import dataclass


@dataclass
class ShellResult:
    """Result from a command whose output was captured."""
    
    code: int
    out: bytes
    err: bytes
    
    @property
    def success(self) -> bool:
        """Check if the command succeeded (exit code 0)."""
        return self.code == 0
    
    def __bool__(self) -> bool:
        """Allow using result in boolean context (True if successful)."""
        return self.success


def run(cmd: list[str], input: bytes | None = None) -> ShellResult:
    """
    Execute a command without shell interpretation, capturing its output.
    
    stdin, stdout and stderr are all pipes. ``input`` is written to stdin,
    which is then closed, and the call blocks until the command exits.
    
    Args:
        cmd: Command and arguments as a list of strings (e.g., ['dmenu', '-i'])
        input: Bytes to feed to the command's stdin
    
    Returns:
        ShellResult with exit code and raw stdout/stderr bytes
    
    Raises:
        OSError: If the command cannot be spawned (not found, not executable)
    
    Example:
        >>> result = run(['dmenu'], input=b'Atom\\nZed\\n')
        >>> if result.success:
        ...     print(result.out.decode())
    """
    completed = subprocess.run(
        cmd,
        input=input if input is not None else b"",
        capture_output=True,
        shell=False,  # Explicit: never use shell=True
        check=False   # Don't raise CalledProcessError; we handle exit codes
    )
    
    return ShellResult(
        code=completed.returncode,
        out=completed.stdout,
        err=completed.stderr
    )


def run_attached(cmd: list[str]) -> int:
    """
    Execute a command with inherited stdio and wait for it to exit.
    
    Returns:
        The command's exit code
    
    Raises:
        OSError: If the command cannot be spawned
    """
    completed = subprocess.run(cmd, shell=False, check=False)
    return completed.returncode
