"""Data models for discovered desktop applications."""

from pathlib import Path

from pydantic import BaseModel, Field, ConfigDict


class ApplicationBody(BaseModel):
    """Everything needed to launch an application, keyed by its name in the registry."""
    
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "path": "/usr/share/applications/htop.desktop",
                "exec": ["htop"],
                "terminal": True
            }
        }
    )
    
    path: Path = Field(description="Resolved location of the source .desktop file")
    exec: list[str] = Field(
        default_factory=list,
        description="Command tokens with % field codes removed"
    )
    terminal: bool = Field(default=False, description="Run inside a terminal emulator")
    
    @property
    def command_line(self) -> str:
        """The command tokens joined for display in diagnostics."""
        return " ".join(self.exec)


class Application(BaseModel):
    """A visible application parsed from a single .desktop file."""
    
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(description="Display name shown in the menu")
    body: ApplicationBody = Field(description="Launch details")
    
    @classmethod
    def create(cls, name: str, path: Path | str, exec: list[str], terminal: bool = False) -> "Application":
        """Build an application and its body in one call."""
        return cls(
            name=name,
            body=ApplicationBody(path=Path(path), exec=list(exec), terminal=terminal)
        )
