from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourcePackage:
    name: str
    dir: Path
    files: tuple[Path, ...]
    import_path: str = ""


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str  # element type for variadic parameters (no leading "...")
    variadic: bool = False

    @property
    def spelling(self) -> str:
        return f"...{self.type}" if self.variadic else self.type


@dataclass(frozen=True)
class InterfaceDescription:
    name: str
    method_name: str
    params: tuple[Parameter, ...]
    results: tuple[Parameter, ...]
    receiver: str = "f"

    @property
    def has_return(self) -> bool:
        return len(self.results) > 0

    @property
    def lower_name(self) -> str:
        """Interface name with its first letter lower-cased."""
        return self.name[:1].lower() + self.name[1:]
