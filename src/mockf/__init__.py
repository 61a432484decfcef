"""mockf: generate function-type adapters for single-method Go interfaces."""

from __future__ import annotations

from pathlib import Path

from . import errors
from .interface import describe_dir, describe_package, fill_interface
from .model import InterfaceDescription, Parameter, SourcePackage
from .render import render


def generate(name: str, package: str | None = None, *, mode: str | None = None) -> str:
    """Return adapter source for interface `name`.

    Without `package` the interface is looked up in the current directory.
    """
    if package is None:
        desc = describe_dir(Path.cwd(), name)
    else:
        desc = describe_package(package, name)
    return render(desc, mode=mode)


__all__ = [
    "InterfaceDescription",
    "Parameter",
    "SourcePackage",
    "describe_dir",
    "describe_package",
    "errors",
    "fill_interface",
    "generate",
    "render",
]
