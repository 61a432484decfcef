from __future__ import annotations

import json
import logging
import re
import subprocess
from pathlib import Path

from .errors import SourceImportFailure
from .model import SourcePackage
from .settings import go_command

logger = logging.getLogger(__name__)

_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.S)
_LINE_COMMENT_RE = re.compile(r"//[^\n]*")
_PACKAGE_RE = re.compile(r"^\s*package\s+(\w+)", re.M)
_IGNORE_RE = re.compile(r"^//\s*(?:go:build|\+build)\s+ignore\s*$", re.M)


def resolve_dir(path: Path) -> SourcePackage:
    """Resolve a directory to the Go package it contains.

    Files are listed in name order. Test files, files whose name starts with
    "_" or "." and files constrained with `ignore` are left out.
    """
    path = path.resolve()
    if not path.is_dir():
        raise SourceImportFailure(f"cannot find package in: {path}")

    files: list[Path] = []
    first: tuple[str, Path] | None = None
    for f in sorted(path.glob("*.go")):
        if not f.is_file() or not _is_source_name(f.name):
            continue
        try:
            src = f.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise SourceImportFailure(f"read {f}: {e}") from e
        if _IGNORE_RE.search(src):
            logger.debug("skipping %s: ignore build constraint", f)
            continue

        name = package_clause(src)
        if name is None:
            raise SourceImportFailure(f"{f}: expected 'package' clause")
        if first is None:
            first = (name, f)
        elif name != first[0]:
            raise SourceImportFailure(
                f"found packages {first[0]} ({first[1].name}) and {name} ({f.name}) in {path}"
            )
        files.append(f)

    if first is None:
        raise SourceImportFailure(f"no buildable Go source files in {path}")

    logger.debug("package %s in %s: %s", first[0], path, ", ".join(f.name for f in files))
    return SourcePackage(name=first[0], dir=path, files=tuple(files))


def resolve_import(import_path: str) -> SourcePackage:
    """Resolve a Go import path with `go list`.

    Local paths ("./x", "../x", "/abs/x") are resolved as directories.
    """
    if _is_local_import(import_path):
        return resolve_dir(Path(import_path))

    info = _go_list_json(import_path)
    name = info.get("Name")
    pkg_dir = info.get("Dir")
    go_files = info.get("GoFiles") or []
    if not isinstance(name, str) or not name or not isinstance(pkg_dir, str) or not pkg_dir:
        raise SourceImportFailure(f"go list returned no package for {import_path}")
    if not isinstance(go_files, list) or not go_files:
        raise SourceImportFailure(f"no buildable Go source files in {pkg_dir}")

    d = Path(pkg_dir)
    files = tuple(d / str(f) for f in go_files)
    logger.debug("package %s in %s: %s", name, d, ", ".join(str(f) for f in go_files))
    return SourcePackage(
        name=name,
        dir=d,
        files=files,
        import_path=str(info.get("ImportPath") or import_path),
    )


def package_clause(src: str) -> str | None:
    """Return the package name declared by Go source `src`."""
    stripped = _LINE_COMMENT_RE.sub("", _BLOCK_COMMENT_RE.sub(" ", src))
    m = _PACKAGE_RE.search(stripped)
    if m is None:
        return None
    return m.group(1)


def _is_source_name(name: str) -> bool:
    return not (name.endswith("_test.go") or name.startswith("_") or name.startswith("."))


def _is_local_import(import_path: str) -> bool:
    return (
        import_path in (".", "..")
        or import_path.startswith(("./", "../", "/"))
        or Path(import_path).is_absolute()
    )


def _go_list_json(import_path: str) -> dict:
    go = go_command()
    try:
        proc = subprocess.run(
            [go, "list", "-json", import_path],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise SourceImportFailure(
            f"Go toolchain not found (`{go}` is missing from PATH). "
            "Install Go, set MOCKF_GO, or pass a package directory instead of an import path."
        ) from e

    if proc.returncode != 0:
        raise SourceImportFailure((proc.stderr or proc.stdout or "go list failed").strip())

    out = proc.stdout
    try:
        return json.loads(out)
    except ValueError:
        # Go may print toolchain switching messages around the JSON object.
        start = out.find("{")
        end = out.rfind("}")
        if start == -1 or end < start:
            raise SourceImportFailure(f"failed to parse go list output for {import_path}") from None
        try:
            return json.loads(out[start : end + 1])
        except ValueError as e:
            raise SourceImportFailure(f"failed to parse go list output for {import_path}: {e}") from e
