from __future__ import annotations

import logging
import shutil
import subprocess

from .errors import RenderFailure
from .model import InterfaceDescription, Parameter
from .settings import FORMAT_MODES, format_mode, gofmt_command

logger = logging.getLogger(__name__)


def _results(results: tuple[Parameter, ...]) -> str:
    if not results:
        return ""
    if len(results) == 1:
        return " " + results[0].type
    return f" ({', '.join(r.type for r in results)})"


def render_source(desc: InterfaceDescription) -> str:
    """Expand the adapter template for `desc`.

    The output already has gofmt layout:

        type readerFunc func([]byte) (int, error)

        func (f readerFunc) Read(p []byte) (int, error) {
        	return f(p)
        }
    """
    if not desc.name or not desc.method_name:
        raise RenderFailure("interface and method names are required")

    func_type = f"{desc.lower_name}Func"
    results = _results(desc.results)

    args: list[str] = []
    for p in desc.params:
        args.append(f"{p.name}..." if p.variadic else p.name)

    call = f"{desc.receiver}({', '.join(args)})"
    if desc.has_return:
        call = "return " + call

    lines: list[str] = []
    lines.append(f"type {func_type} func({', '.join(p.spelling for p in desc.params)}){results}")
    lines.append("")
    lines.append(
        f"func ({desc.receiver} {func_type}) {desc.method_name}"
        f"({', '.join(f'{p.name} {p.spelling}' for p in desc.params)}){results} {{"
    )
    lines.append(f"\t{call}")
    lines.append("}")
    lines.append("")
    return "\n".join(lines)


def format_source(src: str, *, mode: str | None = None) -> str:
    """Pretty-print Go source with gofmt.

    mode "auto" formats only when gofmt is on PATH, "always" requires it and
    "never" returns `src` unchanged.
    """
    if mode is None:
        try:
            mode = format_mode()
        except ValueError as e:
            raise RenderFailure(str(e)) from e
    if mode not in FORMAT_MODES:
        raise RenderFailure(f"unknown format mode: {mode}")
    if mode == "never":
        return src

    gofmt = gofmt_command()
    if mode == "auto" and shutil.which(gofmt) is None:
        logger.debug("%s not found; leaving template output as is", gofmt)
        return src

    logger.debug("formatting with %s", gofmt)
    try:
        proc = subprocess.run(
            [gofmt],
            input=src,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise RenderFailure(f"gofmt not found (`{gofmt}` is missing from PATH)") from e
    if proc.returncode != 0:
        raise RenderFailure(f"gofmt failed\n{proc.stderr.strip()}")
    return proc.stdout


def render(desc: InterfaceDescription, *, mode: str | None = None) -> str:
    """Return formatted adapter source for `desc`."""
    return format_source(render_source(desc), mode=mode)
