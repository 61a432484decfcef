"""Go type expressions as immutable values.

Types are converted from the syntax tree once (see `goparse.convert_type`) and
then transformed without touching the tree. `qualify` rewrites exported bare
identifiers to `<pkg>.<Ident>`; `render` prints the canonical gofmt spelling:

    render(qualify(Ident("int"), "http"))              => "int"
    render(qualify(Ident("Handler"), "http"))          => "http.Handler"
    render(qualify(Qualified("io", "Reader"), "http")) => "io.Reader"
    render(qualify(Pointer(Ident("Request")), "http")) => "*http.Request"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Ident:
    name: str


@dataclass(frozen=True)
class Qualified:
    package: str
    name: str


@dataclass(frozen=True)
class Pointer:
    elem: "GoType"


@dataclass(frozen=True)
class Slice:
    elem: "GoType"


@dataclass(frozen=True)
class Variadic:
    elem: "GoType"


@dataclass(frozen=True)
class Array:
    length: "GoType"  # Ident or Qualified for named constants, Literal otherwise
    elem: "GoType"


@dataclass(frozen=True)
class Map:
    key: "GoType"
    value: "GoType"


CHAN_BOTH = "both"
CHAN_SEND = "send"
CHAN_RECV = "recv"


@dataclass(frozen=True)
class Chan:
    direction: str
    elem: "GoType"


@dataclass(frozen=True)
class Field:
    names: tuple[str, ...]
    type: "GoType"


@dataclass(frozen=True)
class Func:
    params: tuple[Field, ...]
    results: tuple[Field, ...]


@dataclass(frozen=True)
class Generic:
    base: "GoType"
    args: tuple["GoType", ...]


@dataclass(frozen=True)
class Paren:
    elem: "GoType"


@dataclass(frozen=True)
class Literal:
    # struct/interface literals and other forms kept as source text
    text: str


GoType = Union[Ident, Qualified, Pointer, Slice, Variadic, Array, Map, Chan, Func, Generic, Paren, Literal]


def is_exported(name: str) -> bool:
    return bool(name) and name[0].isupper()


def qualify(t: GoType, package: str) -> GoType:
    """Return `t` with every exported bare identifier qualified by `package`.

    Selectors are returned as is and never descended into, so already
    qualified types are left untouched. Unexported identifiers stay bare.
    """
    if isinstance(t, Ident):
        if is_exported(t.name):
            return Qualified(package=package, name=t.name)
        return t
    if isinstance(t, (Qualified, Literal)):
        return t
    if isinstance(t, Pointer):
        return Pointer(qualify(t.elem, package))
    if isinstance(t, Slice):
        return Slice(qualify(t.elem, package))
    if isinstance(t, Variadic):
        return Variadic(qualify(t.elem, package))
    if isinstance(t, Paren):
        return Paren(qualify(t.elem, package))
    if isinstance(t, Array):
        return Array(length=qualify(t.length, package), elem=qualify(t.elem, package))
    if isinstance(t, Map):
        return Map(key=qualify(t.key, package), value=qualify(t.value, package))
    if isinstance(t, Chan):
        return Chan(direction=t.direction, elem=qualify(t.elem, package))
    if isinstance(t, Func):
        return Func(
            params=tuple(Field(f.names, qualify(f.type, package)) for f in t.params),
            results=tuple(Field(f.names, qualify(f.type, package)) for f in t.results),
        )
    if isinstance(t, Generic):
        return Generic(
            base=qualify(t.base, package),
            args=tuple(qualify(a, package) for a in t.args),
        )
    raise TypeError(f"unknown Go type node: {t!r}")


def _render_fields(fields: tuple[Field, ...]) -> str:
    parts: list[str] = []
    for f in fields:
        if f.names:
            parts.append(f"{', '.join(f.names)} {render(f.type)}")
        else:
            parts.append(render(f.type))
    return ", ".join(parts)


def render_results(results: tuple[Field, ...]) -> str:
    """Render a result list as it follows a signature, including the leading space."""
    if not results:
        return ""
    if len(results) == 1 and not results[0].names:
        return " " + render(results[0].type)
    return f" ({_render_fields(results)})"


def render(t: GoType) -> str:
    if isinstance(t, Ident):
        return t.name
    if isinstance(t, Qualified):
        return f"{t.package}.{t.name}"
    if isinstance(t, Pointer):
        return "*" + render(t.elem)
    if isinstance(t, Slice):
        return "[]" + render(t.elem)
    if isinstance(t, Variadic):
        return "..." + render(t.elem)
    if isinstance(t, Paren):
        return f"({render(t.elem)})"
    if isinstance(t, Array):
        return f"[{render(t.length)}]{render(t.elem)}"
    if isinstance(t, Map):
        return f"map[{render(t.key)}]{render(t.value)}"
    if isinstance(t, Chan):
        if t.direction == CHAN_SEND:
            return "chan<- " + render(t.elem)
        if t.direction == CHAN_RECV:
            return "<-chan " + render(t.elem)
        return "chan " + render(t.elem)
    if isinstance(t, Func):
        return f"func({_render_fields(t.params)}){render_results(t.results)}"
    if isinstance(t, Generic):
        return f"{render(t.base)}[{', '.join(render(a) for a in t.args)}]"
    if isinstance(t, Literal):
        return t.text
    raise TypeError(f"unknown Go type node: {t!r}")
