"""Build an `InterfaceDescription` from Go source."""

from __future__ import annotations

import logging
from pathlib import Path

from tree_sitter import Node

from .errors import (
    EmbeddedUnsupported,
    EmptyInterface,
    GenericUnsupported,
    MockfError,
    MultiMethodUnsupported,
    NotInterface,
)
from .goparse import (
    METHOD_ELEMENTS,
    TypeSpec,
    convert_fields,
    convert_results,
    find_type_spec,
    named_children,
    node_text,
)
from .gotypes import Variadic, qualify, render
from .model import InterfaceDescription, Parameter, SourcePackage
from .naming import NameRegistry, name_for_type, receiver_name
from .source import resolve_dir, resolve_import

logger = logging.getLogger(__name__)

# Blank identifiers cannot be passed on, so they are named like anonymous parameters.
_BLANK = "_"


def validate_shape(spec: TypeSpec) -> tuple[str, Node]:
    """Check that `spec` declares a single-method interface.

    Returns the method name and its method element node.
    """
    type_node = spec.type_node
    if type_node is None or type_node.type != "interface_type":
        raise NotInterface(f"not an interface: {spec.name}")
    if spec.type_parameters is not None:
        raise GenericUnsupported(f"generic interface not supported: {spec.name}")

    elems = named_children(type_node)
    if not elems:
        raise EmptyInterface(f"empty interface: {spec.name}")
    if len(elems) > 1:
        raise MultiMethodUnsupported("only single method interfaces is supported")

    meth = elems[0]
    name = meth.child_by_field_name("name") if meth.type in METHOD_ELEMENTS else None
    if name is None:
        raise EmbeddedUnsupported(f"embedded interface not supported: {node_text(meth)}")
    return node_text(name), meth


def extract_signature(method: Node, package: str) -> tuple[tuple[Parameter, ...], tuple[Parameter, ...]]:
    """Return qualified parameters and results of an interface method.

    Anonymous parameters get generated names that never collide with the
    declared ones.
    """
    groups = convert_fields(method.child_by_field_name("parameters"))
    result_groups = convert_results(method.child_by_field_name("result"))

    registry = NameRegistry(tuple(n for g in groups for n in g.names if n != _BLANK))
    params: list[Parameter] = []
    for g in groups:
        t = qualify(g.type, package)
        variadic = isinstance(t, Variadic)
        if variadic:
            t = t.elem
        typ = render(t)

        if not g.names:
            params.append(Parameter(name=name_for_type(typ, registry), type=typ, variadic=variadic))
            continue
        for n in g.names:
            if n == _BLANK:
                n = name_for_type(typ, registry)
            params.append(Parameter(name=n, type=typ, variadic=variadic))

    results: list[Parameter] = []
    for g in result_groups:
        typ = render(qualify(g.type, package))
        results.extend(Parameter(name="", type=typ) for _ in range(max(1, len(g.names))))

    return tuple(params), tuple(results)


def fill_interface(pkg: SourcePackage, name: str) -> InterfaceDescription:
    """Describe interface `name` declared in `pkg`."""
    try:
        spec = find_type_spec(pkg, name)
    except MockfError as e:
        raise e.wrap("find interface") from e

    method_name, method = validate_shape(spec)
    params, results = extract_signature(method, pkg.name)
    return InterfaceDescription(
        name=name,
        method_name=method_name,
        params=params,
        results=results,
        receiver=receiver_name([p.name for p in params]),
    )


def describe_dir(path: str | Path, name: str) -> InterfaceDescription:
    """Describe interface `name` from the Go package in directory `path`."""
    try:
        pkg = resolve_dir(Path(path))
    except MockfError as e:
        raise e.wrap("import dir") from e

    try:
        return fill_interface(pkg, name)
    except MockfError as e:
        raise e.wrap("fill interface") from e


def describe_package(import_path: str, name: str) -> InterfaceDescription:
    """Describe interface `name` from the Go package `import_path`."""
    try:
        pkg = resolve_import(import_path)
    except MockfError as e:
        raise e.wrap(f"couldn't find package {import_path}") from e

    try:
        return fill_interface(pkg, name)
    except MockfError as e:
        raise e.wrap("fill interface") from e
