"""Go source parsing on top of tree-sitter.

Locates top-level type declarations and converts type syntax into the
immutable values of `mockf.gotypes`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from .errors import NotFound
from .gotypes import (
    CHAN_BOTH,
    CHAN_RECV,
    CHAN_SEND,
    Array,
    Chan,
    Field,
    Func,
    Generic,
    GoType,
    Ident,
    Literal,
    Map,
    Paren,
    Pointer,
    Qualified,
    Slice,
    Variadic,
)
from .model import SourcePackage

logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

# Older grammar releases call interface methods `method_spec`.
METHOD_ELEMENTS = frozenset({"method_elem", "method_spec"})


@dataclass(frozen=True)
class TypeSpec:
    name: str
    node: Node  # type_spec or type_alias
    path: Path
    tree: Tree

    @property
    def type_node(self) -> Node | None:
        return self.node.child_by_field_name("type")

    @property
    def type_parameters(self) -> Node | None:
        return self.node.child_by_field_name("type_parameters")


def new_parser() -> Parser:
    return Parser(GO_LANGUAGE)


def node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text else ""


def named_children(node: Node) -> list[Node]:
    """Named children without comments."""
    return [c for c in node.named_children if c.type != "comment"]


def parse_file(parser: Parser, path: Path) -> Tree | None:
    """Parse one Go file; return None when it cannot be read or has syntax errors."""
    try:
        src = path.read_bytes()
    except OSError as e:
        logger.debug("skipping %s: %s", path, e)
        return None
    tree = parser.parse(src)
    if tree.root_node.has_error:
        logger.debug("skipping %s: syntax error", path)
        return None
    return tree


def iter_type_specs(root: Node) -> Iterator[Node]:
    for decl in root.named_children:
        if decl.type != "type_declaration":
            continue
        for spec in decl.named_children:
            if spec.type in ("type_spec", "type_alias"):
                yield spec


def find_type_spec(pkg: SourcePackage, name: str) -> TypeSpec:
    """Return the first top-level type declaration named `name` in `pkg`.

    Files are scanned in the order the package lists them; unparsable files
    are skipped.
    """
    parser = new_parser()
    for path in pkg.files:
        tree = parse_file(parser, path)
        if tree is None:
            continue
        for spec in iter_type_specs(tree.root_node):
            name_node = spec.child_by_field_name("name")
            if name_node is None or node_text(name_node) != name:
                continue
            logger.debug("found type %s in %s", name, path)
            return TypeSpec(name=name, node=spec, path=path, tree=tree)

    raise NotFound(f"type {name} not found in: {pkg.name}")


def _collapse(s: str) -> str:
    return " ".join(s.split())


def convert_type(node: Node) -> GoType:
    """Convert a tree-sitter type node into a `GoType` value."""
    kind = node.type
    if kind in ("type_identifier", "identifier"):
        return Ident(node_text(node))
    if kind == "qualified_type":
        pkg = node.child_by_field_name("package")
        name = node.child_by_field_name("name")
        if pkg is None or name is None:
            return Literal(_collapse(node_text(node)))
        return Qualified(package=node_text(pkg), name=node_text(name))
    if kind == "pointer_type":
        return Pointer(convert_type(named_children(node)[-1]))
    if kind == "slice_type":
        return Slice(convert_type(node.child_by_field_name("element")))
    if kind == "array_type":
        length = node.child_by_field_name("length")
        return Array(
            length=_convert_length(length) if length is not None else Literal(""),
            elem=convert_type(node.child_by_field_name("element")),
        )
    if kind == "map_type":
        return Map(
            key=convert_type(node.child_by_field_name("key")),
            value=convert_type(node.child_by_field_name("value")),
        )
    if kind == "channel_type":
        tokens = [c.type for c in node.children]
        direction = CHAN_BOTH
        if tokens and tokens[0] == "<-":
            direction = CHAN_RECV
        elif "<-" in tokens:
            direction = CHAN_SEND
        return Chan(direction=direction, elem=convert_type(node.child_by_field_name("value")))
    if kind == "function_type":
        return Func(
            params=convert_fields(node.child_by_field_name("parameters")),
            results=convert_results(node.child_by_field_name("result")),
        )
    if kind == "generic_type":
        args = node.child_by_field_name("type_arguments")
        return Generic(
            base=convert_type(node.child_by_field_name("type")),
            args=tuple(_convert_type_arg(a) for a in named_children(args)) if args is not None else (),
        )
    if kind == "parenthesized_type":
        return Paren(convert_type(named_children(node)[0]))
    return Literal(_collapse(node_text(node)))


def _convert_length(node: Node) -> GoType:
    # Named constants are qualified like types; other expressions stay as text.
    if node.type == "identifier":
        return Ident(node_text(node))
    if node.type == "selector_expression":
        operand = node.child_by_field_name("operand")
        field = node.child_by_field_name("field")
        if operand is not None and operand.type == "identifier" and field is not None:
            return Qualified(package=node_text(operand), name=node_text(field))
    return Literal(_collapse(node_text(node)))


def _convert_type_arg(node: Node) -> GoType:
    # Newer grammars wrap each type argument in a type_elem (a `|` union).
    if node.type == "type_elem":
        inner = named_children(node)
        if len(inner) == 1:
            return convert_type(inner[0])
        return Literal(_collapse(node_text(node)))
    return convert_type(node)


def convert_fields(node: Node | None) -> tuple[Field, ...]:
    """Convert a parameter_list into parameter groups."""
    if node is None:
        return ()
    fields: list[Field] = []
    for child in named_children(node):
        if child.type == "parameter_declaration":
            names = tuple(node_text(n) for n in child.children_by_field_name("name"))
            fields.append(Field(names=names, type=convert_type(child.child_by_field_name("type"))))
        elif child.type == "variadic_parameter_declaration":
            name = child.child_by_field_name("name")
            names = (node_text(name),) if name is not None else ()
            fields.append(Field(names=names, type=Variadic(convert_type(child.child_by_field_name("type")))))
    return tuple(fields)


def convert_results(node: Node | None) -> tuple[Field, ...]:
    """Convert a signature's result: a parameter_list or a single bare type."""
    if node is None:
        return ()
    if node.type == "parameter_list":
        return convert_fields(node)
    return (Field(names=(), type=convert_type(node)),)
