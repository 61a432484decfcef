"""Readable names for anonymous parameters.

A name is built from the initials of the words of the type name, growing the
prefix taken from every word until it no longer collides:

    Request, Request        => r, re
    ResponseWriter          => rw
"""

from __future__ import annotations

import itertools
import logging

logger = logging.getLogger(__name__)

# Receiver name of the generated wrapper method.
RECEIVER = "f"

GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)


class NameRegistry:
    """Identifiers already taken in one method's parameter list."""

    def __init__(self, names: tuple[str, ...] = ()):
        self._names: set[str] = {RECEIVER, *names}

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def add(self, name: str) -> None:
        self._names.add(name)

    def taken(self, name: str) -> bool:
        return name in self._names or name in GO_KEYWORDS


def _char_class(ch: str) -> int:
    if ch.islower():
        return 1
    if ch.isupper():
        return 2
    if ch.isdigit():
        return 3
    return 4


def split_words(name: str) -> list[str]:
    """Split a camel-case identifier into words.

    Runs of the same character class form words; the last letter of an
    upper-case run starts the following lower-case run:
    "HTTPServer" => ["HTTP", "Server"], "ID2Name" => ["ID", "2", "Name"].
    """
    runs = ["".join(g) for _, g in itertools.groupby(name, key=_char_class)]
    for i in range(len(runs) - 1):
        if runs[i] and runs[i][-1].isupper() and runs[i + 1][:1].islower():
            runs[i + 1] = runs[i][-1] + runs[i + 1]
            runs[i] = runs[i][:-1]
    return [r for r in runs if r]


def type_words(type_spelling: str) -> list[str]:
    """Words of the bare type name inside a qualified type spelling."""
    name = type_spelling
    if name.startswith("..."):
        name = name[len("...") :]
    name = name.split(".")[-1]
    # Words must start with a letter so the generated name is an identifier.
    words = [w for w in split_words(name) if w[0].isalpha()]
    return words or ["arg"]


def generate_name(words: list[str], registry: NameRegistry, n: int = 1) -> str:
    """Take the first `n` letters of every word and concatenate them.

    A taken candidate retries with `n + 1`; once a word is shorter than `n`
    that whole word is used instead.
    """
    candidate = ""
    for w in words:
        if len(w) < n:
            return _free_variant(w.lower(), registry)
        candidate += w[:n].lower()

    if registry.taken(candidate):
        return generate_name(words, registry, n + 1)
    return candidate


def _free_variant(word: str, registry: NameRegistry) -> str:
    if not registry.taken(word):
        return word
    i = 2
    while registry.taken(f"{word}{i}"):
        i += 1
    return f"{word}{i}"


def name_for_type(type_spelling: str, registry: NameRegistry) -> str:
    """Generate, register and return a parameter name for `type_spelling`."""
    name = generate_name(type_words(type_spelling), registry)
    registry.add(name)
    logger.debug("named anonymous %s parameter %s", type_spelling, name)
    return name


def receiver_name(param_names: list[str]) -> str:
    """Return a receiver name that no parameter of the method uses."""
    taken = set(param_names)
    if RECEIVER not in taken:
        return RECEIVER
    return _free_variant("fn", NameRegistry(tuple(taken)))
