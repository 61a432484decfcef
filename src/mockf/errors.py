"""Domain-specific errors for mockf."""

from __future__ import annotations


class MockfError(Exception):
    """Base error for mockf."""

    def wrap(self, context: str) -> "MockfError":
        """Return an error of the same kind with `context` prefixed to the message."""
        return type(self)(f"{context}: {self}")


class SourceImportFailure(MockfError):
    """Raised when a source directory or Go package cannot be resolved."""


class NotFound(MockfError):
    """Raised when no top-level type declaration matches the requested name."""


class NotInterface(MockfError):
    """Raised when the matched declaration is not an interface type."""


class EmptyInterface(MockfError):
    """Raised when the interface declares no methods."""


class MultiMethodUnsupported(MockfError):
    """Raised when the interface declares more than one method."""


class EmbeddedUnsupported(MockfError):
    """Raised when the single interface element is an embedded interface."""


class GenericUnsupported(MockfError):
    """Raised when the interface declaration has type parameters."""


class RenderFailure(MockfError):
    """Raised when the adapter source cannot be generated or formatted."""
