"""Exception classes for Migas.

Conversion of well-formed hast never raises: odd shapes degrade to a best
effort result. These exceptions cover misuse of the public API and of the
handler extension point.
"""

from __future__ import annotations


class MigasError(Exception):
    """Base exception for all Migas errors."""

    pass


class ConversionError(MigasError):
    """Input handed to the converter is not a hast node.

    Raised by ``to_mdast`` for roots of an unsupported type.
    """

    def __init__(self, message: str, node_type: str | None = None) -> None:
        """Initialize conversion error.

        Args:
            message: Error description
            node_type: Name of the offending type (optional)
        """
        self.message = message
        self.node_type = node_type

        prefix = f"{node_type}: " if node_type else ""
        super().__init__(f"{prefix}{message}")


class HandlerError(MigasError):
    """A handler returned something that is not mdast.

    Handlers must return a node, a tuple of nodes, or None.
    """

    def __init__(self, tag_name: str, message: str) -> None:
        """Initialize handler error.

        Args:
            tag_name: Tag the failing handler was registered for
            message: Description of the error
        """
        self.tag_name = tag_name
        super().__init__(f"Handler for <{tag_name}>: {message}")
