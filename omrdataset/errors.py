"""Structural errors raised while decoding symbol annotations."""

from typing import Optional


class AnnotationError(ValueError):
    """
    A symbol annotation node cannot be decoded.

    Carries the location of the offending node so the annotation file can be
    fixed by hand.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        line: Optional[int] = None,
    ):
        self.message = message
        self.path = path
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        location = []
        if self.path:
            location.append(self.path)
        if self.line is not None:
            location.append(f"line {self.line}")

        if not location:
            return self.message

        return f"{self.message} (at {', '.join(location)})"

    def at_node(self, node) -> "AnnotationError":
        """Record the location of an XML node, unless one is already known."""
        if self.path is None:
            self.path = node.getroottree().getpath(node)
        if self.line is None:
            self.line = node.sourceline
        self.args = (self._format(),)
        return self


class MalformedNumberError(AnnotationError):
    """A numeric attribute (geometry, interline, id) is not a valid number."""


class MissingGeometryError(AnnotationError):
    """The mandatory bounds element or one of its fields is absent."""


class MalformedNestingError(AnnotationError):
    """The annotation tree itself is not shaped like a symbol tree."""
