"""Shape name encoding, tolerant of shape vocabulary drift."""

from enum import Enum
from typing import Any, Dict, Optional, Type

import structlog

from omrdataset.schemas.shapes import OmrShape

logger = structlog.get_logger(__name__)


class ShapeCodec:
    """
    Maps shapes to and from their canonical names.

    Dataset files outlive the shape vocabulary. A renamed or retired shape
    name degrades only that symbol to unclassified, it never fails the
    surrounding annotation file.
    """

    def __init__(self, vocabulary: Type[Enum] = OmrShape):
        self.vocabulary = vocabulary

    def encode(self, shape: Enum) -> str:
        """Return the canonical name of a vocabulary shape."""
        if not isinstance(shape, self.vocabulary):
            raise ValueError(
                f"{shape!r} is not a {self.vocabulary.__name__} shape"
            )
        return shape.name

    def decode(
        self,
        token: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> Optional[Enum]:
        """
        Look up a shape by its canonical name.

        Args:
            token: Shape name read from the annotation
            context: Fields locating the owning symbol (path, id, bounds)

        Returns:
            The matching shape, or None when the name is not in the vocabulary
        """
        shape = self.vocabulary.__members__.get(token)

        if shape is None:
            logger.warning(
                "Unknown shape name",
                token=token,
                vocabulary=self.vocabulary.__name__,
                **(context or {}),
            )

        return shape
