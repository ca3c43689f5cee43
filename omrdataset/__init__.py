"""Symbol annotation records for OMR training datasets."""

from omrdataset.codecs import GeometryCodec, RecordCodec, ShapeCodec
from omrdataset.errors import (
    AnnotationError,
    MalformedNestingError,
    MalformedNumberError,
    MissingGeometryError,
)
from omrdataset.schemas import OmrShape, Rect, SymbolRecord

__all__ = [
    "SymbolRecord",
    "Rect",
    "OmrShape",
    "ShapeCodec",
    "GeometryCodec",
    "RecordCodec",
    "AnnotationError",
    "MalformedNumberError",
    "MissingGeometryError",
    "MalformedNestingError",
]
