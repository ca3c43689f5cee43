"""Symbol annotation schemas."""

from omrdataset.schemas.geometry import Rect
from omrdataset.schemas.shapes import OmrShape
from omrdataset.schemas.symbol import SymbolRecord

__all__ = ["Rect", "OmrShape", "SymbolRecord"]
