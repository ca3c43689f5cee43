"""Fixed precision encoding of symbol bounds."""

import math
import re
from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import Dict, Mapping, Optional

from lxml import etree as ET

from omrdataset.config import settings
from omrdataset.errors import AnnotationError, MalformedNumberError, MissingGeometryError
from omrdataset.schemas.geometry import Rect

# Plain decimal text, no grouping separators, "." as decimal point
DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

# Persisted attribute name -> Rect field
BOUNDS_FIELDS = (("x", "x"), ("y", "y"), ("w", "width"), ("h", "height"))

# Wide enough to quantize any finite double
_CONTEXT = Context(prec=400)


class GeometryCodec:
    """
    Encode and decode symbol bounds as fixed precision text.

    Significant precision is 1/1000 pixel: anything finer is measurement
    noise and is dropped on write, which keeps annotation files diff-stable
    across tooling runs. Decoding keeps full double precision.
    """

    def __init__(
        self,
        decimals: Optional[int] = None,
        tag: Optional[str] = None,
    ):
        self.decimals = settings.geometry_decimals if decimals is None else decimals
        self.tag = tag or settings.bounds_tag
        self._quantum = Decimal(1).scaleb(-self.decimals)

    def format_number(self, value: float) -> str:
        """Format a number with at most `decimals` fractional digits."""
        if not math.isfinite(value):
            raise MalformedNumberError(f"Cannot encode non-finite number {value}")

        rounded = Decimal(value).quantize(
            self._quantum, rounding=ROUND_HALF_EVEN, context=_CONTEXT
        )
        if rounded.is_zero():
            return "0"

        text = format(rounded, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")

        return text

    def parse_number(self, text: str, field: str) -> float:
        """Parse decimal text back to a float, raising MalformedNumberError."""
        candidate = text.strip()

        if not DECIMAL_PATTERN.match(candidate):
            raise MalformedNumberError(f"Malformed number {text!r} for bounds field '{field}'")

        value = float(candidate)
        if not math.isfinite(value):
            raise MalformedNumberError(f"Out of range number {text!r} for bounds field '{field}'")

        return value

    def encode(self, rect: Rect) -> Dict[str, str]:
        """Encode a rectangle as its x, y, w, h text fields."""
        return {
            name: self.format_number(getattr(rect, attr))
            for name, attr in BOUNDS_FIELDS
        }

    def decode(self, fields: Mapping[str, str]) -> Rect:
        """Decode x, y, w, h text fields into a rectangle."""
        values = {}

        for name, attr in BOUNDS_FIELDS:
            text = fields.get(name)
            if text is None:
                raise MissingGeometryError(f"Missing bounds field '{name}'")
            values[attr] = self.parse_number(text, name)

        return Rect(**values)

    def encode_element(
        self, rect: Rect, parent: Optional[ET._Element] = None
    ) -> ET._Element:
        """Build the bounds element, appended to parent when given."""
        attributes = self.encode(rect)

        if parent is None:
            return ET.Element(self.tag, attributes)

        return ET.SubElement(parent, self.tag, attributes)

    def decode_element(self, element: ET._Element) -> Rect:
        """Read a rectangle from a bounds element."""
        try:
            return self.decode(element.attrib)
        except AnnotationError as e:
            e.at_node(element)
            raise
