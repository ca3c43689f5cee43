"""Convert symbol records to and from their XML annotation form."""

import re
from typing import Any, Dict, Optional, Union

import structlog
from lxml import etree as ET
from pydantic import ValidationError

from omrdataset.codecs.geometry_codec import GeometryCodec
from omrdataset.codecs.shape_codec import ShapeCodec
from omrdataset.config import Settings, settings
from omrdataset.errors import (
    AnnotationError,
    MalformedNestingError,
    MalformedNumberError,
    MissingGeometryError,
)
from omrdataset.schemas.symbol import SymbolRecord

logger = structlog.get_logger(__name__)

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


class RecordCodec:
    """
    Convert symbol records to and from annotation XML elements.

    A symbol element carries interline, id and shape attributes, one bounds
    element, and one nested symbol element per inner symbol:

        <Symbol interline="20" id="7" shape="beam">
          <Bounds x="10.123" y="0" w="5" h="2.5"/>
          <Symbol interline="20" shape="noteheadBlack">...</Symbol>
        </Symbol>

    Unknown shape names only degrade the symbol concerned. Structural
    problems (missing bounds, malformed numbers, unexpected nesting) raise
    an AnnotationError naming the offending node.
    """

    def __init__(
        self,
        shape_codec: Optional[ShapeCodec] = None,
        geometry_codec: Optional[GeometryCodec] = None,
        config: Optional[Settings] = None,
    ):
        config = config or settings
        self.shape_codec = shape_codec or ShapeCodec()
        self.geometry_codec = geometry_codec or GeometryCodec(
            decimals=config.geometry_decimals, tag=config.bounds_tag
        )
        self.symbol_tag = config.symbol_tag
        self.absent_shape_marker = config.absent_shape_marker
        self.pretty_print = config.pretty_print

    # Decoding

    def decode(self, node: ET._Element) -> SymbolRecord:
        """
        Decode a symbol element and its nested symbols.

        Args:
            node: Symbol element

        Returns:
            The symbol record, with inner symbols in document order

        Raises:
            AnnotationError: If the element is structurally invalid
        """
        if node.tag != self.symbol_tag:
            raise MalformedNestingError(
                f"Expected <{self.symbol_tag}> element, found <{node.tag}>"
            ).at_node(node)

        try:
            interline = self._read_int(node, "interline")
            symbol_id = self._read_int(node, "id")
            if symbol_id is not None and symbol_id < 0:
                raise MalformedNumberError(f"Negative symbol id {symbol_id}")
        except AnnotationError as e:
            e.at_node(node)
            raise

        bounds = self.geometry_codec.decode_element(self._bounds_element(node))

        # Shape miss is reported here, with enough context to find the symbol
        token = node.get("shape")
        shape = None
        unknown_reported = False
        if token is not None and token != self.absent_shape_marker:
            shape = self.shape_codec.decode(
                token,
                {
                    "symbol_id": symbol_id,
                    "bounds": str(bounds),
                    **self._location(node),
                },
            )
            unknown_reported = shape is None

        try:
            record = SymbolRecord(
                shape=shape,
                interline=0 if interline is None else interline,
                id=symbol_id,
                bounds=bounds,
            )
        except ValidationError as e:
            raise AnnotationError(
                f"Invalid symbol: {e.errors()[0]['msg']}"
            ).at_node(node) from e

        for child in node.iterchildren(self.symbol_tag):
            record.add_inner_symbol(self.decode(child))

        self._after_decode(record, node, unknown_reported)

        return record

    def from_string(self, text: Union[str, bytes]) -> SymbolRecord:
        """Parse annotation XML text whose root is a symbol element."""
        if isinstance(text, str):
            text = text.encode("utf-8")

        parser = ET.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = ET.fromstring(text, parser)
        except ET.XMLSyntaxError as e:
            raise MalformedNestingError(
                f"Unparseable annotation XML: {e.msg}", line=e.lineno
            ) from e

        return self.decode(root)

    def _read_int(self, node: ET._Element, name: str) -> Optional[int]:
        text = node.get(name)
        if text is None:
            return None

        candidate = text.strip()
        if not INTEGER_PATTERN.match(candidate):
            raise MalformedNumberError(f"Malformed integer {text!r} for '{name}'")

        return int(candidate)

    def _bounds_element(self, node: ET._Element) -> ET._Element:
        found = node.findall(self.geometry_codec.tag)

        if not found:
            raise MissingGeometryError(
                f"Missing <{self.geometry_codec.tag}> element"
            ).at_node(node)
        if len(found) > 1:
            raise MalformedNestingError(
                f"Found {len(found)} <{self.geometry_codec.tag}> elements, expected one"
            ).at_node(found[1])

        return found[0]

    def _after_decode(
        self,
        record: SymbolRecord,
        node: ET._Element,
        unknown_reported: bool,
    ) -> None:
        """Check a decoded record before it is attached to its parent."""
        if record.shape is None and not unknown_reported:
            logger.warning("Null shape", symbol=str(record), **self._location(node))

    def _location(self, node: ET._Element) -> Dict[str, Any]:
        return {
            "path": node.getroottree().getpath(node),
            "line": node.sourceline,
        }

    # Encoding

    def encode(
        self,
        record: SymbolRecord,
        parent: Optional[ET._Element] = None,
    ) -> ET._Element:
        """
        Encode a symbol record and its inner symbols.

        Args:
            record: Symbol record
            parent: Element to append the symbol element to, if any

        Returns:
            The symbol element
        """
        attributes = {"interline": str(record.interline)}

        if record.id is not None:
            attributes["id"] = str(record.id)

        if record.shape is not None:
            attributes["shape"] = self.shape_codec.encode(record.shape)
        elif self.absent_shape_marker is not None:
            attributes["shape"] = self.absent_shape_marker

        if parent is None:
            element = ET.Element(self.symbol_tag, attributes)
        else:
            element = ET.SubElement(parent, self.symbol_tag, attributes)

        self.geometry_codec.encode_element(record.bounds, element)

        for inner in record.inner_symbols:
            self.encode(inner, element)

        return element

    def to_string(self, record: SymbolRecord) -> str:
        """Serialize a symbol record to annotation XML text."""
        return ET.tostring(
            self.encode(record), pretty_print=self.pretty_print, encoding="unicode"
        )
