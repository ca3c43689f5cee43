"""Pytest configuration and shared fixtures for annotation codec tests."""

import pytest
import structlog

from omrdataset.codecs import GeometryCodec, RecordCodec, ShapeCodec
from omrdataset.schemas import OmrShape, Rect, SymbolRecord


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog on its default configuration between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def record_codec():
    """Record codec with default settings."""
    return RecordCodec()


@pytest.fixture
def shape_codec():
    """Shape codec over the default vocabulary."""
    return ShapeCodec()


@pytest.fixture
def geometry_codec():
    """Geometry codec with 3 decimals."""
    return GeometryCodec(decimals=3, tag="Bounds")


@pytest.fixture
def notehead():
    """A single classified note head."""
    return SymbolRecord(
        shape=OmrShape.noteheadBlack,
        interline=20,
        id=3,
        bounds=Rect(x=105.5, y=220.25, width=21.0, height=18.125),
    )


@pytest.fixture
def beam_group():
    """A beam with two note heads, in annotation order."""
    beam = SymbolRecord(
        shape=OmrShape.beam,
        interline=20,
        id=7,
        bounds=Rect(x=100.0, y=180.5, width=80.75, height=60.0),
    )
    beam.add_inner_symbol(
        SymbolRecord(
            shape=OmrShape.noteheadBlack,
            interline=20,
            id=8,
            bounds=Rect(x=101.0, y=220.0, width=21.0, height=18.0),
        )
    )
    beam.add_inner_symbol(
        SymbolRecord(
            shape=OmrShape.noteheadHalf,
            interline=20,
            bounds=Rect(x=158.123, y=210.0, width=21.5, height=18.0),
        )
    )
    return beam


@pytest.fixture
def beam_group_xml():
    """Annotation text matching the beam_group fixture."""
    return """
<Symbol interline="20" id="7" shape="beam">
  <Bounds x="100" y="180.5" w="80.75" h="60"/>
  <Symbol interline="20" id="8" shape="noteheadBlack">
    <Bounds x="101" y="220" w="21" h="18"/>
  </Symbol>
  <Symbol interline="20" shape="noteheadHalf">
    <Bounds x="158.123" y="210" w="21.5" h="18"/>
  </Symbol>
</Symbol>
""".strip()
