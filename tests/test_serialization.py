"""Tests for annotation text serialization and deserialization."""

from lxml import etree

from omrdataset.codecs import RecordCodec
from omrdataset.config import Settings
from omrdataset.schemas import OmrShape, Rect, SymbolRecord


def test_text_roundtrip(record_codec, beam_group):
    """Test that a symbol tree survives serialization without data loss."""
    text = record_codec.to_string(beam_group)

    restored = record_codec.from_string(text)

    assert restored == beam_group
    assert restored.inner_symbols[0].get_id() == 8
    assert restored.inner_symbols[1].get_id() == 0


def test_roundtrip_within_precision(record_codec):
    """Test that geometry comes back rounded to 1/1000 pixel."""
    record = SymbolRecord(
        shape=OmrShape.accidentalSharp,
        interline=22,
        id=41,
        bounds=Rect(x=312.98765, y=1024.0004, width=14.33333, height=40.1),
    )

    restored = record_codec.from_string(record_codec.to_string(record))

    assert restored.bounds == Rect(x=312.988, y=1024.0, width=14.333, height=40.1)
    assert restored.shape is record.shape
    assert restored.interline == 22
    assert restored.id == 41


def test_roundtrip_unclassified(record_codec):
    """Test that an unclassified symbol stays unclassified."""
    record = SymbolRecord(interline=20, bounds=Rect(x=1, y=2, width=3, height=4))

    text = record_codec.to_string(record)

    assert "shape=" not in text
    assert record_codec.from_string(text) == record


def test_encoding_is_idempotent(record_codec, beam_group):
    """Test that encoding twice gives identical text."""
    first = record_codec.to_string(beam_group)
    second = record_codec.to_string(beam_group)

    assert first == second
    assert record_codec.to_string(record_codec.from_string(first)) == first


def test_text_layout(beam_group):
    """Test the persisted text of a beam group."""
    codec = RecordCodec(config=Settings(pretty_print=True))

    text = codec.to_string(beam_group)

    assert text == (
        '<Symbol interline="20" id="7" shape="beam">\n'
        '  <Bounds x="100" y="180.5" w="80.75" h="60"/>\n'
        '  <Symbol interline="20" id="8" shape="noteheadBlack">\n'
        '    <Bounds x="101" y="220" w="21" h="18"/>\n'
        "  </Symbol>\n"
        '  <Symbol interline="20" shape="noteheadHalf">\n'
        '    <Bounds x="158.123" y="210" w="21.5" h="18"/>\n'
        "  </Symbol>\n"
        "</Symbol>\n"
    )


def test_compact_text(notehead):
    """Test serialization without indentation."""
    codec = RecordCodec(config=Settings(pretty_print=False))

    assert codec.to_string(notehead) == (
        '<Symbol interline="20" id="3" shape="noteheadBlack">'
        '<Bounds x="105.5" y="220.25" w="21" h="18.125"/>'
        "</Symbol>"
    )


def test_from_bytes_with_declaration(record_codec, notehead):
    """Test parsing encoded text carrying an XML declaration."""
    data = etree.tostring(
        record_codec.encode(notehead), xml_declaration=True, encoding="UTF-8"
    )

    assert record_codec.from_string(data) == notehead


def test_every_shape_roundtrips(record_codec):
    """Test that every vocabulary shape survives a round trip."""
    page = etree.Element("Annotations")
    records = []
    for index, shape in enumerate(OmrShape):
        record = SymbolRecord(
            shape=shape,
            interline=20,
            id=index,
            bounds=Rect(x=index * 10.5, y=3.25, width=8, height=8),
        )
        records.append(record)
        record_codec.encode(record, page)

    restored = [record_codec.decode(node) for node in page.iterchildren("Symbol")]

    assert restored == records
