"""Codecs between symbol records and their annotation XML form."""

from omrdataset.codecs.geometry_codec import GeometryCodec
from omrdataset.codecs.record_codec import RecordCodec
from omrdataset.codecs.shape_codec import ShapeCodec

__all__ = ["ShapeCodec", "GeometryCodec", "RecordCodec"]
