"""Symbol annotation record."""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)

from omrdataset.schemas.geometry import Rect
from omrdataset.schemas.shapes import OmrShape


class SymbolRecord(BaseModel):
    """
    Annotation of one music symbol within a page image.

    This is the ground-truth unit of the symbol classification datasets.
    A composite symbol (e.g. a beam group) carries the symbols it contains
    as inner symbols, in annotation order.

    The record is frozen. Inner symbols may only be attached, through
    add_inner_symbol, while the record is being built and before it is
    handed to any other component.

    Bounds are mandatory. Both bounds and inner symbols may be given at
    construction or through model_validate, and both appear in model_dump.
    """

    model_config = ConfigDict(frozen=True)

    # Classification from the shape vocabulary in use, OmrShape unless a
    # codec was given another one (None: unrecognized, not usable for training)
    shape: Optional[Any] = None

    # Staff interline (pixels) at the scale the bounds were measured, 0 if unknown
    interline: int = 0

    # Stable identifier across annotation passes, None if unassigned
    id: Optional[int] = Field(default=None, ge=0)

    # Geometry and containment, only reachable through copies or read-only views
    _bounds: Rect = PrivateAttr()
    _inner_symbols: List["SymbolRecord"] = PrivateAttr(default_factory=list)

    @field_validator("shape")
    @classmethod
    def validate_shape(cls, v: Any) -> Optional[Enum]:
        """Accept any vocabulary member, and OmrShape names given as text."""
        if v is None or isinstance(v, Enum):
            return v
        if isinstance(v, str):
            shape = OmrShape.__members__.get(v)
            if shape is None:
                raise ValueError(f"Unknown shape name {v!r}")
            return shape
        raise ValueError(f"Shape must be a vocabulary member, got {type(v).__name__}")

    @model_validator(mode="wrap")
    @classmethod
    def attach_geometry(
        cls, data: Any, handler: ValidatorFunctionWrapHandler
    ) -> "SymbolRecord":
        """Store bounds and inner symbols given alongside the fields."""
        if not isinstance(data, dict):
            return handler(data)

        data = dict(data)
        if data.get("bounds") is None:
            raise ValueError("Symbol bounds are mandatory")
        bounds = Rect.model_validate(data.pop("bounds")).model_copy()
        inner_symbols = data.pop("inner_symbols", None) or ()

        record = handler(data)
        record._bounds = bounds
        for inner in inner_symbols:
            if not isinstance(inner, SymbolRecord):
                inner = cls.model_validate(inner)
            record.add_inner_symbol(inner)

        return record

    @model_serializer(mode="wrap")
    def serialize_geometry(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        data = handler(self)
        data["bounds"] = self._bounds.model_dump(mode=info.mode)
        data["inner_symbols"] = [
            inner.model_dump(mode=info.mode) for inner in self._inner_symbols
        ]
        return data

    def add_inner_symbol(self, symbol: "SymbolRecord") -> None:
        """Add an inner symbol within this one.

        Raises:
            ValueError: If this symbol is the given one or lies within it
        """
        if symbol is self or symbol._contains(self):
            raise ValueError("A symbol cannot be an inner symbol of itself")
        self._inner_symbols.append(symbol)

    def _contains(self, symbol: "SymbolRecord") -> bool:
        return any(
            inner is symbol or inner._contains(symbol) for inner in self._inner_symbols
        )

    @property
    def bounds(self) -> Rect:
        """A copy of the symbol bounding box."""
        return self._bounds.model_copy()

    @property
    def inner_symbols(self) -> Tuple["SymbolRecord", ...]:
        """Inner symbols in insertion order, perhaps empty."""
        return tuple(self._inner_symbols)

    @property
    def is_outer(self) -> bool:
        return bool(self._inner_symbols)

    def get_id(self) -> int:
        """Report symbol id, or 0 if none was assigned."""
        if self.id is None:
            return 0
        return self.id

    def __copy__(self) -> "SymbolRecord":
        # model_copy goes through here; the copy owns its containers
        copied = super().__copy__()
        copied._bounds = self._bounds.model_copy()
        copied._inner_symbols = list(self._inner_symbols)
        return copied

    def __repr_args__(self):
        yield from super().__repr_args__()
        yield "bounds", self._bounds
        if self._inner_symbols:
            yield "inner_symbols", self._inner_symbols

    def __str__(self) -> str:
        parts = [str(self.shape)]

        if self.is_outer:
            parts.append("OUTER")

        parts.append(f"interline:{self.interline}")

        if self.id is not None:
            parts.append(f"id:{self.id}")

        parts.append(str(self._bounds))

        return "Symbol{" + " ".join(parts) + "}"
