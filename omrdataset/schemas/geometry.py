"""Bounding box model for symbol annotations."""

from pydantic import BaseModel, Field


class Rect(BaseModel):
    """Bounding box in page-image pixel coordinates."""

    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)
    width: float = Field(..., allow_inf_nan=False)
    height: float = Field(..., allow_inf_nan=False)

    def __str__(self) -> str:
        return f"Rect[x={self.x},y={self.y},w={self.width},h={self.height}]"
