"""Symbol annotation codec configuration."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """OMR dataset annotation configuration"""

    # Element names of the persisted annotation tree
    symbol_tag: str = "Symbol"
    bounds_tag: str = "Bounds"

    # Geometry precision (1/1000 pixel)
    geometry_decimals: int = 3

    # Shape attribute written for unclassified symbols (None: omit the attribute)
    absent_shape_marker: Optional[str] = None

    # Text output
    pretty_print: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    class Config:
        env_prefix = "OMRDATASET_"
        case_sensitive = False


settings = Settings()
