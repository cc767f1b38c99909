"""Configuration settings for linefeather."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from linefeather.domain import LineCap, check_dash_pattern
from linefeather.exceptions import InvalidDashPatternError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class StrokeStyle(BaseModel):
    """Stroke parameters supplied by the styling layer.

    Line width is given in raster units (pixels). Dash lengths alternate
    "on" and "off" starting with "on" and repeat over the path.
    """

    model_config = {"frozen": True}

    line_width: float = Field(
        default=1.0,
        ge=0.0,
        allow_inf_nan=False,
        description="Full stroke width in raster units",
    )
    dashes: list[float] | None = Field(
        default=None,
        description="Alternating on/off dash lengths (None or empty = solid)",
    )
    line_cap: LineCap | None = Field(
        default=None,
        description="Cap style at dash endpoints (None = butt)",
    )

    @field_validator("dashes")
    @classmethod
    def _validate_dashes(cls, value: list[float] | None) -> list[float] | None:
        if value is None:
            return None
        try:
            return check_dash_pattern(value)
        except InvalidDashPatternError as e:
            raise ValueError(e.reason) from e

    @property
    def half_line_width(self) -> float:
        """Half of the stroke width."""
        return self.line_width / 2.0

    @property
    def is_dashed(self) -> bool:
        """Whether a non-empty dash pattern is set."""
        return bool(self.dashes)


class RenderConfig(BaseModel):
    """Configuration for the text preview rasterizer."""

    width: int = Field(
        default=60,
        ge=1,
        le=400,
        description="Canvas width in pixels",
    )
    height: int = Field(
        default=20,
        ge=1,
        le=400,
        description="Canvas height in pixels",
    )
    shades: str = Field(
        default=" .:-=+*#%@",
        min_length=2,
        description="Character ramp from empty to full coverage",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            expected = ", ".join(LOG_LEVELS)
            raise ValueError(f"unknown log level '{value}', expected one of {expected}")
        return level


class LineFeatherSettings(BaseModel):
    """Main application settings."""

    stroke: StrokeStyle = Field(default_factory=StrokeStyle)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> LineFeatherSettings:
    """Get default application settings."""
    return LineFeatherSettings()
