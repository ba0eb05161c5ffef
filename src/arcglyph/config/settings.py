"""Configuration settings for Arcglyph."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class ApproximationConfig(BaseModel):
    """Configuration for approximating curves with arcs.

    The tolerance is specified per em and scaled by the font's UPM.
    """

    tolerance_per_em: float = Field(
        default=10.0 / 1024.0,
        gt=0.0,
        le=0.1,
        description="Maximum arc approximation error, as a fraction of the em",
    )
    max_d: float = Field(
        default=0.5,
        gt=0.0,
        le=1.0,
        description="Largest |d| emitted for curve arcs",
    )
    d_bits: int = Field(
        default=8,
        ge=0,
        le=16,
        description="Bits used to quantize d (0 disables quantization, otherwise at least 2)",
    )
    max_segments: int = Field(
        default=100,
        ge=2,
        le=1000,
        description="Upper bound on arcs per curve",
    )

    @field_validator("d_bits")
    @classmethod
    def d_bits_has_levels(cls, v: int) -> int:
        """A single bit leaves no non-zero levels to quantize d into."""
        if v == 1:
            raise ValueError("d_bits must be 0 or at least 2")
        return v

    def get_tolerance(self, upm: int) -> float:
        """Get the approximation tolerance in font units."""
        return self.tolerance_per_em * upm


class RenderConfig(BaseModel):
    """Configuration for debug SVG output.

    Endpoints are scaled from font units to `size` units per em, mirrored
    vertically when `flip_y` is set, then translated by the offset.
    """

    size: float = Field(
        default=256.0,
        gt=0.0,
        le=8192.0,
        description="Rendered em size in output units",
    )
    offset_x: float = Field(
        default=0.0,
        description="Horizontal translation applied after scaling",
    )
    offset_y: float = Field(
        default=0.0,
        description="Vertical translation applied after scaling",
    )
    flip_y: bool = Field(
        default=True,
        description="Mirror the y axis (font coordinates are y-up, SVG is y-down)",
    )
    padding: float = Field(
        default=8.0,
        ge=0.0,
        description="Margin around the glyph extent in the SVG viewBox",
    )
    stroke_width: float = Field(
        default=1.0,
        gt=0.0,
        description="Stroke width of arc paths",
    )
    marker_radius: float = Field(
        default=1.5,
        ge=0.0,
        description="Radius of endpoint markers (0 disables markers)",
    )
    show_outline: bool = Field(
        default=True,
        description="Draw the original glyph outline underneath the arcs",
    )

    def get_scale(self, upm: int) -> float:
        """Scale factor from font units to output units."""
        return self.size / upm


class ProcessingConfig(BaseModel):
    """Configuration for glyph processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
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


class ArcGlyphSettings(BaseModel):
    """Main application settings."""

    approximation: ApproximationConfig = Field(default_factory=ApproximationConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ArcGlyphSettings:
    """Get default application settings."""
    return ArcGlyphSettings()
