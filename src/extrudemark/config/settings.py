"""Configuration settings for Extrudemark."""

import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, Field, ValidationError, model_validator

from extrudemark.exceptions import ConfigurationError

logger = structlog.get_logger("extrudemark.config")


class PaletteConfig(BaseModel):
    """Colors used for faces, outlines and the optional background."""

    background: str = Field(default="#dee3e2", description="Background fill when not transparent")
    c1: str = Field(default="#78b3d6", description="First side-face accent")
    c2: str = Field(default="#d86969", description="Second side-face accent")
    c3: str = Field(default="#4f7969", description="Third side-face accent")
    c4: str = Field(default="#fccbcb", description="Fourth side-face accent")
    top_fill: str = Field(default="#f2f2f2", description="Front face fill")
    stroke: str = Field(default="#1e1e1e", description="Outline stroke color")

    @property
    def accents(self) -> list[str]:
        """Side-face colors in cycling order."""
        return [self.c1, self.c2, self.c3, self.c4]


class ExtrusionConfig(BaseModel):
    """Configuration for the extrusion effect and per-glyph jitter.

    Distances are in canvas units (the same units as ``font_size``); angles
    are in degrees, measured counter-clockwise from the positive x axis as
    seen on screen.
    """

    depth: float = Field(
        default=13.0,
        ge=0.0,
        le=500.0,
        description="Extrusion magnitude",
    )
    depth_angle: float = Field(
        default=22.6,
        ge=-360.0,
        le=360.0,
        description="Base extrusion direction",
    )
    depth_jitter: float = Field(
        default=8.0,
        ge=0.0,
        le=180.0,
        description="Full range of random spread around depth_angle",
    )
    depth_variance: float = Field(
        default=0.15,
        ge=0.0,
        le=1.0,
        description="Full range of random relative change of depth",
    )
    tilt: float = Field(
        default=10.0,
        ge=0.0,
        le=90.0,
        description="Full range of per-glyph rotation (rotation is within +/- tilt/2)",
    )
    curve_res: int = Field(
        default=12,
        ge=1,
        le=256,
        description="Samples per Bezier segment when flattening",
    )
    close_epsilon: float = Field(
        default=0.25,
        gt=0.0,
        le=5.0,
        description="Distance under which a closing point is treated as coincident",
    )
    face_epsilon: float = Field(
        default=0.45,
        gt=0.0,
        le=5.0,
        description="Edges shorter than this produce no side face",
    )

    def offset_vector(self, depth: float, angle: float) -> tuple[float, float]:
        """Convert a magnitude and screen angle to a canvas (y-down) offset.

        Args:
            depth: Offset magnitude
            angle: Direction in degrees, counter-clockwise on screen

        Returns:
            Tuple of (dx, dy) in canvas coordinates
        """
        radians = math.radians(angle)
        return (depth * math.cos(radians), -depth * math.sin(radians))


class LayoutConfig(BaseModel):
    """Configuration for text layout and canvas sizing."""

    text: str = Field(default="Pluribus", description="Wordmark text")
    icon_text: str = Field(default="P", min_length=1, description="Icon glyph")
    font_size: float = Field(default=244.0, gt=0.0, le=4096.0, description="Wordmark font size")
    tracking: float = Field(default=-2.0, ge=-500.0, le=500.0, description="Extra spacing after each glyph")
    canvas_width: float | None = Field(
        default=None,
        gt=0.0,
        description="Fixed wordmark canvas width (None = size to content)",
    )
    canvas_height: float | None = Field(
        default=None,
        gt=0.0,
        description="Fixed wordmark canvas height (None = size to content)",
    )
    baseline: float | None = Field(
        default=None,
        description="Baseline for fixed canvas (None = 0.68 * canvas_height)",
    )
    padding: float = Field(
        default=24.0,
        ge=0.0,
        le=1000.0,
        description="Explicit inset added around auto-sized content",
    )
    icon_size: int = Field(default=256, ge=16, le=4096, description="Icon canvas edge length")
    icon_rotation: float = Field(default=-6.0, ge=-90.0, le=90.0, description="Icon glyph rotation")
    icon_depth_scale: float = Field(default=0.9, gt=0.0, le=4.0, description="Icon depth relative to depth")

    @model_validator(mode="after")
    def _check_canvas(self) -> "LayoutConfig":
        if (self.canvas_width is None) != (self.canvas_height is None):
            raise ValueError("canvas_width and canvas_height must be set together")
        return self

    @property
    def is_fixed_canvas(self) -> bool:
        """Whether the wordmark uses a caller-supplied canvas."""
        return self.canvas_width is not None and self.canvas_height is not None


class OutputConfig(BaseModel):
    """Configuration for output documents and the outline source."""

    out_dir: Path = Field(default=Path("assets"), description="Directory for generated SVG files")
    logo_file: str | None = Field(default=None, description="Wordmark file name (None = <slug>-logo.svg)")
    icon_file: str | None = Field(default=None, description="Icon file name (None = <slug>-favicon.svg)")
    font_path: Path | None = Field(default=None, description="TTF/OTF font (None = built-in block letters)")
    transparent: bool = Field(default=True, description="Omit the background rectangle")
    back_outline: bool = Field(default=True, description="Stroke the back copy for silhouette definition")
    stroke_width: float = Field(default=1.2, ge=0.0, le=50.0, description="Front outline stroke width")


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


# Flat option name -> (section, field)
OPTION_FIELDS: dict[str, tuple[str | None, str]] = {
    "text": ("layout", "text"),
    "iconText": ("layout", "icon_text"),
    "fontSize": ("layout", "font_size"),
    "tracking": ("layout", "tracking"),
    "width": ("layout", "canvas_width"),
    "height": ("layout", "canvas_height"),
    "baseline": ("layout", "baseline"),
    "padding": ("layout", "padding"),
    "iconSize": ("layout", "icon_size"),
    "iconRotation": ("layout", "icon_rotation"),
    "bg": ("palette", "background"),
    "c1": ("palette", "c1"),
    "c2": ("palette", "c2"),
    "c3": ("palette", "c3"),
    "c4": ("palette", "c4"),
    "topFill": ("palette", "top_fill"),
    "stroke": ("palette", "stroke"),
    "depth": ("extrusion", "depth"),
    "depthAngle": ("extrusion", "depth_angle"),
    "depthJitter": ("extrusion", "depth_jitter"),
    "depthVariance": ("extrusion", "depth_variance"),
    "tilt": ("extrusion", "tilt"),
    "curveRes": ("extrusion", "curve_res"),
    "transparent": ("output", "transparent"),
    "outDir": ("output", "out_dir"),
    "font": ("output", "font_path"),
    "logoFile": ("output", "logo_file"),
    "iconFile": ("output", "icon_file"),
    "backOutline": ("output", "back_outline"),
    "seed": (None, "seed"),
}


class BrandSettings(BaseModel):
    """Main application settings."""

    seed: int = Field(default=7, description="PRNG seed (masked to 32 bits)")
    palette: PaletteConfig = Field(default_factory=PaletteConfig)
    extrusion: ExtrusionConfig = Field(default_factory=ExtrusionConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "BrandSettings":
        """Build validated settings from a flat option mapping.

        Unknown keys are ignored. The legacy ``depthX``/``depthY`` pair is
        accepted and converted to ``depth``/``depthAngle`` unless those are
        given explicitly.

        Args:
            options: Flat mapping such as {"text": "Acme", "seed": "3"}

        Returns:
            Validated BrandSettings

        Raises:
            ConfigurationError: If any recognized option has an invalid value
        """
        sections: dict[str, dict[str, Any]] = {
            "palette": {},
            "extrusion": {},
            "layout": {},
            "output": {},
        }
        top_level: dict[str, Any] = {}

        for key, value in options.items():
            target = OPTION_FIELDS.get(key)
            if target is None:
                if key not in ("depthX", "depthY"):
                    logger.debug("Ignoring unknown option", option=key)
                continue
            section, name = target
            if section is None:
                top_level[name] = value
            else:
                sections[section][name] = value

        if "depthX" in options or "depthY" in options:
            try:
                dx = float(options.get("depthX", 12))
                dy = float(options.get("depthY", -5))
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid depthX/depthY: {e}") from e
            # depthY is in y-down canvas units, so negative means "up"
            sections["extrusion"].setdefault("depth", math.hypot(dx, dy))
            sections["extrusion"].setdefault("depth_angle", math.degrees(math.atan2(-dy, dx)))

        try:
            return cls(**top_level, **{k: v for k, v in sections.items() if v})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def get_default_settings() -> BrandSettings:
    """Get default application settings."""
    return BrandSettings()
