"""Brand asset generation orchestration.

This module coordinates the full workflow: open the outline source, lay out
the wordmark and the icon, render both to SVG and write them.

Key components:
- BrandAssetGenerator: Main orchestrator class
"""

import time
from pathlib import Path

import structlog

from extrudemark.config import BrandSettings
from extrudemark.core.layout import LayoutEngine
from extrudemark.domain import LayoutResult
from extrudemark.exceptions import ExtrudeMarkError
from extrudemark.io import SvgRenderer, SvgWriter, open_outline_provider
from extrudemark.utils import RenderLogger, RenderStats, configure_logging


class BrandAssetGenerator:
    """Orchestrates wordmark and icon generation.

    Manages the complete workflow:
    1. Open the font (or the built-in block letters)
    2. Lay out the wordmark and the icon
    3. Render both layouts to SVG
    4. Write the documents and collect statistics

    Nothing is written if any layout fails.

    Example:
        settings = BrandSettings.from_options({"text": "Acme", "seed": 3})
        stats = BrandAssetGenerator(settings).generate()
    """

    def __init__(self, config: BrandSettings, configure: bool = True) -> None:
        """Initialize the generator with configuration.

        Args:
            config: Validated application settings
            configure: Set up logging from config.logging
        """
        self.config = config
        if configure:
            self.logger = configure_logging(
                log_file=config.logging.log_file,
                console_level=config.logging.log_level,
                file_level=config.logging.file_log_level,
            )
        else:
            self.logger = structlog.get_logger("extrudemark")
        self.render_logger = RenderLogger(self.logger)
        self.renderer = SvgRenderer(config)

    @property
    def logo_path(self) -> Path:
        """Destination of the wordmark."""
        output = self.config.output
        return SvgWriter.asset_path(output.out_dir, self.config.layout.text, "logo", output.logo_file)

    @property
    def icon_path(self) -> Path:
        """Destination of the icon."""
        output = self.config.output
        return SvgWriter.asset_path(output.out_dir, self.config.layout.text, "favicon", output.icon_file)

    def build(self) -> tuple[LayoutResult, LayoutResult]:
        """Lay out wordmark and icon without writing anything.

        Returns:
            Tuple of (wordmark layout, icon layout)

        Raises:
            ConfigurationError: If the font cannot be loaded
            GlyphNotFoundError: If a character has no outline
            MalformedOutlineError: If an outline is corrupt
        """
        with open_outline_provider(self.config.output.font_path) as provider:
            source = str(self.config.output.font_path or "built-in block letters")
            self.render_logger.log_provider(source, provider.units_per_em)

            engine = LayoutEngine(provider, self.config, render_logger=self.render_logger)
            wordmark = engine.layout_wordmark()
            icon = engine.layout_icon()

        for asset, layout in (("logo", wordmark), ("favicon", icon)):
            if layout.is_empty:
                self.render_logger.log_empty_layout(asset)
            self.render_logger.log_layout(
                asset,
                glyphs=len(layout.geometries),
                faces=layout.face_count,
                dropped_edges=sum(g.dropped_edges for g in layout.geometries),
                width=layout.width,
                height=layout.height,
            )
        return wordmark, icon

    def generate(self) -> RenderStats:
        """Generate and write the wordmark and icon SVG files.

        Returns:
            RenderStats with counts, written files and timing

        Raises:
            ExtrudeMarkError: Any configuration, glyph, outline or output error
        """
        stats = self.render_logger.stats
        stats.start_time = time.time()

        try:
            wordmark, icon = self.build()
            documents = [
                (self.logo_path, wordmark, self.renderer.render(wordmark)),
                (self.icon_path, icon, self.renderer.render_icon(icon)),
            ]
            for path, layout, drawing in documents:
                SvgWriter(path).save(drawing)
                width, height = self.renderer.canvas_size(layout)
                self.render_logger.log_file_written(path, width, height)
        except ExtrudeMarkError as e:
            self.render_logger.log_error(e)
            raise

        stats.end_time = time.time()
        return stats
