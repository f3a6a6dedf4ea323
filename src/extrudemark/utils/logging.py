"""Logging utilities for Extrudemark."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Marks handlers installed here so reconfiguring replaces them
_HANDLER_TAG = "_extrudemark_handler"


@dataclass
class RenderStats:
    """Statistics from a render run."""

    glyph_count: int = 0
    face_count: int = 0
    dropped_edges: int = 0
    files_written: list[tuple[str, float, float]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in [h for h in root_logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("extrudemark")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_provider(self, source: str, units_per_em: int) -> None:
        """Log which outline source is in use."""
        self._logger.info("Outline provider ready", source=source, upm=units_per_em)

    def log_layout(
        self,
        asset: str,
        glyphs: int,
        faces: int,
        dropped_edges: int,
        width: float,
        height: float,
    ) -> None:
        """Log a completed layout pass."""
        self._logger.info(
            "Layout complete",
            asset=asset,
            glyphs=glyphs,
            faces=faces,
            dropped_edges=dropped_edges,
            width=round(width, 2),
            height=round(height, 2),
        )
        self._stats.glyph_count += glyphs
        self._stats.face_count += faces
        self._stats.dropped_edges += dropped_edges

    def log_glyph(
        self,
        char: str,
        x: float,
        rotation: float,
        faces: int,
        dropped_edges: int,
    ) -> None:
        """Log a placed glyph at debug level."""
        self._logger.debug(
            "Glyph placed",
            char=char,
            x=round(x, 2),
            rotation=round(rotation, 3),
            faces=faces,
            dropped=dropped_edges,
        )

    def log_empty_layout(self, asset: str) -> None:
        """Log a layout without any drawn glyph."""
        self._logger.warning("Layout has no glyphs", asset=asset)

    def log_file_written(self, path: Path, width: float, height: float) -> None:
        """Log a written document."""
        self._logger.info("Document written", path=str(path), width=width, height=height)
        self._stats.files_written.append((str(path), width, height))

    def log_error(self, error: Exception) -> None:
        """Log a fatal render error."""
        self._logger.error(
            "Render failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
