"""Logging utilities for linefeather."""

import logging
from dataclasses import dataclass

import structlog


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    segment_count: int = 0
    skipped_segments: int = 0
    samples_evaluated: int = 0
    pixels_covered: int = 0
    path_length: float = 0.0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: str | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
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

    logger = structlog.get_logger("linefeather")
    logger.info("Logging initialized", log_file=log_file, level=file_level)

    return logger


class RenderLogger:
    """Logger for tracking rendering progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("linefeather")
        self._stats = RenderStats()

    def log_render_start(self, point_count: int, width: int, height: int) -> None:
        """Log start of a polyline render."""
        self._logger.info(
            "Rendering polyline",
            points=point_count,
            width=width,
            height=height,
        )

    def log_segment(
        self,
        segment_idx: int,
        length: float,
        traveled: float,
        samples: int,
    ) -> None:
        """Log a rendered segment."""
        self._logger.debug(
            "Segment rendered",
            segment=segment_idx,
            length=round(length, 3),
            traveled=round(traveled, 3),
            samples=samples,
        )
        self._stats.segment_count += 1
        self._stats.samples_evaluated += samples
        self._stats.path_length += length

    def log_segment_skipped(self, segment_idx: int, reason: str) -> None:
        """Log a segment that produced no samples."""
        self._logger.debug("Segment skipped", segment=segment_idx, reason=reason)
        self._stats.skipped_segments += 1

    def log_render_complete(self, pixels_covered: int, duration_ms: float) -> None:
        """Log completion of a render."""
        self._stats.pixels_covered = pixels_covered
        self._logger.info(
            "Polyline rendered",
            segments=self._stats.segment_count,
            samples=self._stats.samples_evaluated,
            pixels=pixels_covered,
            duration_ms=round(duration_ms, 2),
        )

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
