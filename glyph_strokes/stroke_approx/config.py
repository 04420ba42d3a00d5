"""Shared configuration for the stroke approximation engine.

This module centralizes the numeric constants used by the rasterizer, the
cover evaluator and the session drivers, plus the logging setup used by the
command line front end.

Having these values in one place keeps the library modules and the CLI in
agreement and makes it easy to tune behaviour globally.

Attributes:
    DEFAULT_STROKE_WIDTH (int): Stroke width in pixels used by sessions (1).
    OVERDRAW_THRESHOLD (float): Maximum excess ink a stroke may deposit on a
        pixel beyond the glyph's own ink before it is rejected (0.55).
    COVER_FALLOFF (float): Distance divisor of the coverage weight (1.5).
    MAX_DISTANCE_FACTOR (float): A visited pixel farther than this many
        stroke widths from the stroke is a geometry error (3).
    LOSS_EPSILON (float): Residual loss regarded as "done" (0.05).
    DEFAULT_WIDTH (int): Default glyph grid width (12).
    DEFAULT_HEIGHT (int): Default glyph grid height (18).
    DEFAULT_NUM_STROKES (int): Default stroke budget per glyph (32).
    BASELINE_RATIO (float): Baseline position as a fraction of the height.
    ASCII_PRINTABLE (str): Default character set for alphabet batches.
"""

import logging

# Module logger
logger = logging.getLogger(__name__)

# Coverage model
DEFAULT_STROKE_WIDTH = 1
OVERDRAW_THRESHOLD = 0.55
COVER_FALLOFF = 1.5
MAX_DISTANCE_FACTOR = 3

# Stopping
LOSS_EPSILON = 0.05

# Glyph grid
DEFAULT_WIDTH = 12
DEFAULT_HEIGHT = 18
DEFAULT_NUM_STROKES = 32
BASELINE_RATIO = 0.75

ASCII_PRINTABLE = (
    '!"#$%&\'()*+,-./0123456789:;<=>?@'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`'
    'abcdefghijklmnopqrstuvwxyz{|}~'
)


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Sets up a consistent log format across all modules. Library code never
    calls this; it is meant for entry points such as the CLI.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.

    Example:
        Configure at startup::

            from stroke_approx.config import configure_logging
            configure_logging(level='DEBUG')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Pillow logs plugin discovery at DEBUG
    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')
