"""Glyph and stroke rendering utilities.

This module provides the thin Pillow adapters around the approximation
engine: turning a character into an ink grid, drawing normalized strokes
back into an ink grid, and producing grayscale previews.

The module provides the following functions:
    render_glyph_ink: Render a single character as an ink grid.
    render_strokes: Rasterize normalized strokes into an ink grid.
    ink_to_image: Convert an ink grid to a grayscale preview image.
    make_preview_sheet: Tile rows of ink grids into one preview image.

Example usage:
    Rendering a glyph and its approximation::

        from stroke_approx.utils.rendering import render_glyph_ink, render_strokes

        ink = render_glyph_ink('A', width=12, height=18)
        ...
        drawn = render_strokes(result.strokes, width=12, height=18)
        ink_to_image(drawn).save('A.png')
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from ..config import BASELINE_RATIO
from .geometry import denormalize_point

logger = logging.getLogger(__name__)


def _load_font(font_path: Optional[str], size: int):
    if font_path is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(font_path, size)


def render_glyph_ink(char: str, width: int, height: int,
                     font_path: Optional[str] = None) -> Optional[np.ndarray]:
    """Render a glyph as an ink grid.

    The character is drawn at a font size of ``width`` pixels with its
    baseline at ``BASELINE_RATIO * height`` and its origin at the left edge,
    so glyphs of one font share a common frame.

    Args:
        char: Single character to render.
        width: Grid width in pixels; also the font size.
        height: Grid height in pixels.
        font_path: Path to a TTF/OTF font. None uses Pillow's bundled font.

    Returns:
        Float array of shape ``(height, width)`` with ink in [0, 1], where 1
        is fully inked. Returns None if the font cannot be loaded.

    Example:
        >>> ink = render_glyph_ink('I', 12, 18)
        >>> ink.shape
        (18, 12)
    """
    try:
        font = _load_font(font_path, width)
    except OSError as e:
        logger.warning("Failed to load font %s: %s", font_path, e)
        return None

    img = Image.new('L', (width, height), 0)
    draw = ImageDraw.Draw(img)
    origin = (0, height * BASELINE_RATIO)
    if isinstance(font, ImageFont.FreeTypeFont):
        draw.text(origin, char, fill=255, font=font, anchor='ls')
    else:
        # Bitmap fonts have no anchor support; place the top edge instead
        draw.text((0, 0), char, fill=255, font=font)

    return np.asarray(img, dtype=np.float64) / 255.0


def render_strokes(strokes: Iterable[Sequence[float]], width: int, height: int,
                   line_width: int = 1) -> np.ndarray:
    """Draw normalized strokes into an ink grid.

    Args:
        strokes: ``(x0, y0, x1, y1)`` tuples in ``[-0.5, 0.5)`` centred
            coordinates, as produced by an approximation session.
        width: Grid width in pixels.
        height: Grid height in pixels.
        line_width: Pen width in pixels.

    Returns:
        Float array of shape ``(height, width)`` with ink in [0, 1].
    """
    img = Image.new('L', (width, height), 0)
    draw = ImageDraw.Draw(img)
    for x0, y0, x1, y1 in strokes:
        start = denormalize_point(x0, y0, width, height)
        end = denormalize_point(x1, y1, width, height)
        draw.line([start, end], fill=255, width=line_width)
    return np.asarray(img, dtype=np.float64) / 255.0


def ink_to_image(ink: np.ndarray) -> Image.Image:
    """Grayscale preview of an ink grid: ink 1 is black, ink 0 is white."""
    ink = np.clip(np.asarray(ink, dtype=np.float64), 0.0, 1.0)
    return Image.fromarray(np.round(255 - ink * 255).astype(np.uint8))


def make_preview_sheet(rows: List[Tuple[np.ndarray, ...]], scale: int = 4,
                       gap: int = 2) -> Image.Image:
    """Tile rows of equally sized ink grids into one preview image.

    Args:
        rows: Each row is a tuple of ink grids, e.g. (glyph, remaining,
            strokes) for one character.
        scale: Nearest-neighbour upscaling factor per cell.
        gap: Gap between cells in pixels (after scaling).

    Returns:
        Grayscale image on a white background.
    """
    if not rows:
        return Image.new('L', (1, 1), 255)

    cell_h, cell_w = rows[0][0].shape
    cell_w *= scale
    cell_h *= scale
    n_cols = max(len(row) for row in rows)
    sheet = Image.new('L', (n_cols * (cell_w + gap) + gap, len(rows) * (cell_h + gap) + gap), 255)

    for r, row in enumerate(rows):
        for c, ink in enumerate(row):
            cell = ink_to_image(ink).resize((cell_w, cell_h), Image.Resampling.NEAREST)
            sheet.paste(cell, (gap + c * (cell_w + gap), gap + r * (cell_h + gap)))

    return sheet
