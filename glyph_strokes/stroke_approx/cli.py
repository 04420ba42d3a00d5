#!/usr/bin/env python3
"""Command-line interface for glyph stroke approximation.

Approximates each character of a string with straight strokes and prints a
per-glyph summary. Optionally writes a PNG preview sheet with one row per
character: the rendered glyph, the ink left uncovered, and the strokes drawn
back into the grid.

Usage:
    glyph-strokes --chars ABC
    glyph-strokes --chars "$(printf '%s' {a..z})" --font path/to/font.ttf --output sheet.png
    glyph-strokes --chars A --strokes 8 --neighborhood downward --log-level DEBUG

Or run via the module:
    python -m stroke_approx.cli --chars A
"""

from __future__ import annotations

import argparse
import time

from .api.services import GlyphApproximator
from .config import (
    ASCII_PRINTABLE,
    DEFAULT_HEIGHT,
    DEFAULT_NUM_STROKES,
    DEFAULT_STROKE_WIDTH,
    DEFAULT_WIDTH,
    LOSS_EPSILON,
    configure_logging,
)
from .errors import StrokeApproxError
from .optimization.strategies import Neighborhood
from .utils.rendering import make_preview_sheet, render_strokes


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        description='Approximate font glyphs with straight strokes'
    )
    parser.add_argument('--chars', '-c', type=str, default=ASCII_PRINTABLE,
                        help='Characters to approximate (default: printable ASCII)')
    parser.add_argument('--font', '-f', type=str, default=None,
                        help="Path to TTF/OTF font file (default: Pillow's font)")
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH,
                        help=f'Glyph grid width (default: {DEFAULT_WIDTH})')
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT,
                        help=f'Glyph grid height (default: {DEFAULT_HEIGHT})')
    parser.add_argument('--strokes', '-n', type=int, default=DEFAULT_NUM_STROKES,
                        help=f'Stroke budget per glyph (default: {DEFAULT_NUM_STROKES})')
    parser.add_argument('--stroke-width', type=int, default=DEFAULT_STROKE_WIDTH,
                        help=f'Stroke width in pixels (default: {DEFAULT_STROKE_WIDTH})')
    parser.add_argument('--loss-threshold', type=float, default=LOSS_EPSILON,
                        help=f'Stop once residual ink is below this (default: {LOSS_EPSILON})')
    parser.add_argument('--neighborhood', type=str, default=Neighborhood.FULL.value,
                        choices=[n.value for n in Neighborhood],
                        help='Endpoint moves tried by the hill climb (default: full)')
    parser.add_argument('--keep-empty', action='store_true',
                        help='Keep strokes that cover no new ink')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Write a PNG preview sheet to this path')
    parser.add_argument('--scale', type=int, default=4,
                        help='Preview upscaling factor (default: 4)')
    parser.add_argument('--sequential', '-s', action='store_true',
                        help='Run in this process instead of worker processes')
    parser.add_argument('--workers', '-w', type=int, default=None,
                        help='Worker processes (default: CPU count)')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Log level (default: WARNING)')
    return parser


def _write_preview(approximator: GlyphApproximator, results: dict, path: str,
                   scale: int) -> None:
    """Render glyph / remaining ink / strokes rows and save them as PNG."""
    rows = []
    for char, result in results.items():
        glyph = approximator.render(char)
        drawn = render_strokes(result.strokes, approximator.width, approximator.height)
        rows.append((glyph, result.remaining, drawn))

    make_preview_sheet(rows, scale=scale).save(path)


def main(argv: list[str] | None = None) -> int:
    """Command-line interface for glyph approximation.

    Parses command-line arguments, approximates the requested characters
    and prints one summary line per glyph.

    Returns:
        Process exit code: 0 on success, 1 if no glyph could be approximated.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    if args.stroke_width < 1:
        parser.error(f"--stroke-width must be at least 1, got {args.stroke_width}")

    configure_logging(level=args.log_level)

    approximator = GlyphApproximator(
        width=args.width,
        height=args.height,
        num_strokes=args.strokes,
        stroke_width=args.stroke_width,
        font_path=args.font,
        loss_threshold=args.loss_threshold,
        neighborhood=Neighborhood(args.neighborhood),
        skip_empty=not args.keep_empty,
    )

    print("=" * 60)
    print("Glyph Stroke Approximation")
    print("=" * 60)
    print(f"Font: {args.font or 'default'}")
    print(f"Grid: {args.width}x{args.height}, strokes: {args.strokes}")
    print(f"Mode: {'sequential' if args.sequential else 'parallel'}")
    print("=" * 60)

    start_time = time.time()
    results = approximator.approximate_alphabet(
        args.chars,
        max_workers=args.workers,
        parallel=not args.sequential,
    )
    elapsed = time.time() - start_time

    for char, result in results.items():
        print(f"  {char!r:6} strokes={len(result.strokes):3d}  "
              f"loss={result.loss:7.3f}  coverage={result.coverage:6.1%}  "
              f"stop={result.stop_reason.value}")

    print("=" * 60)
    print(f"Glyphs: {len(results)}/{len(set(args.chars))}")
    print(f"Time: {elapsed:.1f} seconds")

    if args.output and results:
        try:
            _write_preview(approximator, results, args.output, args.scale)
        except StrokeApproxError as e:
            print(f"Preview failed: {e}")
            return 1
        print(f"Saved preview to {args.output}")

    return 0 if results else 1


if __name__ == '__main__':
    raise SystemExit(main())
