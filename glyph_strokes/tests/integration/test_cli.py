"""Integration tests for the glyph-strokes command line interface."""

import pytest

from stroke_approx.cli import _create_argument_parser, main

pytestmark = pytest.mark.integration

SMALL_GRID = ['--width', '8', '--height', '12', '--strokes', '3', '--sequential',
              '--log-level', 'WARNING']


class TestArgumentParser:
    """Tests for argument defaults and validation."""

    def test_defaults(self):
        args = _create_argument_parser().parse_args([])
        assert args.width == 12
        assert args.height == 18
        assert args.strokes == 32
        assert args.neighborhood == 'full'
        assert not args.keep_empty

    def test_stroke_width_is_integer(self):
        with pytest.raises(SystemExit):
            _create_argument_parser().parse_args(['--stroke-width', '0.3'])

    def test_rejects_unknown_neighborhood(self):
        with pytest.raises(SystemExit):
            _create_argument_parser().parse_args(['--neighborhood', 'sideways'])


class TestMain:
    """End-to-end runs of main()."""

    def test_summary_output(self, capsys):
        assert main(['--chars', 'IL'] + SMALL_GRID) == 0
        out = capsys.readouterr().out
        assert 'Glyphs: 2/2' in out
        assert "'I'" in out

    def test_writes_preview(self, tmp_path):
        output = tmp_path / 'sheet.png'
        assert main(['--chars', 'T', '--output', str(output)] + SMALL_GRID) == 0
        assert output.exists()

    def test_sub_pixel_stroke_width_refused(self):
        with pytest.raises(SystemExit):
            main(['--chars', 'A', '--stroke-width', '0'] + SMALL_GRID)

    def test_wide_strokes_approximate_every_glyph(self, capsys):
        assert main(['--chars', 'AB', '--stroke-width', '2'] + SMALL_GRID) == 0
        assert 'Glyphs: 2/2' in capsys.readouterr().out

    def test_missing_font_fails(self, tmp_path):
        font = str(tmp_path / 'missing.ttf')
        assert main(['--chars', 'A', '--font', font] + SMALL_GRID) == 1
