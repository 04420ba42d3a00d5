"""Shared pytest fixtures for the stroke_approx test suite.

Fixtures:
    center_ink: 3x3 grid with a single fully inked centre pixel
    blank_ink: 4x4 grid without any ink
    t_ink: 5x5 T-shaped glyph (full bar on row 1, stem in column 2)
    bar_ink: 5x1 grid, fully inked
    approximator: Small GlyphApproximator using Pillow's bundled font

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from stroke_approx.api.services import GlyphApproximator  # noqa: E402
from stroke_approx.config import OVERDRAW_THRESHOLD  # noqa: E402
from stroke_approx.errors import EmptyQueueError  # noqa: E402


def make_center_ink():
    ink = np.zeros((3, 3))
    ink[1, 1] = 1.0
    return ink


def make_t_ink():
    ink = np.zeros((5, 5))
    ink[1, :] = 1.0
    ink[2:, 2] = 1.0
    return ink


def run_checked_strokes(session, num_strokes):
    """Add strokes one at a time, asserting the ink invariants after each.

    Checks after every commit:
        - 0 <= remaining <= total <= 1 on every pixel
        - loss() never increases
        - a stroke with a legal cover overdraws no pixel it touches by more
          than OVERDRAW_THRESHOLD

    Stops early when every pixel has seeded a stroke.

    Returns:
        The records of the strokes that were added.
    """
    total = session.ink.total
    previous = session.loss()
    records = []
    for _ in range(num_strokes):
        try:
            record = session.add_stroke()
        except EmptyQueueError:
            break
        records.append(record)

        remaining = session.ink.remaining
        assert np.all(remaining >= 0.0)
        assert np.all(remaining <= total)
        assert np.all(total <= 1.0)

        loss = session.loss()
        assert loss <= previous + 1e-12
        previous = loss

        if record.cover.is_legal:
            for idx, w in session.evaluator.footprint(record.stroke):
                assert w - total[idx] <= OVERDRAW_THRESHOLD
    return records


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture
def center_ink():
    """3x3 grid whose only ink is the centre pixel."""
    return make_center_ink()


@pytest.fixture
def blank_ink():
    return np.zeros((4, 4))


@pytest.fixture
def t_ink():
    """5x5 'T': eight fully inked pixels."""
    return make_t_ink()


@pytest.fixture
def bar_ink():
    return np.ones((1, 5))


@pytest.fixture
def approximator():
    """Small-grid approximator so glyph tests stay fast."""
    return GlyphApproximator(width=8, height=12, num_strokes=6)
