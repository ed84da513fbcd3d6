"""Pytest configuration and fixtures.

The sys.path manipulation below enables running tests directly without
requiring `pip install -e .`.
"""
import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mungepipe.pieces.columns import column_transformation  # noqa: E402


@pytest.fixture
def x_frame():
    """Fresh single-column frame with X = [1, 2, 3]."""
    return pd.DataFrame({"X": [1, 2, 3]})


@pytest.fixture
def numeric_frame():
    """Fresh frame with a few numeric columns and a category column."""
    return pd.DataFrame(
        {
            "a": [1.0, 2.0, 3.0, 4.0],
            "b": [10.0, None, 30.0, 40.0],
            "c": [5, 6, 7, 8],
            "label": ["x", "y", "x", "z"],
        }
    )


@pytest.fixture
def double_triple():
    """Train doubles a column, predict triples it."""
    return (
        column_transformation(lambda x: 2 * x),
        column_transformation(lambda x: 3 * x),
    )
