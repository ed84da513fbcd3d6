"""Mutable dataset handle passed through a munge run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd


@dataclass(eq=False)
class MungePlane:
    """Single-owner wrapper around the DataFrame being munged.

    Procedures read and write ``data`` in place, or assign a new frame to
    it. ``scratch`` holds transient artifacts procedures create during one
    run (memoized lookups and the like); the executor clears it when the
    run ends, successful or not.
    """

    data: pd.DataFrame
    scratch: dict[str, Any] = field(default_factory=dict)


def mungeplane(data: pd.DataFrame) -> MungePlane:
    """Wrap a DataFrame in a fresh plane."""
    if not isinstance(data, pd.DataFrame):
        raise TypeError(f"mungeplane expects a pandas DataFrame, got {type(data).__name__}")
    return MungePlane(data=data)


def is_mungeplane(value: Any) -> bool:
    return isinstance(value, MungePlane)
