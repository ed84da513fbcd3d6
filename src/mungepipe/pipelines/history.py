"""Recorded mungepiece history stored on DataFrames.

History lives in ``DataFrame.attrs`` under ``HISTORY_ATTR``. It lists every
mungepiece applied to reach the frame, in application order, and only ever
grows: merging appends new pieces after the old ones.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from mungepipe.pieces.base import MungePiece

HISTORY_ATTR = "mungepieces"


class MungeHistory(list):
    """Recorded mungepieces.

    pandas deep-copies ``attrs`` whenever it derives a new object from a
    frame. Copies of a history are new lists holding the same pieces, so
    trained state stays shared with every frame derived from the original.
    """

    def __deepcopy__(self, memo):
        return type(self)(self)


def get_mungepieces(data: pd.DataFrame) -> list[MungePiece]:
    """Return the history recorded on ``data`` (empty if none).

    The returned list is the stored object itself, so its pieces are the
    very instances that were run.
    """
    return data.attrs.get(HISTORY_ATTR) or []


def merge_mungepieces(
    old: Sequence[MungePiece],
    new: Sequence[MungePiece],
) -> MungeHistory:
    """Concatenate previous and newly applied pieces, preserving order."""
    return MungeHistory([*old, *new])


def record_mungepieces(
    data: pd.DataFrame,
    old: Sequence[MungePiece],
    new: Sequence[MungePiece],
) -> pd.DataFrame:
    """Attach ``old + new`` as the history of ``data``.

    Nothing is written when ``new`` is empty, so a frame without history
    stays without one.
    """
    if new:
        data.attrs[HISTORY_ATTR] = merge_mungepieces(old, new)
    return data
