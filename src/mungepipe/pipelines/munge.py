"""Apply mungepieces to a DataFrame and record them for later replay.

``munge`` runs a sequence of mungepieces against a DataFrame and stores the
pieces on the result, so the same transformations (with the same learned
parameters) can be replayed on new data:

    >>> train = munge(train_df, [(column_transformation(double), column_transformation(triple)), "x"])
    >>> scored = munge(new_df, train)  # replays every piece in predict mode

Pieces run strictly in order since later pieces may read columns produced
by earlier ones. A failing piece aborts the call and no history is
recorded; the columns it already touched are not rolled back.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

import pandas as pd
import structlog

from mungepipe.pieces.base import MungePiece

from .history import get_mungepieces, record_mungepieces
from .normalize import normalize_mungepieces
from .plane import MungePlane, is_mungeplane, mungeplane

log = structlog.get_logger()


def run_mungepieces(plane: MungePlane, pieces: Sequence[MungePiece]) -> None:
    """Run each piece against ``plane`` in order.

    Named pieces emit a progress event before they run. Exceptions from a
    piece propagate unchanged and stop the run. The plane's scratch space is
    cleared once the run ends, whether or not it succeeded.
    """
    try:
        for index, piece in enumerate(pieces):
            if piece.name:
                log.info("mungepiece_running", piece=piece.name, index=index)
            else:
                log.debug("mungepiece_running", index=index, trained=piece.trained)
            piece.run(plane)
    finally:
        plane.scratch.clear()


def munge(dataframe: Union[pd.DataFrame, MungePlane], *mungepieces: Any) -> Any:
    """Apply mungepieces to a DataFrame and record them as its history.

    Parameters
    ----------
    dataframe : DataFrame or MungePlane
        Data to operate on. It is mutated in place.
    *mungepieces
        Pieces to apply: procedures, ``(train, predict)`` pairs,
        ``[procedure, *args]`` lists, MungeBit/MungePiece objects, a single
        list or name-to-spec dict of those, or a previously munged
        DataFrame whose history should be replayed.

    Returns
    -------
    DataFrame
        The munged data, with history equal to the input's history followed
        by the pieces just applied. With no pieces the input is returned
        unchanged.

    Raises
    ------
    MungeParseError
        If a specification cannot be parsed. Nothing has run at that point.
    """
    pieces = normalize_mungepieces(*mungepieces)
    if not pieces:
        return dataframe

    plane = dataframe if is_mungeplane(dataframe) else mungeplane(dataframe)
    old_pieces = list(get_mungepieces(plane.data))

    log.debug("munge_started", pieces=len(pieces), history=len(old_pieces))
    run_mungepieces(plane, pieces)

    record_mungepieces(plane.data, old_pieces, pieces)
    log.debug("munge_finished", history=len(old_pieces) + len(pieces))
    return plane.data


apply_pipeline = munge
