"""Munge orchestration: normalize pieces, run them, record history.

Main Entry Points:
    munge: Apply mungepieces to a DataFrame and record them
    apply_pipeline: Alias of munge

Example:
    >>> from mungepipe.pipelines import munge
    >>> trained = munge(train_df, [column_transformation(double), "x"])
    >>> replayed = munge(new_df, trained)
"""

from mungepipe.errors import MungeError, MungeParseError, UnknownTransformationError
from mungepipe.pipelines.history import (
    HISTORY_ATTR,
    MungeHistory,
    get_mungepieces,
    merge_mungepieces,
    record_mungepieces,
)
from mungepipe.pipelines.munge import apply_pipeline, munge, run_mungepieces
from mungepipe.pipelines.normalize import normalize_mungepieces
from mungepipe.pipelines.plane import MungePlane, is_mungeplane, mungeplane

__all__ = [
    # Entry points
    "munge",
    "apply_pipeline",
    "run_mungepieces",
    "normalize_mungepieces",
    # Plane
    "MungePlane",
    "mungeplane",
    "is_mungeplane",
    # History
    "HISTORY_ATTR",
    "MungeHistory",
    "get_mungepieces",
    "merge_mungepieces",
    "record_mungepieces",
    # Errors
    "MungeError",
    "MungeParseError",
    "UnknownTransformationError",
]
