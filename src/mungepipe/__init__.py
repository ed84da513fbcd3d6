"""Record and replay stateful DataFrame transformations."""

from mungepipe.pieces import (
    MungeBit,
    MungePiece,
    NotTrainedError,
    column_transformation,
    multi_column_transformation,
    parse_mungepiece,
)
from mungepipe.pipelines import (
    MungeError,
    MungeParseError,
    MungePlane,
    apply_pipeline,
    get_mungepieces,
    munge,
    mungeplane,
)

__all__ = [
    "munge",
    "apply_pipeline",
    "get_mungepieces",
    "MungeBit",
    "MungePiece",
    "MungePlane",
    "mungeplane",
    "column_transformation",
    "multi_column_transformation",
    "parse_mungepiece",
    "MungeError",
    "MungeParseError",
    "NotTrainedError",
]
