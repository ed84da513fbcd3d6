"""Normalize the arguments of ``munge`` into an ordered list of mungepieces.

Every call-site shorthand is resolved here, once, into canonical
MungePiece objects; nothing downstream inspects spec shapes again.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from mungepipe.pieces.base import MungeBit, MungePiece
from mungepipe.pieces.parse import is_procedure_pair, parse_mungepiece

from .history import get_mungepieces
from .plane import is_mungeplane


def _is_dataset(value: Any) -> bool:
    return isinstance(value, pd.DataFrame) or is_mungeplane(value)


def _history_of(value: Any) -> list[MungePiece]:
    return get_mungepieces(value.data if is_mungeplane(value) else value)


def _is_procedure(value: Any) -> bool:
    return (
        isinstance(value, MungeBit)
        or is_procedure_pair(value)
        or (callable(value) and not isinstance(value, MungePiece))
    )


def _is_piece_like(value: Any) -> bool:
    """True when ``value`` parses on its own into one mungepiece.

    Plain sequences of column names are arguments, not pieces.
    """
    if isinstance(value, MungePiece) or _is_procedure(value):
        return True
    if isinstance(value, (list, tuple)) and value:
        return isinstance(value[0], MungePiece) or _is_procedure(value[0])
    return False


def normalize_mungepieces(*specs: Any) -> list[MungePiece]:
    """Resolve ``munge`` arguments into mungepieces, in application order.

    Resolution order:

    1. no specs: no pieces
    2. a dataset (DataFrame or MungePlane): its recorded history
    3. a single list whose every element is itself a piece spec: each
       element is one spec
    4. a single dict: display name to spec, in insertion order
    5. anything else: each spec is parsed into one piece

    Raises
    ------
    MungeParseError
        If any spec cannot be parsed. Raised before any piece runs.
    """
    if not specs:
        return []

    if len(specs) == 1:
        (spec,) = specs
        if _is_dataset(spec):
            return list(_history_of(spec))
        if isinstance(spec, list) and all(_is_piece_like(item) for item in spec):
            specs = tuple(spec)
        elif isinstance(spec, dict):
            return [parse_mungepiece(value, name=str(key)) for key, value in spec.items()]

    pieces: list[MungePiece] = []
    for spec in specs:
        if _is_dataset(spec):
            pieces.extend(_history_of(spec))
        else:
            pieces.append(parse_mungepiece(spec))
    return pieces
