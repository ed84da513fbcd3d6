"""Parse shorthand mungepiece specifications into MungePiece objects.

Accepted shapes:

- ``fn``: train and predict are both ``fn``
- ``(train_fn, predict_fn)``: distinct train and predict procedures
  (``predict_fn`` may be ``None`` for a no-op prediction)
- ``MungeBit``: wrapped without arguments
- ``MungePiece``: returned unchanged
- ``[head, *args]`` or ``(head, *args)``: ``head`` is any of the above
  procedure shapes and ``args`` are passed to it on every run
"""

from __future__ import annotations

from typing import Any, Optional

from mungepipe.errors import MungeParseError

from .base import MungeBit, MungePiece


def is_procedure_pair(value: Any) -> bool:
    """True for a ``(train_fn, predict_fn)`` tuple."""
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and callable(value[0])
        and (value[1] is None or callable(value[1]))
    )


def parse_mungebit(value: Any) -> Optional[MungeBit]:
    """Build a mungebit from a procedure shape, or None if ``value`` is not one."""
    if isinstance(value, MungeBit):
        return value
    if is_procedure_pair(value):
        return MungeBit(value[0], value[1])
    if callable(value) and not isinstance(value, MungePiece):
        return MungeBit(value)
    return None


def parse_mungepiece(value: Any, name: Optional[str] = None) -> MungePiece:
    """Parse one shorthand specification into exactly one MungePiece.

    Parameters
    ----------
    value : Any
        The shorthand specification.
    name : str, optional
        Display name for a newly built piece. An existing MungePiece is
        returned as is and keeps its own name, since the same object may
        already be recorded in other histories.

    Raises
    ------
    MungeParseError
        If ``value`` does not match any recognized shape.
    """
    if isinstance(value, MungePiece):
        return value

    bit = parse_mungebit(value)
    if bit is not None:
        return MungePiece(bit, name=name)

    if isinstance(value, (list, tuple)):
        if not value:
            raise MungeParseError("Cannot parse an empty mungepiece specification", piece=name or "")
        head, args = value[0], tuple(value[1:])
        if isinstance(head, MungePiece):
            if args:
                raise MungeParseError(
                    "A MungePiece cannot take additional arguments",
                    piece=name or head.name or "",
                )
            return parse_mungepiece(head, name=name)
        bit = parse_mungebit(head)
        if bit is not None:
            return MungePiece(bit, train_args=args, name=name)

    raise MungeParseError(
        f"Unrecognized mungepiece specification of type {type(value).__name__}: {value!r}",
        piece=name or "",
    )
