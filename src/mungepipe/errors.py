"""Munge exception hierarchy.

Errors raised by mungepipe itself carry the name of the mungepiece they
concern when one is known. Exceptions raised inside train or predict
procedures are never wrapped: they propagate to the caller unchanged so a
failed munge call surfaces the original traceback.
"""

from __future__ import annotations


class MungeError(Exception):
    """Base exception for mungepipe failures.

    Attributes:
        message: Human-readable error description.
        piece: Name of the mungepiece involved (optional).

    Example:
        >>> raise MungeError("Something went wrong", piece="scale_age")
        MungeError: [scale_age] Something went wrong
    """

    def __init__(self, message: str, piece: str = "") -> None:
        """Initialize munge error.

        Args:
            message: Error description.
            piece: Mungepiece name (optional).
        """
        self.message = message
        self.piece = piece
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format error with piece prefix if available."""
        if self.piece:
            return f"[{self.piece}] {self.message}"
        return self.message


class MungeParseError(MungeError, ValueError):
    """A mungepiece specification has an unrecognized shape.

    Raised while normalizing the arguments of ``munge`` and therefore always
    before any mungepiece has touched the data.
    """


class UnknownTransformationError(MungeError, KeyError):
    """A configured step names a transformation that is not registered."""
