"""Mungebit errors and frozen learned-state dataclasses.

Provides the error raised when predict is requested from an untrained
mungebit and immutable dataclasses for parameters learned at train time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable

from mungepipe.errors import MungeError


class NotTrainedError(MungeError, ValueError, AttributeError):
    """Exception raised when predict is called before train.

    Inherits from both ValueError and AttributeError to match sklearn's
    NotFittedError convention, allowing it to be caught by either type.

    Examples
    --------
    >>> bit = MungeBit(train_fn, predict_fn)
    >>> bit.predict(plane)  # doctest: +SKIP
    Traceback (most recent call last):
        ...
    NotTrainedError: This mungebit has not been trained yet.
    """


@dataclass(frozen=True)
class FittedVocabulary:
    """Immutable vocabulary learned from training data.

    Parameters
    ----------
    categories : tuple
        Ordered unique values from training data.
    category_to_idx : dict
        Mapping from category value to integer code.
    unknown_idx : int, default=-1
        Code used for values not seen during training.

    Examples
    --------
    >>> vocab = FittedVocabulary.from_values(["b", "a", "b"])
    >>> vocab.encode(["a", "z"])
    [0, -1]
    """

    categories: tuple[Hashable, ...]
    category_to_idx: dict[Hashable, int] = field(default_factory=dict)
    unknown_idx: int = -1

    @classmethod
    def from_values(cls, values, unknown_idx: int = -1) -> "FittedVocabulary":
        """Build a sorted vocabulary from already de-nulled values."""
        categories = tuple(sorted(set(values), key=str))
        return cls(
            categories=categories,
            category_to_idx={c: i for i, c in enumerate(categories)},
            unknown_idx=unknown_idx,
        )

    def encode(self, values) -> list[int]:
        """Encode values using the frozen vocabulary.

        Unknown and missing values map to ``unknown_idx``.
        """
        return [self.category_to_idx.get(v, self.unknown_idx) for v in values]


@dataclass(frozen=True)
class FittedStatistics:
    """Immutable statistics learned from a training column.

    Examples
    --------
    >>> stats = FittedStatistics(mean=50.0, std=10.0, min_val=20.0, max_val=80.0)
    >>> stats.mean
    50.0
    """

    mean: float
    std: float
    min_val: float
    max_val: float

    @classmethod
    def from_series(cls, series: Any) -> "FittedStatistics":
        """Compute statistics from a numeric Series, ignoring missing values."""
        return cls(
            mean=float(series.mean()),
            std=float(series.std(ddof=0)),
            min_val=float(series.min()),
            max_val=float(series.max()),
        )
