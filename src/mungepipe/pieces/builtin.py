"""Built-in stateful column transformations.

Each factory takes a params dict (as found in configuration) and returns a
fresh, untrained MungeBit. Statistics are learned from the training data
only and frozen in the bit's inputs, so predict never looks at the
distribution of the data it is applied to.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from .base import MungeBit
from .columns import column_transformation, resolve_columns
from .errors import FittedStatistics, FittedVocabulary

IMPUTE_STRATEGIES = ("mean", "median", "mode", "constant")


def standardize(params: dict[str, Any] | None = None) -> MungeBit:
    """Center and scale columns with the training mean and std.

    Columns with zero spread are only centered.
    """

    def _standardize(x: pd.Series, inputs: dict[str, Any], trained: bool) -> pd.Series:
        if not trained:
            inputs["stats"] = FittedStatistics.from_series(x)
        stats: FittedStatistics = inputs["stats"]
        scale = stats.std if stats.std > 0 else 1.0
        return (x - stats.mean) / scale

    return MungeBit(column_transformation(_standardize))


def impute(params: dict[str, Any] | None = None) -> MungeBit:
    """Fill missing values with a value learned from training data.

    Parameters (via params)
    -----------------------
    strategy : {"mean", "median", "mode", "constant"}, default="mean"
    fill_value : Any
        Value used by the "constant" strategy.
    """
    params = params or {}
    strategy = params.get("strategy", "mean")
    if strategy not in IMPUTE_STRATEGIES:
        raise ValueError(f"Unknown impute strategy {strategy!r}; expected one of {IMPUTE_STRATEGIES}")
    if strategy == "constant" and "fill_value" not in params:
        raise ValueError("impute strategy 'constant' requires a fill_value")

    def _impute(x: pd.Series, inputs: dict[str, Any], trained: bool) -> pd.Series:
        if not trained:
            if strategy == "mean":
                fill = x.mean()
            elif strategy == "median":
                fill = x.median()
            elif strategy == "mode":
                modes = x.mode(dropna=True)
                fill = modes.iloc[0] if not modes.empty else None
            else:
                fill = params["fill_value"]
            inputs["fill_value"] = fill
        fill = inputs["fill_value"]
        if fill is None:
            return x
        return x.fillna(fill)

    return MungeBit(column_transformation(_impute))


def clip(params: dict[str, Any] | None = None) -> MungeBit:
    """Clip columns to the range observed in training data."""

    def _clip(x: pd.Series, inputs: dict[str, Any], trained: bool) -> pd.Series:
        if not trained:
            inputs["stats"] = FittedStatistics.from_series(x)
        stats: FittedStatistics = inputs["stats"]
        return x.clip(lower=stats.min_val, upper=stats.max_val)

    return MungeBit(column_transformation(_clip))


def encode_categories(params: dict[str, Any] | None = None) -> MungeBit:
    """Replace categories with integer codes from the training vocabulary.

    Parameters (via params)
    -----------------------
    unknown_idx : int, default=-1
        Code for values (including missing ones) not seen in training.
    """
    unknown_idx = int((params or {}).get("unknown_idx", -1))

    def _encode(x: pd.Series, inputs: dict[str, Any], trained: bool) -> pd.Series:
        if not trained:
            inputs["vocabulary"] = FittedVocabulary.from_values(
                x.dropna().unique(), unknown_idx=unknown_idx
            )
        vocab: FittedVocabulary = inputs["vocabulary"]
        return pd.Series(vocab.encode(x.tolist()), index=x.index, dtype="int64")

    return MungeBit(column_transformation(_encode))


def drop_columns(params: dict[str, Any] | None = None) -> MungeBit:
    """Drop columns; columns already absent are ignored."""

    def _drop(plane, columns=None, *, inputs: dict[str, Any], trained: bool) -> None:
        if not trained:
            inputs["columns"] = resolve_columns(plane.data, columns) if columns is not None else []
        present = [col for col in inputs["columns"] if col in plane.data.columns]
        plane.data.drop(columns=present, inplace=True)

    return MungeBit(_drop)
