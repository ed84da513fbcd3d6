"""Lift column-level functions into mungebit procedures.

``column_transformation`` turns a function of one Series into a procedure
that rewrites each selected column of the plane. ``multi_column_transformation``
turns a function of several Series into a procedure that writes one or more
output columns.

The columns a procedure operates on are resolved when it trains and stored
in the mungebit's ``inputs``, so prediction touches exactly the same columns
even when the selector was a predicate.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Optional, Sequence, Union

import pandas as pd

from .base import accepts_keyword

ColumnSelector = Union[None, Hashable, Sequence[Hashable], Callable[[pd.Series], bool]]


def resolve_columns(data: pd.DataFrame, columns: ColumnSelector) -> list[Hashable]:
    """Resolve a column selector against ``data``.

    Parameters
    ----------
    data : pd.DataFrame
        Frame whose columns are selected.
    columns : None, label, list of labels, or predicate
        ``None`` selects every column; a predicate is called with each
        column Series and selects those for which it returns True.

    Raises
    ------
    KeyError
        If explicitly named columns are missing from ``data``.
    """
    if columns is None:
        return list(data.columns)
    if callable(columns):
        return [col for col in data.columns if columns(data[col])]
    if isinstance(columns, (list, tuple, pd.Index)):
        selected = list(columns)
    else:
        selected = [columns]
    missing = [col for col in selected if col not in data.columns]
    if missing:
        raise KeyError(f"Columns not found: {missing}")
    return selected


def column_transformation(
    transformation: Callable[..., Any],
) -> Callable[..., None]:
    """Lift ``transformation(series, *args, **kwargs)`` to a plane procedure.

    The returned procedure is called as ``procedure(plane, columns=None,
    *args, **kwargs)`` and replaces each selected column with the function's
    result. If ``transformation`` declares an ``inputs`` parameter it gets a
    dict private to the column it is transforming; if it declares
    ``trained`` it gets the mungebit's trained flag.

    Examples
    --------
    >>> double = column_transformation(lambda x: 2 * x)
    >>> bit = MungeBit(double)
    >>> bit.run(plane, ["a", "b"])
    """
    wants_inputs = accepts_keyword(transformation, "inputs")
    wants_trained = accepts_keyword(transformation, "trained")

    def procedure(
        plane,
        columns: ColumnSelector = None,
        *args: Any,
        inputs: dict[str, Any],
        trained: bool,
        **kwargs: Any,
    ) -> None:
        if trained and "columns" in inputs:
            selected = inputs["columns"]
        else:
            selected = resolve_columns(plane.data, columns)
            inputs["columns"] = selected

        column_inputs = inputs.setdefault("column_inputs", {})
        for col in selected:
            extra: dict[str, Any] = {}
            if wants_inputs:
                extra["inputs"] = column_inputs.setdefault(col, {})
            if wants_trained:
                extra["trained"] = trained
            plane.data[col] = transformation(plane.data[col], *args, **kwargs, **extra)

    procedure.__name__ = procedure.__qualname__ = (
        f"column_transformation({getattr(transformation, '__name__', 'transformation')})"
    )
    return procedure


def multi_column_transformation(
    transformation: Callable[..., Any],
) -> Callable[..., None]:
    """Lift ``transformation(*series, *args, **kwargs)`` to a plane procedure.

    The returned procedure is called as ``procedure(plane, input_columns,
    output_columns, *args, **kwargs)``. ``transformation`` receives the input
    columns positionally and returns either a single result (one output
    column) or a sequence with one result per output column.

    Raises
    ------
    ValueError
        If the number of results does not match ``output_columns``.
    """
    wants_inputs = accepts_keyword(transformation, "inputs")
    wants_trained = accepts_keyword(transformation, "trained")

    def procedure(
        plane,
        input_columns: ColumnSelector,
        output_columns: Optional[Union[Hashable, Sequence[Hashable]]] = None,
        *args: Any,
        inputs: dict[str, Any],
        trained: bool,
        **kwargs: Any,
    ) -> None:
        if trained and "columns" in inputs:
            selected = inputs["columns"]
        else:
            selected = resolve_columns(plane.data, input_columns)
            inputs["columns"] = selected

        if output_columns is None:
            outputs = list(selected)
        elif isinstance(output_columns, (list, tuple)):
            outputs = list(output_columns)
        else:
            outputs = [output_columns]

        extra: dict[str, Any] = {}
        if wants_inputs:
            extra["inputs"] = inputs.setdefault("transformation_inputs", {})
        if wants_trained:
            extra["trained"] = trained

        result = transformation(*(plane.data[col] for col in selected), *args, **kwargs, **extra)

        if len(outputs) == 1:
            results = [result]
        elif isinstance(result, (list, tuple)):
            results = list(result)
        elif isinstance(result, pd.DataFrame):
            results = [result.iloc[:, i] for i in range(result.shape[1])]
        else:
            raise ValueError(
                f"Expected {len(outputs)} results for columns {outputs}, "
                f"got a single {type(result).__name__}"
            )
        if len(results) != len(outputs):
            raise ValueError(
                f"Expected {len(outputs)} results for columns {outputs}, got {len(results)}"
            )
        for col, values in zip(outputs, results):
            plane.data[col] = values

    procedure.__name__ = procedure.__qualname__ = (
        f"multi_column_transformation({getattr(transformation, '__name__', 'transformation')})"
    )
    return procedure
