"""Mungebits and mungepieces with train/predict state tracking.

A mungebit pairs a train procedure with a predict procedure. The first time
it runs it trains, learning whatever parameters it needs from the data it
sees; every later run replays the predict procedure with those parameters.
A mungepiece binds a mungebit to the arguments it runs with, so that the
exact same transformation can be re-applied to new data.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

from .errors import NotTrainedError

if TYPE_CHECKING:
    from mungepipe.pipelines.plane import MungePlane

Procedure = Callable[..., Any]

_SAME = object()


def accepts_keyword(fn: Callable[..., Any], name: str) -> bool:
    """Return True if ``fn`` declares a parameter that can be passed by ``name``."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return False
    param = signature.parameters.get(name)
    return param is not None and param.kind in (
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
        inspect.Parameter.KEYWORD_ONLY,
    )


class MungeBit:
    """A train/predict procedure pair with trained-state tracking.

    Procedures are called as ``fn(plane, *args, **kwargs)`` and mutate
    ``plane.data`` in place. A procedure that declares an ``inputs``
    parameter receives this bit's learned-parameter dict, and one that
    declares ``trained`` receives the current trained flag. This lets a
    single procedure serve as both train and predict.

    Parameters
    ----------
    train_function : callable
        Procedure run on the first call to ``run``.
    predict_function : callable or None, optional
        Procedure run on every later call. Defaults to ``train_function``.
        ``None`` makes prediction a no-op.

    Attributes
    ----------
    inputs : dict
        Parameters learned during training, shared by both procedures.

    Examples
    --------
    >>> bit = MungeBit(train_fn, predict_fn)
    >>> bit.trained
    False
    >>> bit.run(plane)
    >>> bit.trained
    True
    """

    def __init__(
        self,
        train_function: Procedure,
        predict_function: Optional[Procedure] | object = _SAME,
    ) -> None:
        if not callable(train_function):
            raise TypeError(f"train_function must be callable, got {type(train_function).__name__}")
        if predict_function is _SAME:
            predict_function = train_function
        if predict_function is not None and not callable(predict_function):
            raise TypeError(
                f"predict_function must be callable or None, got {type(predict_function).__name__}"
            )
        self.train_function = train_function
        self.predict_function = predict_function
        self.inputs: dict[str, Any] = {}
        self._trained_ = False

    @property
    def trained(self) -> bool:
        """True once the train procedure has completed successfully."""
        return self._trained_

    def run(self, plane: "MungePlane", *args: Any, **kwargs: Any) -> None:
        """Train on the first call, predict on every call after that."""
        if self.trained:
            self.predict(plane, *args, **kwargs)
        else:
            self.train(plane, *args, **kwargs)

    def train(self, plane: "MungePlane", *args: Any, **kwargs: Any) -> None:
        """Run the train procedure and mark this bit as trained.

        A procedure that raises leaves the bit untrained.
        """
        self._call(self.train_function, plane, args, kwargs)
        self._trained_ = True

    def predict(self, plane: "MungePlane", *args: Any, **kwargs: Any) -> None:
        """Run the predict procedure with the learned ``inputs``.

        Raises
        ------
        NotTrainedError
            If the bit has not been trained yet.
        """
        if not self.trained:
            raise NotTrainedError(
                "This mungebit has not been trained yet. "
                "Call 'train' or 'run' on training data before using 'predict'."
            )
        if self.predict_function is None:
            return
        self._call(self.predict_function, plane, args, kwargs)

    def _call(
        self,
        fn: Procedure,
        plane: "MungePlane",
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        extra: dict[str, Any] = {}
        if accepts_keyword(fn, "inputs"):
            extra["inputs"] = self.inputs
        if accepts_keyword(fn, "trained"):
            extra["trained"] = self.trained
        fn(plane, *args, **kwargs, **extra)

    def __repr__(self) -> str:
        state = "trained" if self.trained else "untrained"
        return f"<MungeBit {_procedure_name(self.train_function)} ({state})>"


@dataclass(eq=False)
class MungePiece:
    """A mungebit bound to the arguments it is run with.

    Train arguments are used while the bit is untrained. Predict arguments
    default to the train arguments when not given separately. Equality is
    identity: the same piece object is shared between a dataset's history
    and later replays so its trained state stays visible everywhere.
    """

    bit: MungeBit
    train_args: tuple[Any, ...] = ()
    train_kwargs: dict[str, Any] = field(default_factory=dict)
    predict_args: Optional[tuple[Any, ...]] = None
    predict_kwargs: Optional[dict[str, Any]] = None
    name: Optional[str] = None

    @property
    def trained(self) -> bool:
        return self.bit.trained

    def run(self, plane: "MungePlane") -> None:
        if self.bit.trained:
            args = self.train_args if self.predict_args is None else self.predict_args
            kwargs = self.train_kwargs if self.predict_kwargs is None else self.predict_kwargs
        else:
            args, kwargs = self.train_args, self.train_kwargs
        self.bit.run(plane, *args, **kwargs)

    def __repr__(self) -> str:
        label = self.name or _procedure_name(self.bit.train_function)
        return f"<MungePiece {label} args={self.train_args!r} trained={self.trained}>"


def _procedure_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__name__
