"""Tests for MungeBit train/predict state tracking and MungePiece argument binding."""

import pandas as pd
import pytest

from mungepipe.pieces.base import MungeBit, MungePiece, accepts_keyword
from mungepipe.pieces.errors import FittedStatistics, FittedVocabulary, NotTrainedError
from mungepipe.pipelines.plane import mungeplane


class CallRecorder:
    """Procedure that records every call it receives."""

    def __init__(self, label):
        self.label = label
        self.calls = []

    def __call__(self, plane, *args, **kwargs):
        self.calls.append((args, kwargs))
        plane.data[self.label] = len(self.calls)


@pytest.fixture
def plane():
    return mungeplane(pd.DataFrame({"col1": [1, 2, 3]}))


class TestTrainPredictSwitch:
    """Tests for the untrained -> trained transition."""

    def test_untrained_initially(self):
        bit = MungeBit(lambda plane: None)
        assert bit.trained is False

    def test_first_run_trains(self, plane):
        train, predict = CallRecorder("train"), CallRecorder("predict")
        bit = MungeBit(train, predict)

        bit.run(plane)

        assert bit.trained is True
        assert len(train.calls) == 1
        assert predict.calls == []

    def test_later_runs_predict(self, plane):
        train, predict = CallRecorder("train"), CallRecorder("predict")
        bit = MungeBit(train, predict)

        bit.run(plane)
        bit.run(plane)
        bit.run(plane)

        assert len(train.calls) == 1
        assert len(predict.calls) == 2

    def test_single_procedure_serves_both(self, plane):
        proc = CallRecorder("both")
        bit = MungeBit(proc)

        bit.run(plane)
        bit.run(plane)

        assert bit.predict_function is bit.train_function
        assert len(proc.calls) == 2

    def test_failed_train_leaves_bit_untrained(self, plane):
        def boom(plane):
            raise RuntimeError("train failed")

        bit = MungeBit(boom)

        with pytest.raises(RuntimeError, match="train failed"):
            bit.run(plane)
        assert bit.trained is False

    def test_none_predict_is_noop(self, plane):
        train = CallRecorder("train")
        bit = MungeBit(train, None)

        bit.run(plane)
        plane.data["train"] = 0
        bit.run(plane)

        assert plane.data["train"].tolist() == [0, 0, 0]

    def test_predict_before_train_raises(self, plane):
        bit = MungeBit(CallRecorder("train"), CallRecorder("predict"))

        with pytest.raises(NotTrainedError) as exc_info:
            bit.predict(plane)

        assert "has not been trained yet" in str(exc_info.value)

    def test_non_callable_train_rejected(self):
        with pytest.raises(TypeError):
            MungeBit("not a function")

    def test_non_callable_predict_rejected(self):
        with pytest.raises(TypeError):
            MungeBit(lambda plane: None, 42)


class TestInputsInjection:
    """Procedures declaring inputs/trained receive the bit's state."""

    def test_inputs_shared_between_train_and_predict(self, plane):
        def train(plane, inputs):
            inputs["mean"] = plane.data["col1"].mean()

        def predict(plane, inputs):
            plane.data["centered"] = plane.data["col1"] - inputs["mean"]

        bit = MungeBit(train, predict)
        bit.run(plane)
        bit.run(mungeplane(pd.DataFrame({"col1": [10, 20]})))

        assert bit.inputs == {"mean": 2.0}

    def test_trained_flag_passed(self, plane):
        seen = []

        def proc(plane, trained):
            seen.append(trained)

        bit = MungeBit(proc)
        bit.run(plane)
        bit.run(plane)

        assert seen == [False, True]

    def test_procedures_without_state_params_get_no_extras(self, plane):
        proc = CallRecorder("x")
        bit = MungeBit(proc)

        bit.run(plane, "a", flag=True)

        assert proc.calls == [(("a",), {"flag": True})]

    def test_accepts_keyword(self):
        def with_inputs(plane, inputs):
            pass

        def kw_only(plane, *, trained):
            pass

        def var_kwargs(plane, **kwargs):
            pass

        assert accepts_keyword(with_inputs, "inputs")
        assert accepts_keyword(kw_only, "trained")
        assert not accepts_keyword(var_kwargs, "inputs")


class TestMungePiece:
    """Tests for argument binding on MungePiece."""

    def test_train_args_forwarded(self, plane):
        proc = CallRecorder("x")
        piece = MungePiece(MungeBit(proc), train_args=("a",), train_kwargs={"k": 1})

        piece.run(plane)

        assert proc.calls == [(("a",), {"k": 1})]

    def test_predict_args_default_to_train_args(self, plane):
        proc = CallRecorder("x")
        piece = MungePiece(MungeBit(proc), train_args=("a",))

        piece.run(plane)
        piece.run(plane)

        assert proc.calls == [(("a",), {}), (("a",), {})]

    def test_separate_predict_args(self, plane):
        proc = CallRecorder("x")
        piece = MungePiece(
            MungeBit(proc),
            train_args=("a",),
            predict_args=("b",),
            predict_kwargs={"k": 2},
        )

        piece.run(plane)
        piece.run(plane)

        assert proc.calls == [(("a",), {}), (("b",), {"k": 2})]

    def test_equality_is_identity(self):
        bit = MungeBit(lambda plane: None)
        first = MungePiece(bit, train_args=("a",))
        second = MungePiece(bit, train_args=("a",))

        assert first == first
        assert first != second

    def test_trained_mirrors_bit(self, plane):
        piece = MungePiece(MungeBit(CallRecorder("x")))
        assert piece.trained is False
        piece.run(plane)
        assert piece.trained is True


class TestFittedState:
    """Tests for the frozen learned-state dataclasses."""

    def test_vocabulary_from_values_sorted(self):
        vocab = FittedVocabulary.from_values(["b", "a", "b"])
        assert vocab.categories == ("a", "b")
        assert vocab.encode(["a", "b", "z"]) == [0, 1, -1]

    def test_vocabulary_custom_unknown_idx(self):
        vocab = FittedVocabulary.from_values(["a"], unknown_idx=99)
        assert vocab.encode(["a", "q"]) == [0, 99]

    def test_statistics_from_series(self):
        stats = FittedStatistics.from_series(pd.Series([1.0, 2.0, 3.0, None]))
        assert stats.mean == 2.0
        assert stats.min_val == 1.0
        assert stats.max_val == 3.0
        assert stats.std == pytest.approx((2 / 3) ** 0.5)


class TestNotTrainedError:
    def test_is_value_error(self):
        with pytest.raises(ValueError):
            raise NotTrainedError("test message")

    def test_is_attribute_error(self):
        with pytest.raises(AttributeError):
            raise NotTrainedError("test message")
