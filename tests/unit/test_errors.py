"""Tests for munge error classes."""

from __future__ import annotations

import pytest

from mungepipe.errors import MungeError, MungeParseError, UnknownTransformationError
from mungepipe.pieces.errors import NotTrainedError


class TestMungeError:
    def test_message_preserved(self):
        error = MungeError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_piece_prefix(self):
        error = MungeError("bad column", piece="scale")
        assert error.piece == "scale"
        assert str(error) == "[scale] bad column"


class TestSubclasses:
    @pytest.mark.parametrize(
        "error_cls, builtin",
        [
            (MungeParseError, ValueError),
            (UnknownTransformationError, KeyError),
            (NotTrainedError, ValueError),
            (NotTrainedError, AttributeError),
        ],
    )
    def test_catchable_as_builtin(self, error_cls, builtin):
        with pytest.raises(builtin):
            raise error_cls("test")

    @pytest.mark.parametrize(
        "error_cls", [MungeParseError, UnknownTransformationError, NotTrainedError]
    )
    def test_inherits_from_munge_error(self, error_cls):
        assert isinstance(error_cls("test"), MungeError)

    def test_key_error_str_not_quoted(self):
        error = UnknownTransformationError("Unknown transformation: nope", piece="step")
        assert str(error) == "[step] Unknown transformation: nope"
