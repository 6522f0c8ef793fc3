"""Tests for the error hierarchy."""

import pytest

from mdricos.errors import ConversionError, ErrorCode, MissingInputError, RicosError


class TestHierarchy:

    @pytest.mark.parametrize("cls", [MissingInputError, ConversionError])
    def test_subclasses(self, cls):
        assert issubclass(cls, RicosError)
        assert issubclass(cls, Exception)

    def test_codes(self):
        assert MissingInputError().code == ErrorCode.MISSING_INPUT
        assert ConversionError().code == ErrorCode.CONVERSION_ERROR

    def test_error_code_is_str(self):
        assert ErrorCode.MISSING_INPUT == "MISSING_INPUT"


class TestAttributes:

    def test_default_messages(self):
        assert str(MissingInputError()) == "Request body must contain markdown text"
        assert str(ConversionError()) == "Conversion error"

    def test_context_defaults_to_empty_dict(self):
        assert ConversionError().context == {}

    def test_cause_chained(self):
        cause = KeyError("x")
        err = ConversionError("failed", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_repr_includes_context(self):
        err = MissingInputError("nothing", context={"content_type": "text/plain"})
        assert repr(err) == (
            "MissingInputError(code=<ErrorCode.MISSING_INPUT: 'MISSING_INPUT'>, "
            "message='nothing', context={'content_type': 'text/plain'})"
        )

    def test_repr_without_context(self):
        assert "context" not in repr(ConversionError("x"))

    def test_catch_as_base(self):
        with pytest.raises(RicosError):
            raise ConversionError("x")
