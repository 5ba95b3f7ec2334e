"""Tests for structured errors and logging helpers."""

import pytest
from otgen.errors import (
    ErrorCode,
    InvalidFeatureValue,
    InvalidLength,
    MorphologyError,
    OTGenError,
    ValidationError,
)
from otgen.observ import clear_context, get_logger, set_system, system_var, timed, timer


class TestErrors:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(InvalidLength, ValidationError)
        assert issubclass(ValidationError, OTGenError)
        assert issubclass(MorphologyError, OTGenError)

    def test_to_detail(self):
        detail = InvalidLength(-2).to_detail()
        assert detail.code == ErrorCode.INVALID_LENGTH
        assert detail.field == "length"
        assert detail.context == {"length": -2}
        assert "-2" in detail.message

    def test_feature_value_context(self):
        error = InvalidFeatureValue("stress", "secondary")
        assert error.context == {"feature_type": "stress", "value": "secondary"}
        assert str(error) == error.message

    def test_morphology_reason(self):
        error = MorphologyError("cannot add a second root", morpheme="r2")
        assert error.code == ErrorCode.INVALID_MORPH_WORD
        assert error.context["morpheme"] == "r2"


class TestObservability:
    """Test context and timing helpers."""

    def teardown_method(self):
        clear_context()

    def test_system_context(self):
        set_system("sl")
        assert system_var.get() == "sl"
        clear_context()
        assert system_var.get() is None

    def test_timer_propagates_errors(self):
        logger = get_logger(__name__)
        with pytest.raises(RuntimeError):
            with timer(logger, "failing_step"):
                raise RuntimeError("boom")

    def test_timed_returns_result(self):
        @timed(get_logger(__name__))
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"

    def test_timed_rejects_coroutines(self):
        async def job():
            return None

        with pytest.raises(TypeError):
            timed()(job)
