"""
Tests for config module and error handling utilities.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

import pytest
from funcsynth.config import (
    ErrorMode,
    DEFAULT_SAMPLE_RATE,
    set_error_mode,
    get_error_mode,
    set_sample_rate,
    get_sample_rate,
    handle_error,
)
from funcsynth.errors import (
    SynthError,
    ConfigurationError,
    ParseError,
    ResourceError,
    RenderError,
    IntegralUnavailableError,
)


class TestErrorMode:
    """Test ErrorMode enum."""

    def test_strict_mode_value(self):
        assert ErrorMode.STRICT.value == "strict"

    def test_lenient_mode_value(self):
        assert ErrorMode.LENIENT.value == "lenient"


class TestGetSetErrorMode:
    """Test get/set error mode functions."""

    def setup_method(self):
        self._original_mode = get_error_mode()

    def teardown_method(self):
        set_error_mode(self._original_mode)

    def test_default_is_strict(self):
        assert get_error_mode() == ErrorMode.STRICT

    def test_set_lenient(self):
        set_error_mode(ErrorMode.LENIENT)
        assert get_error_mode() == ErrorMode.LENIENT

    def test_set_strict(self):
        set_error_mode(ErrorMode.LENIENT)
        set_error_mode(ErrorMode.STRICT)
        assert get_error_mode() == ErrorMode.STRICT


class TestSampleRate:
    """Test the default sample rate setting."""

    def test_default(self):
        assert get_sample_rate() == DEFAULT_SAMPLE_RATE == 44100

    def test_set(self):
        set_sample_rate(8000)
        assert get_sample_rate() == 8000

    def test_rejects_non_positive(self):
        with pytest.raises(ValueError):
            set_sample_rate(0)
        with pytest.raises(ValueError):
            set_sample_rate(-44100)
        assert get_sample_rate() == 44100


class TestHandleError:
    """Test handle_error utility function."""

    def test_strict_mode_raises(self):
        with pytest.raises(RuntimeError, match="test error"):
            handle_error("test error")

    def test_lenient_mode_warns(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        result = handle_error("test warning")
        assert result is True
        assert "test warning" in caplog.text

    def test_fatal_raises_in_lenient(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(RuntimeError, match="fatal"):
            handle_error("fatal", fatal=True)

    def test_override_mode(self):
        # Global STRICT, per-call LENIENT
        assert handle_error("override", error_mode=ErrorMode.LENIENT) is True

    def test_custom_exception_class(self):
        with pytest.raises(RenderError):
            handle_error("bad block", exception_class=RenderError)

    def test_prebuilt_exception(self):
        err = ParseError("bad token", "x", 3, 1)
        with pytest.raises(ParseError) as info:
            handle_error(str(err), exception=err)
        assert info.value is err


class TestErrors:
    """Test the exception hierarchy."""

    def test_all_derive_from_synth_error(self):
        for cls in (
            ConfigurationError,
            ParseError,
            ResourceError,
            RenderError,
            IntegralUnavailableError,
        ):
            assert issubclass(cls, SynthError)

    def test_builtin_bases(self):
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(ParseError, ValueError)
        assert issubclass(ResourceError, OSError)
        assert issubclass(RenderError, RuntimeError)
        assert issubclass(IntegralUnavailableError, NotImplementedError)

    def test_parse_error_location(self):
        err = ParseError("unknown command 'x'", "x", 5, 2)
        assert err.text == "x"
        assert err.position == 5
        assert err.track == 2
        assert "track 2" in str(err)
        assert "position 5" in str(err)

    def test_parse_error_without_location(self):
        err = ParseError("plain")
        assert str(err) == "plain"
        assert err.track is None
