"""Tests for OpenTelemetry tracing of template parsing."""

from unittest.mock import call
from unittest.mock import patch

import pytest

from parse_fmt_str import TrailingSlotDataError
from parse_fmt_str import parse_format_string
from parse_fmt_str.syntax.scanner import _hash_template

HASH_LENGTH = 16


class TestParseSpan:
    """Test span attributes recorded while parsing."""

    def test_success_attributes(self) -> None:
        """Test attributes for a successful parse."""
        with patch("parse_fmt_str.syntax.scanner.tracer") as mock_tracer:
            parse_format_string("Hello, {name}! {{}}")

        mock_tracer.start_as_current_span.assert_called_once_with(
            "format_string.parse"
        )
        span = mock_tracer.start_as_current_span.return_value.__enter__.return_value
        span.set_attribute.assert_any_call(
            "format_string.template_hash", _hash_template("Hello, {name}! {{}}")
        )
        span.set_attribute.assert_any_call("format_string.length", 19)
        span.set_attribute.assert_any_call("format_string.slot_count", 1)
        names = [c.args[0] for c in span.set_attribute.call_args_list]
        assert "format_string.parse_ms" in names
        assert "format_string.error" not in names

    def test_error_attributes(self) -> None:
        """Test that failures are recorded before being re-raised."""
        with patch("parse_fmt_str.syntax.scanner.tracer") as mock_tracer:
            with pytest.raises(TrailingSlotDataError):
                parse_format_string("{:x!}")

        span = mock_tracer.start_as_current_span.return_value.__enter__.return_value
        assert call("format_string.error", "TrailingSlotDataError") in (
            span.set_attribute.call_args_list
        )
        span.set_attribute.assert_any_call("format_string.error_offset", 3)

    def test_without_sdk(self) -> None:
        """Test that parsing works with the default no-op tracer."""
        assert parse_format_string("{a}").format_slots


class TestHashTemplate:
    """Test template hashing for telemetry."""

    def test_hash_length(self) -> None:
        """Test hash length and stability."""
        digest = _hash_template("Hello {name}")
        assert len(digest) == HASH_LENGTH
        assert digest == _hash_template("Hello {name}")

    def test_hash_uses_prefix(self) -> None:
        """Test that only the first 500 characters are hashed."""
        prefix = "x" * 500
        assert _hash_template(prefix + "a") == _hash_template(prefix + "b")
