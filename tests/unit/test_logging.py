"""Tests for stream routing of log records."""

import logging

from searchprobe.core.exceptions import (
    AmbiguousOrUnboundStepError,
    SessionStartError,
    WaitTimeoutError,
    error_kind,
)
from searchprobe.logging import StreamFormatter, StreamRoutingFilter


def make_record(level: int = logging.INFO, stream: str | None = None) -> logging.LogRecord:
    record = logging.LogRecord("test", level, __file__, 1, "hello", None, None)
    if stream is not None:
        record.stream = stream
    return record


class TestStreamRoutingFilter:
    """Tests for routing records by stream tag."""

    def test_stdout_records(self) -> None:
        """Test that stdout-tagged records only pass the stdout filter."""
        assert StreamRoutingFilter("stdout").filter(make_record(stream="stdout"))
        assert not StreamRoutingFilter("stderr").filter(make_record(stream="stdout"))

    def test_untagged_records_go_to_stderr(self) -> None:
        """Test that untagged records default to stderr."""
        assert StreamRoutingFilter("stderr").filter(make_record())
        assert not StreamRoutingFilter("stdout").filter(make_record())


class TestStreamFormatter:
    """Tests for level prefixes."""

    def test_report_lines_unchanged(self) -> None:
        """Test that stdout records are never prefixed."""
        formatter = StreamFormatter("%(message)s")

        assert formatter.format(make_record(logging.ERROR, "stdout")) == "hello"

    def test_warnings_prefixed(self) -> None:
        """Test that warnings get a prefix and info does not."""
        formatter = StreamFormatter("%(message)s")

        assert formatter.format(make_record(logging.WARNING)) == "[warning] hello"
        assert formatter.format(make_record(logging.INFO)) == "hello"


class TestErrorKind:
    """Tests for error kind mapping."""

    def test_kinds(self) -> None:
        """Test kinds for searchprobe, assertion and foreign errors."""
        assert error_kind(WaitTimeoutError("slow")) == "Timeout"
        assert error_kind(SessionStartError("no driver")) == "SessionStartFailure"
        assert error_kind(AssertionError("plain")) == "AssertionFailed"
        assert error_kind(KeyError("x")) == "KeyError"

    def test_ambiguous_message(self) -> None:
        """Test the message listing ambiguous candidates."""
        error = AmbiguousOrUnboundStepError("when", "I go", ["I go", "I {verb}"])

        assert str(error) == "Ambiguous step: when \"I go\" matches 2 bindings: 'I go', 'I {verb}'"
