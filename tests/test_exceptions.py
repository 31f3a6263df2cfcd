"""Tests for the netifstat exception hierarchy."""

from __future__ import annotations

import pytest

from netifstat.exceptions import (
    CorruptStore,
    MalformedLine,
    NegativeInterval,
    NetIfstatError,
    SourceUnavailable,
    StoreWriteFailure,
)


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    @pytest.mark.parametrize(
        "exc_cls",
        [SourceUnavailable, MalformedLine, CorruptStore, StoreWriteFailure, NegativeInterval],
    )
    def test_inherits_from_base(self, exc_cls):
        """Every error is a NetIfstatError."""
        assert issubclass(exc_cls, NetIfstatError)
        assert issubclass(exc_cls, Exception)

    def test_source_unavailable_message(self):
        """SourceUnavailable keeps its message."""
        assert str(SourceUnavailable("Failed to read /proc/net/dev")) == "Failed to read /proc/net/dev"


class TestMalformedLine:
    """Test MalformedLine context."""

    def test_message_with_location(self):
        """Path and line number are prefixed to the message."""
        exc = MalformedLine("Missing rx bytes", path="/proc/net/dev", line_number=4)
        assert exc.path == "/proc/net/dev"
        assert exc.line_number == 4
        assert str(exc) == "/proc/net/dev:4: Missing rx bytes"

    def test_message_without_location(self):
        """Without a location the message is unchanged."""
        exc = MalformedLine("Missing rx bytes")
        assert exc.path is None
        assert str(exc) == "Missing rx bytes"


class TestStoreErrors:
    """Test CorruptStore / StoreWriteFailure / NegativeInterval attributes."""

    def test_corrupt_store_path(self):
        """CorruptStore stores the path."""
        exc = CorruptStore("bad", path="/tmp/h.json")
        assert exc.path == "/tmp/h.json"
        assert str(exc) == "bad"

    def test_store_write_failure_path(self):
        """StoreWriteFailure stores the path."""
        exc = StoreWriteFailure("denied", path="/tmp/h.json")
        assert exc.path == "/tmp/h.json"

    def test_negative_interval_seconds(self):
        """NegativeInterval stores the offending interval."""
        exc = NegativeInterval("negative", seconds=-3.5)
        assert exc.seconds == -3.5
