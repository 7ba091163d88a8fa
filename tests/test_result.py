"""
Unit tests for the result envelope.
"""

import pytest

from stratum_client import Decoded, Raw, Result, Status


class TestResult:
    """Test envelope accessors and decoding."""

    def test_status_values(self):
        """Test status wire values."""
        assert Status.OK.value == "ok"
        assert Status.FAILED.value == "failed"
        assert Status("ok") is Status.OK

    def test_decoded_payload(self):
        """Test accessors on a decoded result."""
        result = Result(Status.OK, "done", "0", Decoded({"k": 1}))

        assert result.ok is True
        assert result.data == {"k": 1}
        assert result.raw is None

    def test_raw_payload(self):
        """Test accessors on a raw result."""
        result = Result(Status.OK, "Request ok", "", Raw(b"\x00\x01"))

        assert result.raw == b"\x00\x01"
        assert result.data is None

    def test_failed(self):
        """Test building a failed result from an error."""
        result = Result.failed("Call failed", ConnectionError("refused"))

        assert result.ok is False
        assert result.status is Status.FAILED
        assert result.message == "Call failed"
        assert result.data == "refused"

    def test_from_json(self):
        """Test decoding a complete envelope."""
        body = b'{"status":"ok","message":"done","code":"0","data":{"k":1}}'
        result = Result.from_json(body)

        assert result == Result(Status.OK, "done", "0", Decoded({"k": 1}))

    def test_from_json_failed_status(self):
        """Test decoding an envelope reporting failure."""
        result = Result.from_json(b'{"status":"failed","message":"no funds","code":"42"}')

        assert result.status is Status.FAILED
        assert result.code == "42"
        assert result.data is None

    def test_from_json_missing_optional_fields(self):
        """Test defaults for missing message, code and data."""
        result = Result.from_json(b'{"status":"ok"}')

        assert result.message == ""
        assert result.code == ""
        assert result.data is None

    @pytest.mark.parametrize("body", [
        b"not json",
        b"[1, 2, 3]",
        b'{"message": "no status"}',
        b'{"status": "maybe"}',
        b'{"status": "ok", "code": 0}',
        b"\xff\xfe",
    ])
    def test_from_json_invalid(self, body):
        """Test that malformed envelopes raise ValueError."""
        with pytest.raises(ValueError):
            Result.from_json(body)

    def test_from_json_deeply_nested(self):
        """Test that nesting beyond the recursion limit raises ValueError."""
        with pytest.raises(ValueError):
            Result.from_json(b"[" * 100000 + b"]" * 100000)
