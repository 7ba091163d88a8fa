"""
Uniform result envelope returned by every Stratum API call.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Status(str, Enum):
    """Envelope status."""

    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class Decoded:
    """Structured payload: the decoded ``data`` field, or an error description."""

    data: Any


@dataclass(frozen=True)
class Raw:
    """Undecoded response body."""

    body: bytes


Payload = Union[Decoded, Raw]


@dataclass(frozen=True)
class Result:
    """
    Response envelope.

    ``payload`` is ``Decoded`` when the body was parsed (or the call failed)
    and ``Raw`` when the caller asked for the body as-is.
    """

    status: Status
    message: str = ""
    code: str = ""
    payload: Payload = Decoded(None)

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @property
    def data(self) -> Any:
        """Decoded payload, or None for a raw result."""
        if isinstance(self.payload, Decoded):
            return self.payload.data
        return None

    @property
    def raw(self):
        if isinstance(self.payload, Raw):
            return self.payload.body
        return None

    @classmethod
    def failed(cls, message: str, error: Exception) -> "Result":
        return cls(Status.FAILED, message, "", Decoded(str(error)))

    @classmethod
    def from_json(cls, body: bytes) -> "Result":
        """
        Decode a JSON envelope.

        Args:
            body: Response body

        Returns:
            Decoded Result

        Raises:
            ValueError: If the body is not a JSON object with a known status
        """
        try:
            document = json.loads(body)
        except RecursionError as e:
            raise ValueError("JSON document is nested too deeply") from e
        if not isinstance(document, dict):
            raise ValueError(f"expected a JSON object, got {type(document).__name__}")

        # ValueError for anything other than "ok" or "failed"
        status = Status(document.get("status"))
        return cls(
            status=status,
            message=_as_text(document.get("message")),
            code=_as_text(document.get("code")),
            payload=Decoded(document.get("data")),
        )


def _as_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise ValueError(f"expected a string field, got {type(value).__name__}")
