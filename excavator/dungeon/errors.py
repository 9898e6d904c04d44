"""Tagged error kinds raised by the excavation pipeline.

Every failure carries a short machine-readable ``code`` plus a human message so
callers (and the HTTP layer) can report it without string matching.
"""
from __future__ import annotations

from typing import Any, Dict


class ExcavationError(Exception):
    code = "excavation_error"

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"error": self.code, "message": self.message}
        out.update(self.context)
        return out


class DecodeError(ExcavationError):
    """Token could not be decoded; permanent for that input."""

    code = "decode_error"


class InvalidPrefix(DecodeError):
    code = "InvalidPrefix"


class TooShort(DecodeError):
    code = "TooShort"


class InvalidCharacter(DecodeError):
    code = "InvalidCharacter"


class IndexOutOfBounds(DecodeError):
    code = "IndexOutOfBounds"


class ScatterCapacityExceeded(ExcavationError):
    code = "ScatterCapacityExceeded"


__all__ = [
    "ExcavationError",
    "DecodeError",
    "InvalidPrefix",
    "TooShort",
    "InvalidCharacter",
    "IndexOutOfBounds",
    "ScatterCapacityExceeded",
]
