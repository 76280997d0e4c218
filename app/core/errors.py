from enum import Enum
from typing import Dict, Optional


class ErrorKind(str, Enum):
    ALIAS_ALREADY_EXISTS = "alias_already_exists"
    ALIAS_NOT_FOUND = "alias_not_found"
    VALIDATION_FAILURE = "validation_failure"
    ALIAS_GENERATION_EXHAUSTED = "alias_generation_exhausted"
    UNEXPECTED = "unexpected"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.ALIAS_ALREADY_EXISTS: 400,
    ErrorKind.ALIAS_NOT_FOUND: 404,
    ErrorKind.VALIDATION_FAILURE: 400,
    ErrorKind.ALIAS_GENERATION_EXHAUSTED: 500,
    ErrorKind.UNEXPECTED: 500,
}

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ShortenerError(Exception):
    """Business error carrying the kind the HTTP layer maps to a status code.

    Validation failures carry a per-field message map in ``fields``; every
    other kind reports a single message.
    """

    def __init__(self, kind: ErrorKind, message: str = "", fields: Optional[Dict[str, str]] = None):
        self.kind = kind
        self.message = message
        self.fields = fields or {}
        super().__init__(message or kind.value)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_body(self) -> Dict[str, str]:
        if self.kind is ErrorKind.VALIDATION_FAILURE and self.fields:
            return dict(self.fields)
        return {"error": self.message or UNEXPECTED_ERROR_MESSAGE}

    @classmethod
    def alias_already_exists(cls, alias: str) -> "ShortenerError":
        return cls(ErrorKind.ALIAS_ALREADY_EXISTS, f"Alias '{alias}' is already in use")

    @classmethod
    def alias_not_found(cls, alias: str) -> "ShortenerError":
        return cls(ErrorKind.ALIAS_NOT_FOUND, f"Alias '{alias}' not found")

    @classmethod
    def validation_failure(cls, fields: Dict[str, str]) -> "ShortenerError":
        return cls(ErrorKind.VALIDATION_FAILURE, "Validation failed", fields=fields)

    @classmethod
    def generation_exhausted(cls, attempts: int) -> "ShortenerError":
        return cls(
            ErrorKind.ALIAS_GENERATION_EXHAUSTED,
            f"Failed to generate unique alias after {attempts} attempts",
        )
