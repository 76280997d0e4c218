"""
Request validation for the shorten endpoint.

Checks run before the allocator or the store is touched, and every failing
field is reported at once as a ``field -> message`` map. The rules are
declared on ``ShortenRules``; this module only turns pydantic's errors into
the messages clients see.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ValidationError

from app.schemas.URLCreateRequest import (
    MAX_ALIAS_LENGTH,
    MAX_URL_LENGTH,
    RESERVED_ALIASES,
    ShortenRules,
)

FULL_URL_FIELD = "fullUrl"
CUSTOM_ALIAS_FIELD = "customAlias"

_MESSAGES = {
    (FULL_URL_FIELD, "string_pattern_mismatch"): "URL must start with http:// or https://",
    (FULL_URL_FIELD, "string_too_long"): f"URL must be at most {MAX_URL_LENGTH} characters",
    (CUSTOM_ALIAS_FIELD, "string_pattern_mismatch"):
        "Custom alias can only contain alphanumeric characters, hyphens, and underscores",
    (CUSTOM_ALIAS_FIELD, "string_too_long"): f"Custom alias must be at most {MAX_ALIAS_LENGTH} characters",
}

__all__ = [
    "CUSTOM_ALIAS_FIELD",
    "FULL_URL_FIELD",
    "MAX_ALIAS_LENGTH",
    "MAX_URL_LENGTH",
    "RESERVED_ALIASES",
    "ValidationResult",
    "validate_custom_alias",
    "validate_full_url",
    "validate_shorten_request",
]


class ValidationResult(BaseModel):
    errors: Dict[str, str] = {}

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_shorten_request(full_url: Optional[str], custom_alias: Optional[str]) -> ValidationResult:
    try:
        ShortenRules.model_validate({FULL_URL_FIELD: full_url, CUSTOM_ALIAS_FIELD: custom_alias})
    except ValidationError as e:
        errors = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "body"
            errors.setdefault(field, _MESSAGES.get((field, err["type"]), err["msg"]))
        return ValidationResult(errors=errors)
    return ValidationResult()


def validate_full_url(full_url: Optional[str]) -> Optional[str]:
    """Return an error message for ``full_url``, or ``None`` when it is valid."""
    return validate_shorten_request(full_url, None).errors.get(FULL_URL_FIELD)


def validate_custom_alias(custom_alias: Optional[str]) -> Optional[str]:
    return validate_shorten_request(None, custom_alias).errors.get(CUSTOM_ALIAS_FIELD)
