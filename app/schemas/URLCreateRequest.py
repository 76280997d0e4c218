from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError
from typing import Optional

MAX_URL_LENGTH = 2048
MAX_ALIAS_LENGTH = 64

# GET routes that would shadow a mapping with the same alias
RESERVED_ALIASES = frozenset({"urls", "health", "docs", "redoc"})

# Request DTOs
class URLCreateRequest(BaseModel):
    # full_url is the Python field, 'fullUrl' is the JSON key.
    # Only the JSON types are checked here; the content rules live on
    # ShortenRules so every failing field is reported together as a 400.
    full_url: Optional[str] = Field(None, alias="fullUrl")
    custom_alias: Optional[str] = Field(None, alias="customAlias")

    model_config = {"populate_by_name": True}


class ShortenRules(URLCreateRequest):
    full_url: Optional[str] = Field(
        None,
        alias="fullUrl",
        max_length=MAX_URL_LENGTH,
        pattern=r"^https?://.*$",
        validate_default=True,
    )
    custom_alias: Optional[str] = Field(
        None,
        alias="customAlias",
        max_length=MAX_ALIAS_LENGTH,
        pattern=r"^[a-zA-Z0-9_-]*$",
    )

    @field_validator('full_url', mode='before')
    @classmethod
    def require_url(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise PydanticCustomError('url_required', 'Full URL is required')
        return v

    @field_validator('custom_alias')
    @classmethod
    def reject_reserved(cls, v):
        if v in RESERVED_ALIASES:
            raise PydanticCustomError(
                'alias_reserved', "Custom alias '{alias}' is reserved", {'alias': v}
            )
        return v
