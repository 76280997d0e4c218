# re-export common schemas for simpler imports
from .URLCreateRequest import URLCreateRequest
from .URLInfoResponse import URLInfoResponse
from .ShortenResponse import ShortenResponse

__all__ = [
    "URLCreateRequest",
    "URLInfoResponse",
    "ShortenResponse",
]
