# re-export common schemas for simpler imports
from .ShortenRequest import ShortenRequest
from .ShortenResponse import ShortenResponse
from .ErrorResponse import ErrorResponse

__all__ = [
    "ShortenRequest",
    "ShortenResponse",
    "ErrorResponse",
]
