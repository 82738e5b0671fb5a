from pydantic import BaseModel
from typing import Any, Optional

# Request DTOs
class ShortenRequest(BaseModel):
    # Checked by the service so missing and malformed URLs get distinct 400 messages
    url: Optional[Any] = None
    slug: Optional[str] = None
