from pydantic import BaseModel, Field

# Response DTOs
class ShortenResponse(BaseModel):
    # short_url is the Python field, 'shortUrl' is the JSON key
    slug: str
    short_url: str = Field(..., alias="shortUrl")
    target_url: str = Field(..., alias="targetUrl")

    class Config:
        from_attributes = True
        populate_by_name = True
