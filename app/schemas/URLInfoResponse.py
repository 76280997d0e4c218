from pydantic import BaseModel, Field

# Response DTOs
class URLInfoResponse(BaseModel):
    alias: str
    full_url: str = Field(..., alias="fullUrl")
    short_url: str = Field(..., alias="shortUrl")

    model_config = {"from_attributes": True, "populate_by_name": True}
