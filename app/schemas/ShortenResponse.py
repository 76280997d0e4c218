from pydantic import BaseModel, Field

class ShortenResponse(BaseModel):
    short_url: str = Field(..., alias="shortUrl")

    model_config = {"populate_by_name": True}
