from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ImageUrlResponse(BaseModel):
    image_url: str = Field(alias="imageUrl")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class MessageResponse(BaseModel):
    message: str

    model_config = ConfigDict(extra="forbid")
