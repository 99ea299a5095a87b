from pydantic import BaseModel, ConfigDict, Field
from typing import List

class SummarizeReviewsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    manga_title: str = Field(..., alias="mangaTitle", description="The title of the manga being reviewed.")
    reviews: List[str] = Field(default_factory=list, description="An array of user reviews for a manga.")
