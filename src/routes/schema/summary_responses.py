from pydantic import BaseModel, Field
from typing import List, Optional

class ReviewSummary(BaseModel):
    pros: List[str] = Field(..., description="A list of summarized pros from the reviews.")
    cons: List[str] = Field(..., description="A list of summarized cons from the reviews.")

class ReviewSummaryResponse(BaseModel):
    success: bool
    message: str
    summary: Optional[ReviewSummary] = None
