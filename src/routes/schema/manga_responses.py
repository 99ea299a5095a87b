from pydantic import BaseModel
from typing import List, Optional

class ReviewSummarySection(BaseModel):
    heading: str
    available: bool
    pros: List[str] = []
    cons: List[str] = []
    pros_message: Optional[str] = None
    cons_message: Optional[str] = None
    message: Optional[str] = None
    reviews: List[str] = []
