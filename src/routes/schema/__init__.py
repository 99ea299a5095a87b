from .summary_requests import SummarizeReviewsRequest
from .summary_responses import ReviewSummary, ReviewSummaryResponse
from .manga_responses import ReviewSummarySection

__all__ = [
    "SummarizeReviewsRequest",
    "ReviewSummary", "ReviewSummaryResponse",
    "ReviewSummarySection"
]
