from fastapi import APIRouter, Request
from controllers import MangaController
from .schema import *

manga_router = APIRouter(prefix="/manga", tags=["Manga"])

@manga_router.post("/review-summary", response_model=ReviewSummarySection)
async def get_review_summary_section(summary_request: SummarizeReviewsRequest, request: Request):
    """Review summary block of the manga detail page, degraded when the model fails."""

    manga_controller = MangaController(
        summarize_provider=request.app.summarization_client,
        template_parser=request.app.template_parser
    )

    return await manga_controller.build_review_summary_section(
        manga_title=summary_request.manga_title,
        reviews=summary_request.reviews
    )
