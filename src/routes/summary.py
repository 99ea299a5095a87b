from fastapi import APIRouter, HTTPException, Request, status
from controllers import LLMController
from stores.LLM import GenerationFailure, SchemaValidationFailure
from .schema import *

import logging
logger = logging.getLogger(__name__)

summary_router = APIRouter(prefix="/summary", tags=["Summary"])

@summary_router.post("/reviews", response_model=ReviewSummaryResponse)
async def summarize_reviews(summary_request: SummarizeReviewsRequest, request: Request):
    """Summarize manga reviews into pros and cons."""

    llm_controller = LLMController(
        summarize_provider=request.app.summarization_client,
        template_parser=request.app.template_parser
    )

    try:
        summary = await llm_controller.summarize_reviews(
            manga_title=summary_request.manga_title,
            reviews=summary_request.reviews
        )
    except SchemaValidationFailure as e:
        logger.error(f"Invalid review summary for '{summary_request.manga_title}': {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY,
                            detail=f"Invalid review summary: {str(e)}")
    except GenerationFailure as e:
        logger.error(f"Error summarizing reviews for '{summary_request.manga_title}': {e}")
        status_code = status.HTTP_504_GATEWAY_TIMEOUT if e.timed_out else status.HTTP_502_BAD_GATEWAY
        raise HTTPException(status_code=status_code,
                            detail=f"Error summarizing reviews: {str(e)}")

    return ReviewSummaryResponse(
        success=True,
        message="Reviews summarized successfully",
        summary=summary
    )
