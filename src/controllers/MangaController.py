from .BaseController import BaseController
from .LLMController import LLMController
from routes.schema import ReviewSummarySection
from stores.LLM import GenerationFailure
from typing import List

import logging
logger = logging.getLogger(__name__)

NO_REVIEWS_PLACEHOLDER = "No user reviews available for this manga yet."
SUMMARY_UNAVAILABLE_MESSAGE = "Could not generate review summary at this time."
NO_PROS_MESSAGE = "No specific pros highlighted in reviews."
NO_CONS_MESSAGE = "No specific cons highlighted in reviews."

class MangaController(BaseController):
    def __init__(self, summarize_provider=None, template_parser=None):

        super().__init__()
        self.llm_controller = LLMController(
            summarize_provider=summarize_provider,
            template_parser=template_parser
        )

    async def build_review_summary_section(self, manga_title: str, reviews: List[str]) -> ReviewSummarySection:
        """Build the AI summary block of a manga detail page.

        A failed summary never fails the page: the section falls back to a
        static message and the original reviews stay visible.
        """
        heading = f"AI Review Summary for {manga_title}"
        reviews_to_summarize = reviews if reviews else [NO_REVIEWS_PLACEHOLDER]

        try:
            summary = await self.llm_controller.summarize_reviews(
                manga_title=manga_title,
                reviews=reviews_to_summarize
            )
        except GenerationFailure as e:
            logger.error(f"Failed to summarize reviews for '{manga_title}': {e}")
            return ReviewSummarySection(
                heading=heading,
                available=False,
                message=SUMMARY_UNAVAILABLE_MESSAGE,
                reviews=reviews
            )

        return ReviewSummarySection(
            heading=heading,
            available=True,
            pros=summary.pros,
            cons=summary.cons,
            pros_message=None if summary.pros else NO_PROS_MESSAGE,
            cons_message=None if summary.cons else NO_CONS_MESSAGE,
            reviews=reviews
        )
