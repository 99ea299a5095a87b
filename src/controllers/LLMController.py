from .BaseController import BaseController
from pydantic import ValidationError
from routes.schema import ReviewSummary
from stores.LLM import GenerationFailure, SchemaValidationFailure
from typing import List
import asyncio
import re

import logging
logger = logging.getLogger(__name__)

# ```json ... ``` wrappers some models put around structured output
CODE_FENCE_PATTERN = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)

class LLMController(BaseController):
    def __init__(self, summarize_provider=None, template_parser=None):
        
        super().__init__()
        self.summarize_provider = summarize_provider
        self.template_parser = template_parser

    def build_prompts(self, manga_title: str, reviews: List[str]):
        """Return the (system_prompt, user_prompt) pair for a review summary."""
        system_prompt = self.template_parser.get("reviews", "system_prompt")

        max_characters = self.app_settings.DEFAULT_MAX_INPUT_CHARACTERS
        empty_footer = self.template_parser.get("reviews", "footer_prompt", {
            "manga_title": manga_title,
            "reviews": "",
        })
        budget = max_characters - len(empty_footer)

        # whole reviews are dropped so the instructions after them fit
        review_lines = []
        used = 0
        for review in reviews:
            line = self.template_parser.get("reviews", "review_prompt", {"review": review.strip()})
            cost = len(line) + (1 if review_lines else 0)
            if used + cost > budget:
                break
            review_lines.append(line)
            used += cost

        if len(review_lines) < len(reviews):
            logger.warning(f"Reviews for '{manga_title}' exceed {max_characters} characters, "
                           f"kept {len(review_lines)} of {len(reviews)} review(s)")

        reviews_prompt = "\n".join(review_lines)

        user_prompt = self.template_parser.get("reviews", "footer_prompt", {
            "manga_title": manga_title,
            "reviews": reviews_prompt,
        })

        return system_prompt, user_prompt

    def parse_summary(self, raw_output: str) -> ReviewSummary:
        match = CODE_FENCE_PATTERN.match(raw_output)
        if match:
            raw_output = match.group(1)

        try:
            return ReviewSummary.model_validate_json(raw_output)
        except ValidationError as e:
            logger.error(f"Model output does not match the review summary schema: {e}")
            raise SchemaValidationFailure(
                f"Model output does not match the review summary schema: {e.error_count()} error(s)"
            ) from e

    async def summarize_reviews(self, manga_title: str, reviews: List[str]) -> ReviewSummary:
        """Summarize reviews of a manga into pros and cons.

        Raises GenerationFailure when the model cannot be reached or times out,
        and SchemaValidationFailure when its output is not a valid summary.
        Nothing is retried.
        """
        if not manga_title:
            logger.warning("Summarizing reviews without a manga title")

        system_prompt, user_prompt = self.build_prompts(manga_title, reviews)
        timeout = self.app_settings.GENERATION_TIMEOUT_SECONDS

        try:
            raw_output = await asyncio.wait_for(
                self.summarize_provider.summarize_text(
                    user_prompt=user_prompt,
                    system_prompt=system_prompt,
                    response_schema=ReviewSummary.model_json_schema(),
                ),
                timeout=timeout
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Review summary for '{manga_title}' timed out after {timeout}s")
            raise GenerationFailure(f"Review summary timed out after {timeout}s", timed_out=True) from e

        summary = self.parse_summary(raw_output)
        logger.info(f"Summarized {len(reviews)} review(s) for '{manga_title}': "
                    f"{len(summary.pros)} pro(s), {len(summary.cons)} con(s)")

        return summary
