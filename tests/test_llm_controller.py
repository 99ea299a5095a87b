import asyncio
import importlib
import logging

import pytest

from controllers import LLMController
from routes.schema import ReviewSummary
from stores.LLM import GenerationFailure, SchemaValidationFailure
from stores.LLM.providers import OpenAIProvider

TEST_REVIEWS = ["Great art, slow pacing", "Amazing art, loved it", "Pacing is too slow"]


@pytest.fixture()
def llm_controller(summarize_provider, template_parser):
    return LLMController(summarize_provider=summarize_provider, template_parser=template_parser)


class TestBuildPrompts:
    def test_prompt_names_manga_and_bullets_every_review(self, llm_controller):
        system_prompt, user_prompt = llm_controller.build_prompts("Test Manga", TEST_REVIEWS)

        assert "summarizing user reviews for manga titles" in system_prompt
        assert '"Test Manga"' in user_prompt
        for review in TEST_REVIEWS:
            assert f"- {review}" in user_prompt

    def test_prompt_without_reviews(self, llm_controller):
        _, user_prompt = llm_controller.build_prompts("Test Manga", [])

        assert "Reviews:" in user_prompt
        assert "- Great art" not in user_prompt

    def test_long_review_list_keeps_instructions(self, llm_controller, caplog):
        llm_controller.app_settings.DEFAULT_MAX_INPUT_CHARACTERS = 2000
        reviews = [f"Review {i:03d}: " + "solid art and a slow but rewarding story " * 2 for i in range(100)]

        with caplog.at_level(logging.WARNING):
            _, user_prompt = llm_controller.build_prompts("Test Manga", reviews)

        assert len(user_prompt) <= 2000
        assert f"- {reviews[0].strip()}" in user_prompt
        assert "Review 099" not in user_prompt
        assert user_prompt.rstrip().endswith('A list of cons called "cons"')
        assert "of 100 review(s)" in caplog.text

    def test_no_warning_when_reviews_fit(self, llm_controller, caplog):
        with caplog.at_level(logging.WARNING):
            llm_controller.build_prompts("Test Manga", TEST_REVIEWS)

        assert "review(s)" not in caplog.text


class TestSummarizeReviews:
    @pytest.mark.asyncio
    async def test_returns_model_output_unmodified(self, llm_controller, summarize_provider):
        result = await llm_controller.summarize_reviews("Test Manga", TEST_REVIEWS)

        assert isinstance(result, ReviewSummary)
        assert result.model_dump() == {"pros": ["Great art"], "cons": ["Slow pacing"]}
        summarize_provider.summarize_text.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_sends_review_summary_schema(self, llm_controller, summarize_provider):
        await llm_controller.summarize_reviews("Test Manga", TEST_REVIEWS)

        kwargs = summarize_provider.summarize_text.call_args.kwargs
        schema = kwargs["response_schema"]
        assert set(schema["required"]) == {"pros", "cons"}
        assert schema["properties"]["pros"]["type"] == "array"
        assert schema["properties"]["cons"]["items"] == {"type": "string"}
        assert '"Test Manga"' in kwargs["user_prompt"]

    @pytest.mark.asyncio
    async def test_empty_reviews_still_call_the_model(self, llm_controller, summarize_provider):
        summarize_provider.summarize_text.return_value = '{"pros": [], "cons": []}'

        result = await llm_controller.summarize_reviews("Test Manga", [])

        assert result.pros == []
        assert result.cons == []
        summarize_provider.summarize_text.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_code_fence_around_json_is_stripped(self, llm_controller, summarize_provider):
        summarize_provider.summarize_text.return_value = '```json\n{"pros": ["Great art"], "cons": []}\n```'

        result = await llm_controller.summarize_reviews("Test Manga", TEST_REVIEWS)

        assert result.pros == ["Great art"]
        assert result.cons == []

    @pytest.mark.asyncio
    async def test_uppercase_json_fence_is_stripped(self, llm_controller, summarize_provider):
        summarize_provider.summarize_text.return_value = '```JSON\n{"pros": [], "cons": ["Slow pacing"]}\n```'

        result = await llm_controller.summarize_reviews("Test Manga", TEST_REVIEWS)

        assert result.cons == ["Slow pacing"]

    @pytest.mark.asyncio
    async def test_long_review_list_reaches_provider_with_instructions(self, mocker, template_parser):
        client_cls = mocker.patch.object(importlib.import_module("stores.LLM.providers.OpenAIProvider"), "OpenAI")
        message = mocker.Mock(content='{"pros": [], "cons": []}')
        client_cls.return_value.chat.completions.create.return_value = mocker.Mock(choices=[mocker.Mock(message=message)])

        provider = OpenAIProvider(api_key="key", default_max_input_characters=8000)
        await provider.set_summarization_model("gpt-4o-mini")
        controller = LLMController(summarize_provider=provider, template_parser=template_parser)
        controller.app_settings.DEFAULT_MAX_INPUT_CHARACTERS = 8000
        reviews = [f"Review {i:03d}: " + "x" * 90 for i in range(100)]

        await controller.summarize_reviews("Test Manga", reviews)

        messages = client_cls.return_value.chat.completions.create.call_args.kwargs["messages"]
        assert 'A list of cons called "cons"' in messages[-1]["content"]
        assert "Review 000" in messages[-1]["content"]

    @pytest.mark.asyncio
    async def test_empty_title_is_not_rejected(self, llm_controller):
        result = await llm_controller.summarize_reviews("", TEST_REVIEWS)

        assert result.pros == ["Great art"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw_output",
        [
            '{"pros": ["Great art"]}',
            '{"pros": "Great art", "cons": []}',
            '{"pros": [1, 2], "cons": []}',
            '{"pros": null, "cons": []}',
            "Pros: great art. Cons: slow pacing.",
        ],
    )
    async def test_invalid_output_is_a_schema_failure(self, llm_controller, summarize_provider, raw_output):
        summarize_provider.summarize_text.return_value = raw_output

        with pytest.raises(SchemaValidationFailure) as exc_info:
            await llm_controller.summarize_reviews("Test Manga", TEST_REVIEWS)

        assert isinstance(exc_info.value, GenerationFailure)
        assert exc_info.value.timed_out is False

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self, llm_controller, summarize_provider):
        summarize_provider.summarize_text.side_effect = GenerationFailure("connection refused")

        with pytest.raises(GenerationFailure, match="connection refused"):
            await llm_controller.summarize_reviews("Test Manga", TEST_REVIEWS)

    @pytest.mark.asyncio
    async def test_slow_model_times_out(self, llm_controller, summarize_provider):
        async def never_answers(**kwargs):
            await asyncio.sleep(5)

        summarize_provider.summarize_text.side_effect = never_answers
        llm_controller.app_settings.GENERATION_TIMEOUT_SECONDS = 0.01

        with pytest.raises(GenerationFailure) as exc_info:
            await llm_controller.summarize_reviews("Test Manga", TEST_REVIEWS)

        assert exc_info.value.timed_out is True
        assert not isinstance(exc_info.value, SchemaValidationFailure)
