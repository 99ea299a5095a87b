import pytest

from stores.LLM.templates import TemplateParser


@pytest.fixture()
def template_parser():
    return TemplateParser(lang="en", default_lang="en")


@pytest.fixture()
def summarize_provider(mocker):
    provider = mocker.Mock()
    provider.summarize_text = mocker.AsyncMock(return_value='{"pros": ["Great art"], "cons": ["Slow pacing"]}')

    return provider
