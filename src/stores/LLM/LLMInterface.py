from abc import ABC, abstractmethod

class LLMInterface(ABC):

    @abstractmethod
    async def set_summarization_model(self, summarization_model_id: str):
        pass

    @abstractmethod
    async def process_text(self, text: str):
        pass

    @abstractmethod
    async def summarize_text(self, user_prompt: str, system_prompt: str, response_schema: dict) -> str:
        """Return the raw JSON text produced for `response_schema`."""
        pass

    @abstractmethod
    async def construct_prompt(self, prompt: str, role: str):
        pass
