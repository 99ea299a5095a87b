from openai import OpenAI, APITimeoutError
from ..LLMInterface import LLMInterface
from ..LLMEnums import OpenAIEnums
from ..LLMExceptions import GenerationFailure
import asyncio
import copy
import logging


class OpenAIProvider(LLMInterface):
    def __init__(self,
                api_key: str,
                api_url: str = None,
                default_max_input_characters: int=1000,
                default_max_output_tokens: int = 1000, 
                default_temperature: float = 0.5,
                timeout: float = 15.0):
        
        self.api_key = api_key
        self.api_url = api_url
        self.default_max_output_tokens = default_max_output_tokens
        self.default_max_input_characters = default_max_input_characters
        self.default_temperature = default_temperature
        self.timeout = timeout

        self.summarization_model_id = None

        self.enums = OpenAIEnums

        # single attempt, retries are left to the caller
        self.client = OpenAI(api_key=api_key, base_url=api_url or None,
                             timeout=timeout, max_retries=0)

        self.logger = logging.getLogger(__name__)

    async def set_summarization_model(self, model_id: str):
        self.summarization_model_id = model_id

    async def process_text(self, text: str):
        return text[:self.default_max_input_characters].strip()

    def _strict_schema(self, schema: dict) -> dict:
        strict = copy.deepcopy(schema)
        strict["additionalProperties"] = False
        return strict

    async def _chat_completion(self, messages: list, model_id: str, response_format: dict):
        """Run one chat completion and return the message content."""
        if self.client is None:
            self.logger.error("OpenAI client is not initialized.")
            raise GenerationFailure("OpenAI client is not initialized.")

        try:
            response = await asyncio.to_thread(
                self.client.chat.completions.create,
                model=model_id,
                messages=messages,
                temperature=self.default_temperature,
                max_completion_tokens=self.default_max_output_tokens,
                response_format=response_format
            )
        except APITimeoutError as e:
            self.logger.error(f"OpenAI request timed out after {self.timeout}s")
            raise GenerationFailure(f"OpenAI request timed out after {self.timeout}s", timed_out=True) from e
        except Exception as e:
            self.logger.error(f"Error in chat completion with OpenAI: {str(e)}")
            raise GenerationFailure(f"Error in chat completion with OpenAI: {str(e)}") from e

        if not response or not response.choices or not response.choices[0].message \
                or not response.choices[0].message.content:
            self.logger.error("Empty response while generating text with OpenAI")
            raise GenerationFailure("Empty response from OpenAI")

        return response.choices[0].message.content

    async def summarize_text(self, user_prompt: str, system_prompt: str, response_schema: dict):

        if self.summarization_model_id is None:
            self.logger.error("Summary model ID is not set.")
            raise GenerationFailure("Summary model ID is not set.")

        messages = [
            await self.construct_prompt(system_prompt, self.enums.SYSTEM.value),
            await self.construct_prompt(user_prompt, self.enums.USER.value),
        ]

        return await self._chat_completion(
            messages=messages,
            model_id=self.summarization_model_id,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": response_schema.get("title", "response"),
                    "strict": True,
                    "schema": self._strict_schema(response_schema),
                },
            }
        )

    async def construct_prompt(self, prompt: str, role: str):
        return {
            "role": role,
            "content": await self.process_text(prompt)
        }
