from ..LLMInterface import LLMInterface
from ..LLMEnums import CoHereEnums
from ..LLMExceptions import GenerationFailure
import asyncio
import cohere
import httpx
import logging

class CoHereProvider(LLMInterface):

    def __init__(self, api_key: str,
                default_max_input_characters: int=1000,
                default_max_output_tokens: int=1000,
                default_temperature: float=0.1,
                timeout: float=15.0):
        
        self.api_key = api_key
        self.default_max_input_characters = default_max_input_characters
        self.default_max_output_tokens = default_max_output_tokens
        self.default_temperature = default_temperature
        self.timeout = timeout

        self.summarization_model_id = None

        self.enums = CoHereEnums

        self.client = cohere.Client(api_key=self.api_key, timeout=timeout)

        self.logger = logging.getLogger(__name__)

    async def set_summarization_model(self, summarization_model_id: str):
        self.summarization_model_id = summarization_model_id

    async def process_text(self, text: str):
        return text[:self.default_max_input_characters].strip()

    async def _chat_completion(self, user_prompt: str, system_prompt: str, model_id: str,
                               response_format: dict):
        if not self.client:
            self.logger.error("CoHere client was not set")
            raise GenerationFailure("CoHere client was not set")

        try:
            chat_history = [await self.construct_prompt(
                prompt=system_prompt,
                role=self.enums.SYSTEM.value
            )]
            response = await asyncio.to_thread(
                self.client.chat,
                model=model_id,
                chat_history=chat_history,
                message=await self.process_text(user_prompt),
                temperature=self.default_temperature,
                max_tokens=self.default_max_output_tokens,
                response_format=response_format,
            )
        except httpx.TimeoutException as e:
            self.logger.error(f"CoHere request timed out after {self.timeout}s")
            raise GenerationFailure(f"CoHere request timed out after {self.timeout}s", timed_out=True) from e
        except Exception as e:
            self.logger.error(f"Error in chat completion with CoHere: {str(e)}")
            raise GenerationFailure(f"Error in chat completion with CoHere: {str(e)}") from e

        if not response or not response.text:
            self.logger.error("Empty response while generating text with CoHere")
            raise GenerationFailure("Empty response from CoHere")

        return response.text

    async def summarize_text(self, user_prompt: str, system_prompt: str, response_schema: dict):

        if not self.summarization_model_id:
            self.logger.error("No model set for summarization with CoHere")
            raise GenerationFailure("No model set for summarization with CoHere")

        return await self._chat_completion(
            user_prompt=user_prompt,
            system_prompt=system_prompt,
            model_id=self.summarization_model_id,
            response_format={"type": "json_object", "schema": response_schema}
        )
    
    async def construct_prompt(self, prompt: str, role: str):
        return {
            "role": role,
            "message": await self.process_text(prompt)
        }
