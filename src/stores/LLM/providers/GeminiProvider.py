from ..LLMInterface import LLMInterface
from ..LLMEnums import GeminiEnums
from ..LLMExceptions import GenerationFailure
from google.api_core import exceptions as google_exceptions
import google.generativeai as genai
import asyncio
import logging


class GeminiProvider(LLMInterface):
    def __init__(self, api_key: str,
                 default_max_input_characters: int=1000,
                 default_max_output_tokens: int=1000,
                 default_temperature: float=0.7,
                 timeout: float=15.0):
        
        self.api_key = api_key
        self.default_max_input_characters = default_max_input_characters
        self.default_max_output_tokens = default_max_output_tokens
        self.default_temperature = default_temperature
        self.timeout = timeout
        
        self.summarization_model_id = None

        self.enums = GeminiEnums
        
        genai.configure(api_key=self.api_key)
        
        self.logger = logging.getLogger(__name__)
    
    async def set_summarization_model(self, model_id: str):
        self.summarization_model_id = model_id
    
    async def process_text(self, text: str):
        return text[:self.default_max_input_characters].strip()

    def _to_gemini_schema(self, schema: dict) -> dict:
        """Reduce a JSON schema to the subset accepted by `response_schema`."""
        converted = {"type": schema["type"].upper()}
        if "description" in schema:
            converted["description"] = schema["description"]
        if "items" in schema:
            converted["items"] = self._to_gemini_schema(schema["items"])
        if "properties" in schema:
            converted["properties"] = {
                name: self._to_gemini_schema(prop)
                for name, prop in schema["properties"].items()
            }
        if "required" in schema:
            converted["required"] = list(schema["required"])
        return converted

    async def summarize_text(self, user_prompt: str, system_prompt: str, response_schema: dict):

        if not self.summarization_model_id:
            self.logger.error("No model set for summarization with Gemini")
            raise GenerationFailure("No model set for summarization with Gemini")

        model = genai.GenerativeModel(
            model_name=self.summarization_model_id,
            system_instruction=await self.process_text(system_prompt) or None
        )

        try:
            result = await asyncio.to_thread(
                model.generate_content,
                [await self.construct_prompt(user_prompt, self.enums.USER.value)],
                generation_config={
                    'temperature': self.default_temperature,
                    'max_output_tokens': self.default_max_output_tokens,
                    'response_mime_type': 'application/json',
                    'response_schema': self._to_gemini_schema(response_schema),
                },
                request_options={'timeout': self.timeout}
            )
            # .text raises ValueError when the candidate was blocked
            text = result.text if result else None
        except google_exceptions.DeadlineExceeded as e:
            self.logger.error(f"Gemini request timed out after {self.timeout}s")
            raise GenerationFailure(f"Gemini request timed out after {self.timeout}s", timed_out=True) from e
        except Exception as e:
            self.logger.error(f"Error summarizing text with Gemini: {str(e)}")
            raise GenerationFailure(f"Error summarizing text with Gemini: {str(e)}") from e

        if not text:
            self.logger.error("Empty response while summarizing text with Gemini")
            raise GenerationFailure("Empty response from Gemini")

        return text

    async def construct_prompt(self, prompt: str, role: str):
        return {
            "role": role,
            "parts": [await self.process_text(prompt)]
        }
