from .LLMEnums import LLMModel, OpenAIEnums, CoHereEnums, GeminiEnums
from .LLMExceptions import GenerationFailure, SchemaValidationFailure
from .LLMFactory import LLMFactory
