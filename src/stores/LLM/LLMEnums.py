from enum import Enum

class LLMModel(Enum):
    OPENAI="openai"
    COHERE="cohere"
    GEMINI="gemini"

class OpenAIEnums(Enum):
    SYSTEM = "system"
    USER = "user"

class CoHereEnums(Enum):
    SYSTEM = "SYSTEM"

class GeminiEnums(Enum):
    USER = "user"
