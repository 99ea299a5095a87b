from .OpenAIProvider import OpenAIProvider
from .CoHereProvider import CoHereProvider
from .GeminiProvider import GeminiProvider
