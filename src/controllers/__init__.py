from .BaseController import BaseController
from .LLMController import LLMController
from .MangaController import MangaController
