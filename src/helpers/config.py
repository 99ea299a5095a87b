from pydantic_settings import BaseSettings

class settings(BaseSettings):

    # Application settings
    APP_NAME: str = "BeyondScans"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    # LLM settings
    SUMMARIZATION_BACKEND: str = "gemini"

    OPENAI_API_KEY: str = ""
    OPENAI_API_URL: str = ""
    COHERE_API_KEY: str = ""
    GEMINI_API_KEY: str = ""

    SUMMARIZATION_MODEL_ID: str = "gemini-2.0-flash"
    DEFAULT_MAX_INPUT_CHARACTERS: int = 8000
    DEFAULT_MAX_OUTPUT_TOKENS: int = 512
    DEFAULT_TEMPERATURE: float = 0.3
    GENERATION_TIMEOUT_SECONDS: float = 15.0

    # Template settings
    DEFAULT_LANGUAGE: str = "en"
    PRIMARY_LANGUAGE: str = "en"

    class Config:
        env_file = "src/.env"
        extra = "ignore"

def get_settings():
    return settings()
