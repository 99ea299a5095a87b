from fastapi import FastAPI
import uvicorn
from routes import base, manga, summary
from stores.LLM import LLMFactory
from stores.LLM.templates import TemplateParser
from helpers.config import get_settings
settings = get_settings()

import logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="BeyondScans AI API",
    description="AI review summaries for the BeyondScans manga catalog",
    version=settings.APP_VERSION
)

@app.on_event("startup")
async def startup_llm():
    try:
        # summarization client
        llm_provider_factory = LLMFactory()
        app.summarization_client = llm_provider_factory.create(provider=settings.SUMMARIZATION_BACKEND)
        await app.summarization_client.set_summarization_model(settings.SUMMARIZATION_MODEL_ID)

        # template parser
        app.template_parser = TemplateParser(lang=settings.PRIMARY_LANGUAGE,
                                            default_lang=settings.DEFAULT_LANGUAGE)

        logger.info(f"Application startup completed, summarizing with "
                    f"{settings.SUMMARIZATION_BACKEND}/{settings.SUMMARIZATION_MODEL_ID}")

    except Exception as e:
        logger.error(f"Error during startup: {e}")
        raise

# Health check endpoint
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": f"{settings.APP_NAME} API",
        "version": settings.APP_VERSION
    }

# Include routers
app.include_router(base.base_router)
app.include_router(summary.summary_router)
app.include_router(manga.manga_router)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.LOG_LEVEL.lower()
    )
