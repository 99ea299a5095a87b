from fastapi import APIRouter, Depends
from helpers.config import get_settings, settings

base_router = APIRouter()

@base_router.get("/")
async def welcome(app_settings : settings = Depends(get_settings)):

    return {
        "message": f"Welcome to {app_settings.APP_NAME} {app_settings.APP_VERSION}",
        "summarization_backend": app_settings.SUMMARIZATION_BACKEND,
    }
