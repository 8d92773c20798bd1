from fastapi import HTTPException
from starlette.requests import Request

from app.core.config import Settings
from app.storage.repository import JsonHotelRepository


def get_repository(request: Request) -> JsonHotelRepository:
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise HTTPException(status_code=500, detail="Repository not initialized")
    return repository


def get_app_settings(request: Request) -> Settings:
    app_settings = getattr(request.app.state, "settings", None)
    if app_settings is None:
        raise HTTPException(status_code=500, detail="Settings not initialized")
    return app_settings
