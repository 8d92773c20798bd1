from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api import routes_health, routes_hotel
from app.core.config import Settings, settings as default_settings
from app.core.logging import configure_logging
from app.storage.repository import JsonHotelRepository


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version=settings.app_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Fails fast when the data path is blank
    repository = JsonHotelRepository(settings.hotel_data_path)

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_hotel.router, prefix="/api/hotel", tags=["hotel"])

    resources_dir = Path(settings.hotel_data_path)
    if resources_dir.is_dir():
        app.mount("/Resources", StaticFiles(directory=resources_dir), name="resources")

    app.state.repository = repository
    app.state.settings = settings
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
