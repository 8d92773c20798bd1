from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Field names double as env names: HOTEL_DATA_PATH, HOTEL_IMAGE_URL, ...
    model_config = SettingsConfigDict(case_sensitive=False)

    app_name: str = "Hotel API"
    app_version: str = "0.1.0"
    environment: str = "local"
    log_level: str = "INFO"
    # Directory holding Hotels.json; also served under /Resources, so the
    # default image prefix points at its images/ subfolder
    hotel_data_path: str = "Resources"
    hotel_image_url: str = "Resources/images/"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()


settings = get_settings()
