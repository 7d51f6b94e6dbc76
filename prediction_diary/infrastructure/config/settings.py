from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_BACKENDS = ("memory", "database")


class Settings(BaseSettings):
    # App
    app_name: str = "Prediction Diary"
    app_version: str = "1.0.0"
    debug: bool = False

    # Storage
    storage_backend: str = "memory"  # Options: "memory", "database"
    database_url: str = ""  # Required for the database backend
    database_echo: bool = False

    # Posts
    deadline_weekday: int = Field(default=6, ge=0, le=6)  # Monday=0 ... Sunday=6
    image_unuploaded_url: str = (
        "https://firebasestorage.googleapis.com/v0/b/yogen-nikki.appspot.com/o/"
        "glitch-white-animation.gif?alt=media&token=5de1cffa-75b6-43d4-aa3e-b6c5c5762dcd"
    )
    image_failed_url: str = (
        "https://firebasestorage.googleapis.com/v0/b/yogen-nikki.appspot.com/o/"
        "glitch-red-animation.gif?alt=media&token=204a3011-869b-4a91-9365-ce83d59e765e"
    )

    @model_validator(mode="after")
    def validate_storage_config(self) -> "Settings":
        """Validate storage backend and required configuration"""
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Invalid storage_backend '{self.storage_backend}'. "
                f"Must be one of: 'memory', 'database'"
            )
        if self.storage_backend == "database" and not self.database_url:
            raise ValueError(
                "database_url is required when storage_backend is 'database'. "
                "Set DATABASE_URL environment variable or update .env file."
            )
        return self

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow", case_sensitive=False
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
