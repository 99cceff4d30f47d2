from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Supabase (the NEXT_PUBLIC_ names are shared with the frontend .env)
    SUPABASE_URL: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
    )
    SUPABASE_ANON_KEY: str = Field(
        default="",
        validation_alias=AliasChoices(
            "SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY"
        ),
    )
    EVENTS_BUCKET: str = "events"

    # Content
    CONTENT_DIR: Path = Path("content")
    DEFAULT_AUTHOR: str = "GDG Team member"
    DEFAULT_IMAGE: str = "/blog-images/default.jpg"
    CODE_THEME: str = "material"
    READING_WPM: int = 200

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def has_env_vars(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)

    @property
    def storage_public_url(self) -> str:
        return f"{self.SUPABASE_URL.rstrip('/')}/storage/v1/object/public"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
