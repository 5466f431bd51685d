# directory_api/config/settings.py
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # any SQLAlchemy URL: postgresql+psycopg2://..., sqlite:///...
    database_url: str | None = None

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    sql_echo: bool = False
    auto_create_schema: bool = True

    api_prefix: str = ""
    cors_origins: str = "*"

    default_page_size: int = 10
    max_page_size: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def strip_url(cls, v):
        if isinstance(v, str):
            v = v.strip().strip('"').strip("'")
            return v or None
        return v

    @field_validator("api_prefix", mode="before")
    @classmethod
    def normalize_prefix(cls, v):
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @property
    def cors_origin_list(self) -> list[str] | str:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        if not origins or origins == ["*"]:
            return "*"
        return origins


settings = Settings()
