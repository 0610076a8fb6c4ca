from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # SQLite file, created on first start
    DATABASE_URL: str = "sqlite+aiosqlite:///./database.sqlite"

    # CORS, comma separated
    ALLOWED_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    @property
    def allowed_origins(self) -> List[str]:
        origins = [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]


settings = Settings()
