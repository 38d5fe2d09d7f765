# reviewlens/core/config.py

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"

    SERVICE_NAME: str | None = "reviewlens"

    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "reviewlens"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432

    FRONTEND_ORIGIN: str | None = None
    BETTERSTACK_API_KEY: str | None = None  # PRODUCTION MODE ONLY
    RATE_LIMIT_DEFAULT: str = "120/minute"

    # External (LLM) analyzer; local lexicon analysis is used when absent
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    OPENAI_TIMEOUT_SECONDS: float = 8.0
    EXTERNAL_ANALYZER_ENABLED: bool = True

    MIN_REVIEW_LENGTH: int = 10

    # "builtin" AFINN-style table or NLTK's VADER lexicon
    LEXICON_SOURCE: Literal["builtin", "vader"] = "builtin"

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
    )

    @property
    def ASYNC_DATABASE_URI(self):
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
