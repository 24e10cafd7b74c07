from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    app_name: str = "Job Board API"
    site_name: str = "Remote Jobs"
    log_level: str = "INFO"

    # Database configuration
    database_url: str = "sqlite:///./data/jobs.db"
    database_echo: bool = False
    create_tables: bool = True

    cors_origins: List[str] = ["http://localhost:3000"]

    # Page sizes
    jobs_per_page: int = 10
    companies_per_page: int = 12
    featured_jobs_limit: int = 4
    related_jobs_limit: int = 3
    company_jobs_limit: int = 50

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def async_database_url(self) -> str:
        # Convert sqlite:/// to sqlite+aiosqlite:///
        if self.database_url.startswith("sqlite:///"):
            return self.database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
        return self.database_url


@lru_cache
def get_settings() -> Settings:
    return Settings()
