"""
Configuration management using Pydantic Settings.
Loads environment variables from .env file.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Course Catalog"
    page_title: str = "Australian Universities"
    app_version: str = "0.1.0"
    debug: bool = False

    # Workbook Source
    public_dir: Path = Path("public")  # Served at the site root
    workbook_filename: str = "aus-uni.xlsx"
    workbook_base_url: Optional[str] = None  # Fetch over HTTP when set, else read public_dir
    fetch_timeout_seconds: float = 10.0
    max_workbook_size_mb: int = 10

    # Column Layout (zero-based column indices)
    header_rows: int = Field(2, ge=0)  # Leading rows discarded before grouping
    column_provider_code: int = Field(1, ge=0)
    column_institution_name: int = Field(2, ge=0)
    column_course_code: int = Field(3, ge=0)
    column_course_name: int = Field(4, ge=0)

    # Header Matching (locate role columns by header text instead of position)
    match_headers: bool = False
    header_match_row: int = Field(1, ge=0)  # Row holding the column labels
    header_provider_code: str = "Provider Code"
    header_institution_name: str = "Institution Name"
    header_course_code: str = "CRICOS Course Code"
    header_course_name: str = "Course Name"

    # CORS Settings (for Frontend)
    cors_origins: str = "http://localhost:3000"

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def workbook_path(self) -> Path:
        """Local path of the workbook inside the public directory."""
        return self.public_dir / self.workbook_filename

    @property
    def workbook_url(self) -> Optional[str]:
        """Absolute URL of the workbook when fetched over HTTP."""
        if not self.workbook_base_url:
            return None
        return f"{self.workbook_base_url.rstrip('/')}/{self.workbook_filename}"


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings instance.
    Call this function to get application settings.
    """
    return Settings()


# Global settings instance
settings = get_settings()
