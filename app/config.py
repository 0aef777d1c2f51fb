"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="RecipeShare", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Database settings
    database_url: str = Field(
        default="postgresql+psycopg2://postgres@localhost:5432/recipeshare",
        description="SQLAlchemy connection URL of the relational backend",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="RecipeShare API", description="API documentation title"
    )
    api_description: str = Field(
        default="Recipe sharing: recipes, categories, votes and public profiles",
        description="API documentation description",
    )

    # Uploads
    upload_dir: str = Field(
        default="public/profile-images",
        description="Directory uploaded images are written to",
    )
    upload_url_prefix: str = Field(
        default="/profile-images", description="Public URL prefix of uploaded images"
    )

    # Query tuning
    owner_page_size: int = Field(
        default=6, ge=1, description="Page size of an owner's recipe listing"
    )
    carousel_size: int = Field(
        default=4, ge=1, description="Recipes shown per home-page carousel"
    )
    carousel_candidate_limit: int = Field(
        default=8, ge=1, description="Recent recipes scanned for home carousels"
    )
    category_candidate_limit: int = Field(
        default=500, ge=1, description="Recent recipes scanned for category pages"
    )
    latest_limit: int = Field(
        default=50, ge=1, description="Default size of the latest-recipes listing"
    )
    search_candidate_limit: int = Field(
        default=50, ge=1, description="Recent recipes scanned by free-text search"
    )
    suggestion_limit: int = Field(
        default=8, ge=1, description="Maximum tag autocomplete suggestions"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
