"""Configuration management for the Discogs tool gateway."""
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Service identity
    app_name: str = Field(default="discogs-mcp")
    service_description: str = Field(
        default=(
            "Discogs Music Database API - music knowledge about artists, albums, "
            "labels, releases, marketplace, collection and wantlist."
        )
    )
    log_level: str = Field(default="INFO")

    # Server Configuration
    server_host: str = Field(default="0.0.0.0")
    server_port: int = Field(default=3002)

    # Discogs Configuration
    discogs_api_url: str = Field(default="https://api.discogs.com")
    discogs_personal_access_token: str = Field(default="")
    discogs_user_agent: str = Field(default="DiscogsToolGateway/1.0")
    discogs_request_timeout: float = Field(default=15.0)

    # CORS Configuration
    cors_origins: str = Field(default="*")

    @computed_field
    @property
    def allowed_origins(self) -> list[str]:
        """Parse allowed origins from the comma separated setting."""
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return origins or ["*"]

    model_config = SettingsConfigDict(
        env_file=None,
        case_sensitive=False,
        extra="ignore"
    )


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
