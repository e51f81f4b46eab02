from pydantic_settings import SettingsConfigDict, BaseSettings
from typing import List


GOOGLEBOT_USER_AGENT = (
    "Mozilla/5.0 AppleWebKit/537.36 (KHTML, like Gecko; compatible; Googlebot/2.1; "
    "+http://www.google.com/bot.html) Chrome/W.X.Y.Z Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    server_reload: bool = False

    # CORS settings
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:4000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["GET", "POST", "PUT", "OPTIONS"]
    cors_allow_headers: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    # Fetching settings
    fetch_timeout: float = 10
    fetch_user_agent: str = GOOGLEBOT_USER_AGENT
    fetch_follow_redirects: bool = True
    fetch_block_private_hosts: bool = True

    # Storage; an empty URL keeps rows in memory only
    database_url: str = "sqlite:///./wishlist.db"

    # Environment
    environment: str = "development"  # development, staging, production

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file if it exists
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields in env file
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Create a single instance of settings
settings = Settings()
