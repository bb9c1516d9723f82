"""Configuration settings for the article intelligence service."""

import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Article fetching
    fetch_timeout: float = 15.0
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    excerpt_length: int = 200

    # Scanning (0 = scan the full article)
    max_content_chars: int = 0

    # Response metadata
    parser_version: str = "1.0"
    public_base_url: str = os.getenv("PUBLIC_BASE_URL", "https://your-app.vercel.app")

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 8000))
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


# Global settings instance
settings = Settings()
