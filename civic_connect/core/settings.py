"""
Core settings and environment variables for Mumbai Civic Connect.
Uses pydantic-settings for type-safe environment variable loading.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Create a .env file in the root directory to configure these.
    """

    # Application
    APP_NAME: str = "Mumbai Civic Connect"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS - Frontend URLs allowed to access this API
    # In production set this to your exact origin(s).
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"

    # Public site used by the chat assistant when it hands out page links
    SITE_BASE_URL: str = "https://mumbai-civic-connect.vercel.app"

    # AI Configuration
    AI_ENABLED: bool = True  # If False, AI helpers always return their safe defaults
    AI_PROVIDER: str = "openai"  # Preferred provider: "openai" or "gemini"
    OPENAI_API_KEY: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"
    GEMINI_MODEL: str = "gemini-pro"
    AI_TEMPERATURE: float = 0.3
    AI_TIMEOUT_SECONDS: float = 10.0

    @property
    def cors_origins_list(self) -> list:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"  # Allow extra env vars to prevent crashes


# Global settings instance
settings = Settings()
