from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    """Application settings"""

    # App Configuration
    APP_NAME: str = "AI Humanizer"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # API Configuration
    API_V1_STR: str = "/api/v1"
    CORS_ALLOW_ORIGINS: str = "*"  # Comma separated list of origins

    # AI API Configuration
    GOOGLE_API_KEY: Optional[str] = None  # For the Gemini generation client
    HUMANIZER_MODEL: str = "gemini-1.5-flash"
    HUMANIZER_TEMPERATURE: Optional[float] = None  # None keeps the provider default
    HUMANIZER_MAX_INPUT_CHARS: int = 20000

    # Logging
    LOG_BUFFER_SIZE: int = 1000

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS_ALLOW_ORIGINS into a list of origins"""
        origins = [origin.strip() for origin in self.CORS_ALLOW_ORIGINS.split(",")]
        return [origin for origin in origins if origin]

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        case_sensitive = True
        extra = "ignore"

# Create settings instance
settings = Settings()
