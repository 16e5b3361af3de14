"""Configuration module for the Pantry Lens service.

Loads environment variables from .env file and provides
configuration settings for all services.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Hugging Face captioning API Configuration
    HF_API_KEY: str = os.getenv("HF_API_KEY", "")
    CAPTION_API_URL: str = os.getenv(
        "CAPTION_API_URL",
        "https://api-inference.huggingface.co/models/microsoft/git-base",
    )
    CAPTION_TIMEOUT: float = float(os.getenv("CAPTION_TIMEOUT", "30"))

    # Server Configuration
    APP_DEBUG: bool = os.getenv("APP_DEBUG", "0") == "1"
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "8000"))

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Path = Path(os.getenv("LOG_FILE", "pantry-lens.log"))

    # File Upload Configuration
    MAX_CONTENT_LENGTH: int = int(os.getenv("MAX_CONTENT_LENGTH", str(16 * 1024 * 1024)))  # 16MB
    ALLOWED_EXTENSIONS: set[str] = {"png", "jpg", "jpeg", "webp", "gif"}

    @classmethod
    def validate(cls) -> list[str]:
        """Validate that all required configuration is present.

        Returns:
            List of missing configuration keys.
        """
        missing = []
        if not cls.HF_API_KEY:
            missing.append("HF_API_KEY")
        return missing


# Create singleton config instance
config = Config()
