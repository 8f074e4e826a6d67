"""
Configuration module for the Career Compass backend.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Google Gemini API
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # Deadlines (seconds)
    # The model call must finish before the hosting platform kills the
    # request, and the client must wait longer than the model call so the
    # gateway's own timeout response reaches it first.
    PLATFORM_TIMEOUT_SECONDS: float = float(os.getenv("PLATFORM_TIMEOUT_SECONDS", "10"))
    GEMINI_TIMEOUT_SECONDS: float = float(os.getenv("GEMINI_TIMEOUT_SECONDS", "8"))
    CLIENT_TIMEOUT_SECONDS: float = float(os.getenv("CLIENT_TIMEOUT_SECONDS", "12"))

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (only enforced in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @property
    def GOOGLE_API_KEY(self) -> str:
        """
        Gemini API key, read from the environment on every access so a key
        set or rotated after startup is picked up. API_KEY is the name used
        by the serverless deployment.
        """
        return os.getenv("GOOGLE_API_KEY") or os.getenv("API_KEY", "")

    def validate(self) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If a required setting is missing or the deadlines
                are ordered incorrectly.
        """
        required_settings = {
            "GOOGLE_API_KEY": self.GOOGLE_API_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

        if self.GEMINI_TIMEOUT_SECONDS >= self.PLATFORM_TIMEOUT_SECONDS:
            raise ValueError(
                "GEMINI_TIMEOUT_SECONDS must be lower than PLATFORM_TIMEOUT_SECONDS "
                f"({self.GEMINI_TIMEOUT_SECONDS} >= {self.PLATFORM_TIMEOUT_SECONDS})."
            )

        if self.CLIENT_TIMEOUT_SECONDS <= self.GEMINI_TIMEOUT_SECONDS:
            raise ValueError(
                "CLIENT_TIMEOUT_SECONDS must be greater than GEMINI_TIMEOUT_SECONDS "
                f"({self.CLIENT_TIMEOUT_SECONDS} <= {self.GEMINI_TIMEOUT_SECONDS})."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   The app may not work correctly until you configure your .env file.")
        else:
            raise
