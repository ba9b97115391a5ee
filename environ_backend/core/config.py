# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "environ")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

        # HTTP / Logging
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")
        )
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.local_timezone: Final[str] = os.getenv("LOCAL_TIMEZONE", "UTC")

        # Classification Configuration
        self.classifier_provider: Final[str] = os.getenv("CLASSIFIER_PROVIDER", "gemini").lower()
        self.gemini_api_key: Final[str] = os.getenv("GEMINI_API_KEY", "")
        self.gemini_model: Final[str] = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
        self.groq_api_key: Final[str] = os.getenv("GROQ_API_KEY", "")
        self.vlm_model: Final[str] = os.getenv(
            "VLM_MODEL", "meta-llama/llama-4-scout-17b-16e-instruct"
        )

        # Weather
        self.openweather_api_key: Final[str] = os.getenv("OPENWEATHER_API_KEY", "")
        self.default_city: Final[str] = os.getenv("DEFAULT_CITY", "London")

        # Media storage
        self.media_root: Final[str] = os.getenv("MEDIA_ROOT", "media")
        self.media_url: Final[str] = os.getenv("MEDIA_URL", "/media")
        self.max_upload_mb: Final[int] = int(os.getenv("MAX_UPLOAD_MB", "10"))

        # Gamification (product configuration)
        self.login_bonus_points: Final[int] = int(os.getenv("LOGIN_BONUS_POINTS", "10"))
        self.recyclable_points: Final[int] = int(os.getenv("RECYCLABLE_POINTS", "20"))
        self.non_recyclable_points: Final[int] = int(os.getenv("NON_RECYCLABLE_POINTS", "5"))
        self.points_per_level: Final[int] = int(os.getenv("POINTS_PER_LEVEL", "100"))
        self.level_policy: Final[str] = os.getenv("LEVEL_POLICY", "points").lower()
        self.co2_per_recyclable_kg: Final[float] = float(os.getenv("CO2_PER_RECYCLABLE_KG", "0.2"))


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
