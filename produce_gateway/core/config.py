# Standard library imports
import os
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..domain.errors import ConfigurationError


DEFAULT_PORT = 8787
DEFAULT_GEMINI_MODEL = "gemini-2.5-pro"
DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1"
DEFAULT_IMAGE_URL = (
    "https://i5.samsclubimages.com/asr/e88cd487-1e1b-4373-9808-de4484446960."
    "89a37ef2c5eeab632d4297cc90162d61.jpeg?odnHeight=640&odnWidth=640&odnBg=FFFFFF"
)
DEFAULT_MAX_BODY_BYTES = 15 * 1024 * 1024  # 15 MiB


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Built once at process start and handed to every component that needs it.
    Instances are immutable; tests construct them directly with overrides.
    """
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_api_base: str = DEFAULT_GEMINI_API_BASE
    default_image_url: str = DEFAULT_IMAGE_URL
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    image_max_bytes: Optional[int] = None  # None means remote images are not capped
    upstream_timeout_seconds: Optional[float] = None  # None means no outbound timeout
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from the process environment.

        Returns:
            Settings instance with all configuration values
        """
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or "",
            gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
            gemini_api_base=(os.getenv("GEMINI_API_BASE") or DEFAULT_GEMINI_API_BASE).rstrip("/"),
            default_image_url=os.getenv("DEFAULT_IMAGE_URL") or DEFAULT_IMAGE_URL,
            max_body_bytes=_optional_int("MAX_BODY_BYTES") or DEFAULT_MAX_BODY_BYTES,
            image_max_bytes=_optional_int("IMAGE_MAX_BYTES"),
            upstream_timeout_seconds=_optional_float("UPSTREAM_TIMEOUT_SECONDS"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_optional_int("PORT") or DEFAULT_PORT,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """
        Check settings that the gateway cannot run without.

        Raises:
            ConfigurationError: If the Gemini API key is missing
        """
        if not self.gemini_api_key:
            raise ConfigurationError(
                "Missing GEMINI_API_KEY (or GOOGLE_API_KEY). Set it before starting the gateway."
            )


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
        _settings = Settings.from_env()
    return _settings
