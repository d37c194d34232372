"""
Simple configuration for the LegalEase document assistant.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Configuration class for the LegalEase document assistant."""

    # API Configuration
    OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")

    # Model Settings
    EXTRACTION_MODEL = os.environ.get("EXTRACTION_MODEL", "gpt-4o-mini")
    ANALYSIS_MODEL = os.environ.get("ANALYSIS_MODEL", "gpt-4o-mini")
    TRANSLATION_MODEL = os.environ.get("TRANSLATION_MODEL", "gpt-4o-mini")
    EXTRACTION_TEMPERATURE = 0
    ANALYSIS_TEMPERATURE = 0.3
    TRANSLATION_TEMPERATURE = 0
    REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "60"))

    # Image Upload
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp")

    # Analysis
    DEFAULT_LANGUAGE = "English"
    SANITIZE_HTML = _env_bool("SANITIZE_HTML", True)

    # API Settings
    API_HOST = os.environ.get("API_HOST", "0.0.0.0")
    API_PORT = int(os.environ.get("API_PORT", "5001"))
    API_DEBUG = _env_bool("API_DEBUG", False)
    API_VERSION = "1.0.0"


# Module-level aliases
OPENAI_API_KEY = Config.OPENAI_API_KEY
EXTRACTION_MODEL = Config.EXTRACTION_MODEL
ANALYSIS_MODEL = Config.ANALYSIS_MODEL
TRANSLATION_MODEL = Config.TRANSLATION_MODEL
EXTRACTION_TEMPERATURE = Config.EXTRACTION_TEMPERATURE
ANALYSIS_TEMPERATURE = Config.ANALYSIS_TEMPERATURE
TRANSLATION_TEMPERATURE = Config.TRANSLATION_TEMPERATURE
REQUEST_TIMEOUT = Config.REQUEST_TIMEOUT
MAX_FILE_SIZE = Config.MAX_FILE_SIZE
ALLOWED_IMAGE_TYPES = Config.ALLOWED_IMAGE_TYPES
DEFAULT_LANGUAGE = Config.DEFAULT_LANGUAGE
SANITIZE_HTML = Config.SANITIZE_HTML
API_HOST = Config.API_HOST
API_PORT = Config.API_PORT
API_DEBUG = Config.API_DEBUG
API_VERSION = Config.API_VERSION
