"""
Configuration module for the PubMed Relay application.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv
from utils.logger import app_logger, register_secrets, setup_logger

load_dotenv()


def _get_float(name: str, default: float) -> float:
    """Read a float setting, falling back to the default on bad input."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        app_logger.warning(f"Invalid value for {name}: {raw!r}, using {default}")
        return default


class Config:
    """Application configuration class."""

    # API Keys
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    PUBMED_API_KEY: str = os.getenv("PUBMED_API_KEY", "")

    # API Configuration
    OPENAI_API_URL: str = os.getenv("OPENAI_API_URL", "https://api.openai.com/v1/chat/completions")
    PUBMED_BASE_URL: str = os.getenv("PUBMED_BASE_URL", "https://eutils.ncbi.nlm.nih.gov/entrez/eutils")

    # Application Settings
    APP_TITLE: str = "PubMed Relay"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Cross-origin
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")
    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "")
    ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
    ALLOWED_HEADERS = ["Content-Type", "Authorization"]

    # Timeouts (in seconds)
    OPENAI_TIMEOUT: float = _get_float("OPENAI_TIMEOUT", 30.0)
    PUBMED_TIMEOUT: float = _get_float("PUBMED_TIMEOUT", 10.0)

    # PubMed search result limits
    DEFAULT_RETMAX: int = 30
    MAX_RETMAX: int = 100

    # Connection pool
    MAX_CONNECTIONS: int = 20

    @classmethod
    def get_allowed_origins(cls) -> list[str]:
        """
        Build the CORS allow-list from FRONTEND_URL and ALLOWED_ORIGINS.
        Duplicates and blank entries are dropped, order is kept.
        """
        origins = []
        for origin in [cls.FRONTEND_URL, *cls.ALLOWED_ORIGINS.split(",")]:
            origin = origin.strip().rstrip("/")
            if origin and origin not in origins:
                origins.append(origin)
        return origins

    @classmethod
    def allow_credentials(cls) -> bool:
        """Credentials are never combined with a wildcard origin."""
        return "*" not in cls.get_allowed_origins()

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and log warnings for missing API keys."""
        if not cls.OPENAI_API_KEY:
            app_logger.warning("OPENAI_API_KEY not found in environment or .env file")
            app_logger.warning("Requests to /api/openai will fail with an internal error.")

        if not cls.PUBMED_API_KEY:
            app_logger.warning("PUBMED_API_KEY not found in environment or .env file")
            app_logger.warning("PubMed requests will be sent without a key and rate-limited by NCBI.")

        if not cls.allow_credentials():
            app_logger.warning("Wildcard CORS origin configured, credentialed requests are disabled")

setup_logger(app_logger.name, Config.LOG_LEVEL)
register_secrets(Config.OPENAI_API_KEY, Config.PUBMED_API_KEY)
Config.validate()
