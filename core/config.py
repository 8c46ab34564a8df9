"""
Centralized configuration loaded from environment variables.

All settings are validated at import time so failures surface early.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("wishes.config")

_TRUE_VALUES = ("true", "1", "yes")
_VALID_SCHEMES = ("http", "https")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Immutable application settings derived from environment variables."""

    # Server
    host: str = "0.0.0.0"
    port: int = 6054
    access_log: bool = True

    # Public URLs
    public_scheme: str = "https"  # Scheme used when building share URLs
    image_service_url: str = "https://img.sanweb.info/friend/friend"
    image_download_url: str = "https://img.sanweb.info/dl/file"

    # /wish/web without a name: 303 to the home page, or 400 when disabled
    redirect_missing_name: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: str = "wishes.log"  # Empty = stdout only

    @classmethod
    def from_env(cls) -> "Settings":
        public_scheme = os.getenv("PUBLIC_SCHEME", "https").strip().lower()
        if public_scheme not in _VALID_SCHEMES:
            logger.warning(
                "PUBLIC_SCHEME=%s is not http or https, falling back to https.",
                public_scheme,
            )
            public_scheme = "https"

        return cls(
            host=os.getenv("WISHES_HOST", "0.0.0.0"),
            port=int(os.getenv("WISHES_PORT", "6054")),
            access_log=_env_bool("ACCESS_LOG", "true"),
            public_scheme=public_scheme,
            image_service_url=os.getenv(
                "IMAGE_SERVICE_URL", "https://img.sanweb.info/friend/friend"
            ).rstrip("?"),
            image_download_url=os.getenv(
                "IMAGE_DOWNLOAD_URL", "https://img.sanweb.info/dl/file"
            ).rstrip("?"),
            redirect_missing_name=_env_bool("REDIRECT_MISSING_NAME", "true"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE", "wishes.log"),
        )


# Singleton, import this everywhere
settings = Settings.from_env()
