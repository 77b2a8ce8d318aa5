"""Environment-driven configuration."""

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "https://api.paanj.com"
DEFAULT_BASE_PATH = "/admin"
DEFAULT_PAGE_SIZE = 50
DEFAULT_HTTP_TIMEOUT = 15.0


def get_api_url() -> str:
    return os.getenv("PAANJ_API_URL", DEFAULT_API_URL).rstrip("/")


def get_secret_key() -> str:
    return os.getenv("PAANJ_SECRET_KEY", "")


def get_http_timeout() -> float:
    return float(os.getenv("PAANJ_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT)))


def get_default_page_size() -> int:
    return int(os.getenv("PAANJ_DEFAULT_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)))


def release_server_subscriptions_enabled() -> bool:
    return os.getenv("PAANJ_RELEASE_SERVER_SUBSCRIPTIONS", "false").lower() == "true"


def resolve_base_path(base_path: Optional[str] = None) -> str:
    """Return the API prefix resources build their paths on.

    An explicit ``base_path`` wins over ``PAANJ_ADMIN_BASE_PATH``. The result
    always has exactly one leading slash and no trailing slash, so ``"api/v1/"``
    becomes ``"/api/v1"``. An empty or ``"/"`` prefix resolves to ``""``.
    """
    if base_path is None:
        base_path = os.getenv("PAANJ_ADMIN_BASE_PATH", DEFAULT_BASE_PATH)

    stripped = base_path.strip().strip("/")
    return f"/{stripped}" if stripped else ""
