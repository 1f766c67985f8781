"""
Application configuration.

Values come from environment variables; a `.env` file in the working
directory is loaded first so local development needs no exported vars.

    WP_BASE_URL      site URL, e.g. https://blog.example.com (default http://localhost:8080)
    WP_USERNAME      user for Application Password auth (optional)
    WP_APP_PASSWORD  Application Password for that user (optional)
    WP_TIMEOUT       request timeout in seconds (default 10)
    WP_PER_PAGE      items per list request, 1-100 (default 10)
    LOG_LEVEL        logging level name (default INFO)
"""
import os
from functools import lru_cache
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from services.wp_client import WordPressClient

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0
DEFAULT_PER_PAGE = 10
# WordPress rejects per_page outside this range
MIN_PER_PAGE = 1
MAX_PER_PAGE = 100


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    username: Optional[str] = None
    app_password: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    per_page: int = DEFAULT_PER_PAGE
    log_level: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.app_password)


def _parse_number(env: Mapping[str, str], name: str, cast, default):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def settings_from_env(env: Mapping[str, str]) -> Settings:
    base_url = (env.get("WP_BASE_URL") or DEFAULT_BASE_URL).strip().rstrip("/")
    timeout = _parse_number(env, "WP_TIMEOUT", float, DEFAULT_TIMEOUT)
    if timeout <= 0:
        raise ValueError(f"WP_TIMEOUT must be positive, got {timeout}")
    per_page = _parse_number(env, "WP_PER_PAGE", int, DEFAULT_PER_PAGE)
    per_page = max(MIN_PER_PAGE, min(MAX_PER_PAGE, per_page))
    return Settings(
        base_url=base_url,
        username=env.get("WP_USERNAME") or None,
        app_password=env.get("WP_APP_PASSWORD") or None,
        timeout=timeout,
        per_page=per_page,
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )


def get_settings() -> Settings:
    load_dotenv()
    return settings_from_env(os.environ)


def build_client(settings: Settings):
    return WordPressClient(
        settings.base_url,
        username=settings.username,
        app_password=settings.app_password,
        timeout=settings.timeout,
        per_page=settings.per_page,
    )


@lru_cache(maxsize=1)
def default_client():
    """Client shared by all pages of a running app, built from the environment."""
    return build_client(get_settings())
