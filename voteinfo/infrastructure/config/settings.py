"""Settings of the voteinfo package.

Values come from environment variables prefixed with ``VOTEINFO_`` or from a
``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


CKAN_PACKAGE_SHOW_URL = "https://ckan.opendata.swiss/api/3/action/package_show"

NATIONAL_PACKAGE_ID = (
    "echtzeitdaten-am-abstimmungstag-zu-eidgenoessischen-abstimmungsvorlagen"
)
CANTONAL_PACKAGE_ID = (
    "echtzeitdaten-am-abstimmungstag-zu-kantonalen-abstimmungsvorlagen"
)


class Settings(BaseSettings):
    """Configuration of catalog discovery, HTTP access and logging."""

    model_config = SettingsConfigDict(
        env_prefix="VOTEINFO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    NATIONAL_CATALOG_URL: str = f"{CKAN_PACKAGE_SHOW_URL}?id={NATIONAL_PACKAGE_ID}"
    CANTONAL_CATALOG_URL: str = f"{CKAN_PACKAGE_SHOW_URL}?id={CANTONAL_PACKAGE_ID}"
    HTTP_TIMEOUT: float = 30.0
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached settings and read them again."""
    get_settings.cache_clear()
    return get_settings()
