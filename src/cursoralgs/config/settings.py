"""Configuration settings using Pydantic Settings.

Usage:
    from cursoralgs.config import AlgorithmSettings, get_settings

    # Load from environment variables (CURSORALGS_*)
    settings = get_settings()

    # Or override with explicit values
    settings = AlgorithmSettings(rfind_max_depth=2000)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AlgorithmSettings(BaseSettings):  # type: ignore[misc]
    """Tunables for the algorithm library.

    Attributes:
        rfind_max_depth: Most elements `rfind` may recurse past before giving up
            with RecursionBoundError.
        check_categories: Verify cursor capabilities when an algorithm is entered.
            Off by default so calls pay nothing for the check.

    Environment Variables:
        CURSORALGS_RFIND_MAX_DEPTH
        CURSORALGS_CHECK_CATEGORIES
    """

    model_config = SettingsConfigDict(
        env_prefix="CURSORALGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    rfind_max_depth: int = Field(default=500, gt=0)
    check_categories: bool = False


@lru_cache(maxsize=1)
def get_settings() -> AlgorithmSettings:
    """Settings loaded once from the environment.

    Call `get_settings.cache_clear()` after changing the environment.
    """
    return AlgorithmSettings()
