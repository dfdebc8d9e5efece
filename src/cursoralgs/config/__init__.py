"""Configuration module using Pydantic Settings.

Usage:
    from cursoralgs.config import AlgorithmSettings, get_settings
"""

from cursoralgs.config.settings import AlgorithmSettings, get_settings

__all__ = [
    "AlgorithmSettings",
    "get_settings",
]
