"""Settings module for sqlpostgis, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority)
    2. ``.env`` file in the working directory
    3. Default Values in code (lowest priority)

Environment Variable Naming:
    - Format: SQLPOSTGIS_SETTING_NAME
    - Case: insensitive

Quick Start:
    >>> from sqlpostgis.settings import get_settings
    >>> settings = get_settings()
    >>> settings.dialect
    'postgresql'
"""

from .main import SpatialSettings, get_settings, _reload_settings

__all__ = [
    "SpatialSettings",
    "get_settings",
]
