"""Settings for hyperserial, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Environment Variables (``HYPERSERIAL_`` prefix)
    2. ``.env`` file in the working directory
    3. Default values in code

Quick Start:
    >>> from hyperserial.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'
"""

from .main import HyperserialSettings, get_settings, _reload_settings

__all__ = [
    "HyperserialSettings",
    "get_settings",
]
