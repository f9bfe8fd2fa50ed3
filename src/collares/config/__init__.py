"""Configuration module using Pydantic Settings.

Usage:
    from collares import Copier
    from collares.config import CopierSettings

    copier = Copier.from_settings(CopierSettings(cache_shapes=True))
"""

from collares.config.settings import CopierSettings

__all__ = [
    "CopierSettings",
]
