"""Configuration settings using Pydantic Settings.

Usage:
    from collares.config import CopierSettings

    # Load from environment variables (COLLARES_*)
    settings = CopierSettings()

    # Or override with explicit values
    settings = CopierSettings(cache_shapes=True)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install collares[config]"
    ) from e


class CopierSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for Copier instances.

    Attributes:
        cache_shapes: Memoize introspected shapes per type inside a Copier.
        include_properties: Treat property descriptors as members.
        include_annotations: Treat annotated attributes of plain classes as members.

    Environment Variables:
        COLLARES_CACHE_SHAPES
        COLLARES_INCLUDE_PROPERTIES
        COLLARES_INCLUDE_ANNOTATIONS
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLARES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cache_shapes: bool = False
    include_properties: bool = True
    include_annotations: bool = True
