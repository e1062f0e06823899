"""Configuration models for the generational cache."""

from .models import CacheConfig, EnvSettings

__all__ = ["CacheConfig", "EnvSettings"]
