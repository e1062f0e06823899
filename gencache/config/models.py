"""Config models and loader.

This module defines Pydantic models for file- and environment-based cache
configuration. JSON parsing prefers `orjson` when available and falls back to
the Python standard library's `json` module otherwise.
"""

from __future__ import annotations

import json as _json
from pathlib import Path
from typing import Any, Callable, Optional

try:
    import orjson as _orjson_mod  # type: ignore[assignment]
except ImportError:  # pragma: no cover - optional dependency
    _orjson_mod = None  # type: ignore[assignment]
    _loads_orjson: Optional[Callable[[bytes], Any]] = None
else:

    def _loads_orjson(buf: bytes) -> Any:
        loader = getattr(_orjson_mod, "loads")  # type: ignore[assignment]
        return loader(buf)


from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheConfig(BaseModel):
    """Construction parameters for a :class:`GenerationalCache`.

    Attributes
    ----------
    capacity: int
        Maximum number of live entries.
    default_ttl_seconds: Optional[float]
        Default entry TTL in seconds. ``None`` means entries never expire.
    """

    capacity: int = Field(..., gt=0, description="Maximum number of entries")
    default_ttl_seconds: Optional[float] = Field(
        None, gt=0, description="Default TTL in seconds; omit for no expiry"
    )

    @staticmethod
    def load(path: Path) -> "CacheConfig":
        """Load cache config from a JSON file."""
        raw = path.read_bytes()
        if _loads_orjson is not None:
            data = _loads_orjson(raw)
        else:
            data = _json.loads(raw.decode("utf-8"))
        return CacheConfig.model_validate(data)


class EnvSettings(BaseSettings):
    """Environment-driven settings and .env support.

    Attributes
    ----------
    log_level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "INFO".
    capacity: int
        Cache capacity. Defaults to 1024.
    default_ttl_seconds: Optional[float]
        Default entry TTL in seconds. Unset means entries never expire.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="GENCACHE_")

    log_level: str = Field("INFO")
    capacity: int = Field(1024, gt=0)
    default_ttl_seconds: Optional[float] = Field(None, gt=0)

    def to_cache_config(self) -> CacheConfig:
        """Return the cache-related subset as a :class:`CacheConfig`."""
        return CacheConfig(
            capacity=self.capacity,
            default_ttl_seconds=self.default_ttl_seconds,
        )
