"""Observability utilities: logging setup.

The cache itself only emits records through ``logging.getLogger(__name__)``;
this helper is for applications and tests that want those records visible.
If `structlog` is installed it is configured with a matching filtering bound
logger. The dependency on `structlog` is optional to keep the base runtime
lightweight.
"""

from __future__ import annotations

import importlib
import logging

CACHE_LOGGERS = ["gencache", "gencache.cache"]


def setup_logging(level: str = "INFO", cache_level: str | None = None) -> None:
    """Configure application logging.

    Parameters
    ----------
    level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "INFO".
    cache_level: str, optional
        Level for the cache's own loggers. Pass "DEBUG" to see rotation and
        resize events without turning on DEBUG everywhere.

    Behavior
    --------
    - Initializes Python's logging with the requested level.
    - If `structlog` is installed, configures it with a filtering bound logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format=("%(asctime)s %(levelname)s %(name)s - %(message)s"),
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if cache_level is not None:
        cache_numeric = getattr(logging, cache_level.upper(), numeric_level)
        for logger_name in CACHE_LOGGERS:
            logging.getLogger(logger_name).setLevel(cache_numeric)

    try:  # optional structlog
        structlog = importlib.import_module("structlog")
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        )
    except ModuleNotFoundError:  # pragma: no cover
        pass
