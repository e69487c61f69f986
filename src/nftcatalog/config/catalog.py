"""Catalog source configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var, require_env_vars
from .logging import resolve_log_level

CATALOG_PATH_ENV: Final[str] = "NFTCATALOG_CATALOG_PATH"
LOG_LEVEL_ENV: Final[str] = "NFTCATALOG_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Where the catalog document lives and how chatty the logs are."""

    catalog_path: Path
    log_level: int

    def resolve_catalog_path(self) -> Path:
        return self.catalog_path.expanduser().resolve()


def get_catalog_config(*, path: str | Path | None = None) -> CatalogConfig:
    """Build the catalog configuration.

    An explicit ``path`` wins over ``NFTCATALOG_CATALOG_PATH``; without either a
    ``MissingConfigurationError`` is raised.
    """

    if path is None:
        path = require_env_vars((CATALOG_PATH_ENV,))[CATALOG_PATH_ENV]
    level = resolve_log_level(optional_env_var(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
    return CatalogConfig(catalog_path=Path(path), log_level=level)
