"""Application wiring: configuration, catalog loading and the query engine."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from nftcatalog.adapters.json_catalog import load_catalog
from nftcatalog.config import get_catalog_config
from nftcatalog.domain.catalog import CatalogQueryEngine

if TYPE_CHECKING:
    from nftcatalog.config import CatalogConfig


log = getLogger(__name__)


def build_catalog_engine(config: CatalogConfig | None = None) -> CatalogQueryEngine:
    """Load the configured catalog and return an engine over it."""

    effective_config = config or get_catalog_config()
    path = effective_config.resolve_catalog_path()
    log.info("Opening catalog at %s", path)
    return CatalogQueryEngine(load_catalog(path))
