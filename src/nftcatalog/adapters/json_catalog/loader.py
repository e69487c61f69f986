"""Load a catalog document from disk into an in-memory store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from nftcatalog.adapters.memory import InMemoryListingStore
from nftcatalog.domain.errors import CatalogError

from .schema import CatalogDocument
from .translator import translate_catalog

if TYPE_CHECKING:
    from pathlib import Path


log = logging.getLogger(__name__)


class CatalogLoadError(CatalogError):
    """Raised when a catalog document cannot be read or validated."""


def parse_catalog(payload: str | bytes) -> InMemoryListingStore:
    try:
        document = CatalogDocument.model_validate_json(payload)
        artists = translate_catalog(document)
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid catalog document: {exc}") from exc
    except ValueError as exc:
        # prices that are not numbers surface from translation
        raise CatalogLoadError(f"Invalid catalog document: {exc}") from exc
    return InMemoryListingStore(artists)


def load_catalog(path: Path) -> InMemoryListingStore:
    """Read, validate and index the catalog at ``path``."""

    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise CatalogLoadError(f"Cannot read catalog {path}: {exc}") from exc
    store = parse_catalog(payload)
    log.info(
        "Loaded catalog %s: artists=%d, listings=%d",
        path,
        len(store),
        sum(len(artist.listings) for artist in store.all_artists()),
    )
    return store
