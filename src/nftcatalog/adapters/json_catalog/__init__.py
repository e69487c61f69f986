"""JSON catalog adapter package."""

from __future__ import annotations

from .loader import CatalogLoadError, load_catalog, parse_catalog
from .schema import ArtistRecord, CatalogDocument, WorkRecord
from .translator import translate_artist, translate_catalog, translate_work

__all__ = [
    "ArtistRecord",
    "CatalogDocument",
    "CatalogLoadError",
    "WorkRecord",
    "load_catalog",
    "parse_catalog",
    "translate_artist",
    "translate_catalog",
    "translate_work",
]
