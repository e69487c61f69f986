from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from nftcatalog.app import build_catalog_engine
from nftcatalog.config import CatalogConfig

if TYPE_CHECKING:
    from pathlib import Path


def test_build_catalog_engine_from_explicit_config(catalog_path: Path) -> None:
    engine = build_catalog_engine(CatalogConfig(catalog_path=catalog_path, log_level=logging.INFO))

    assert engine.resolve_artist("DJ Arafat").id == "djarafat"
    assert len(engine.query()) == 7


def test_build_catalog_engine_reads_environment(
    monkeypatch: pytest.MonkeyPatch, catalog_path: Path
) -> None:
    monkeypatch.setenv("NFTCATALOG_CATALOG_PATH", str(catalog_path))

    engine = build_catalog_engine()

    assert [artist.name for artist in engine.search_artists("jo")] == ["Josey"]
