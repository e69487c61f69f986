from __future__ import annotations

from pathlib import Path

import pytest

from nftcatalog.adapters.memory import InMemoryListingStore
from nftcatalog.domain.catalog import CatalogQueryEngine
from nftcatalog.domain.model import Artist, Listing, MediaType
from tests.helpers.catalog import active, sold

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def marketplace_listings() -> tuple[Listing, ...]:
    return (
        active("NFT 1", genre="Hip-Hop", price="0.5", available=10),
        active("NFT 2", genre="Pop", media_type=MediaType.VIDEO, price="1.2", available=0),
        active("NFT 3", genre="Rock", price="0.8", available=100),
    )


@pytest.fixture
def profile_listings() -> tuple[Listing, ...]:
    return (
        active("Nouveaux Sons", price="0.5", available=5),
        sold("Premier Album", sold_for="2.0"),
        active("Clip Live", media_type=MediaType.VIDEO, price="1.2", available=2),
        sold("Session Acoustique", sold_for="1.5", media_type=MediaType.VIDEO),
    )


@pytest.fixture
def store(
    marketplace_listings: tuple[Listing, ...],
    profile_listings: tuple[Listing, ...],
) -> InMemoryListingStore:
    return InMemoryListingStore(
        [
            Artist(
                name="DJ Arafat",
                bio="Coupé-décalé pioneer.",
                social_links={"twitter": "https://twitter.com/djarafat"},
                listings=marketplace_listings,
            ),
            Artist(name="Josey", listings=profile_listings),
            Artist(name="Didi B"),
        ]
    )


@pytest.fixture
def engine(store: InMemoryListingStore) -> CatalogQueryEngine:
    return CatalogQueryEngine(store)


@pytest.fixture
def catalog_path() -> Path:
    return DATA_DIR / "catalog.json"
