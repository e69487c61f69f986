"""Catalog query engine and listing partitioner.

Queries are pure: they read the store, never mutate it, and return results in the
store's own order (artists in catalog order, each artist's listings in listing
order). The scan lives behind ``filter_listings`` so an index can replace it later
without changing what callers see.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nftcatalog.domain.filtering import IDENTITY, FilterCriteria, build_predicate

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from nftcatalog.domain.model import Artist, ArtistId, Listing, MediaType
    from nftcatalog.domain.ports import ListingStore


log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Listings that satisfied every active criterion, in source order."""

    listings: tuple[Listing, ...]
    criteria: FilterCriteria = IDENTITY

    def __iter__(self) -> Iterator[Listing]:
        return iter(self.listings)

    def __len__(self) -> int:
        return len(self.listings)

    @property
    def is_empty(self) -> bool:
        return not self.listings

    @property
    def titles(self) -> tuple[str, ...]:
        return tuple(listing.title for listing in self.listings)


@dataclass(frozen=True, slots=True)
class ListingPartition:
    """One artist's listings split into those still on sale and those sold."""

    active: tuple[Listing, ...]
    sold: tuple[Listing, ...]

    def __len__(self) -> int:
        return len(self.active) + len(self.sold)


@dataclass(frozen=True, slots=True)
class Facets:
    """Distinct filter values present in a listing set, first-seen order."""

    genres: tuple[str, ...]
    media_types: tuple[MediaType, ...]


def filter_listings(listings: Iterable[Listing], criteria: FilterCriteria) -> QueryResult:
    predicate = build_predicate(criteria)
    return QueryResult(
        listings=tuple(listing for listing in listings if predicate(listing)),
        criteria=criteria,
    )


def partition_listings(listings: Iterable[Listing]) -> ListingPartition:
    """Stable partition by lifecycle state; every listing lands in exactly one group."""

    active: list[Listing] = []
    sold: list[Listing] = []
    for listing in listings:
        (sold if listing.is_sold else active).append(listing)
    return ListingPartition(active=tuple(active), sold=tuple(sold))


def collect_facets(listings: Iterable[Listing]) -> Facets:
    genres: dict[str, None] = {}
    media_types: dict[MediaType, None] = {}
    for listing in listings:
        if listing.genre is not None:
            genres.setdefault(listing.genre)
        media_types.setdefault(listing.media_type)
    return Facets(genres=tuple(genres), media_types=tuple(media_types))


class CatalogQueryEngine:
    """Entry point the presentation layer calls into."""

    def __init__(self, store: ListingStore) -> None:
        self.store = store

    def all_listings(self) -> tuple[Listing, ...]:
        return tuple(
            listing for artist in self.store.all_artists() for listing in artist.listings
        )

    def resolve_artist(self, identifier: ArtistId) -> Artist:
        return self.store.find_artist(identifier)

    def query(self, criteria: FilterCriteria = IDENTITY) -> QueryResult:
        result = filter_listings(self.all_listings(), criteria)
        log.debug("Catalog query %s matched %d listing(s)", criteria, len(result))
        return result

    def query_artist(
        self, identifier: ArtistId, criteria: FilterCriteria = IDENTITY
    ) -> QueryResult:
        result = filter_listings(self.store.listings_for(identifier), criteria)
        log.debug(
            "Artist %r query %s matched %d listing(s)", identifier, criteria, len(result)
        )
        return result

    def partition(self, identifier: ArtistId) -> ListingPartition:
        return partition_listings(self.store.listings_for(identifier))

    def search_artists(self, text: str | None = None) -> tuple[Artist, ...]:
        """Artists whose display name contains ``text``, case-insensitively."""

        artists = self.store.all_artists()
        if not text:
            return artists
        needle = text.casefold()
        return tuple(artist for artist in artists if needle in artist.name.casefold())

    def facets(self, identifier: ArtistId | None = None) -> Facets:
        if identifier is None:
            return collect_facets(self.all_listings())
        return collect_facets(self.store.listings_for(identifier))
