"""Ports the catalog engine reads through."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nftcatalog.domain.model import Artist, ArtistId, Listing


@runtime_checkable
class ListingStore(Protocol):
    """Read-only access to the canonical, ordered catalog."""

    def all_artists(self) -> tuple[Artist, ...]: ...

    def find_artist(self, identifier: ArtistId) -> Artist:
        """Return the artist or raise ``ArtistNotFoundError``."""
        ...

    def listings_for(self, identifier: ArtistId) -> tuple[Listing, ...]: ...
