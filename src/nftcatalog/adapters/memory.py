"""In-memory listing store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nftcatalog.domain.errors import ArtistNotFoundError, DuplicateArtistError
from nftcatalog.domain.model import artist_id_for

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nftcatalog.domain.model import Artist, ArtistId, Listing


log = logging.getLogger(__name__)


class InMemoryListingStore:
    """Holds a fully-formed catalog; read-only once built.

    Lookups normalize the requested identifier the same way artist names are
    normalized, so ``"Artist 1"`` and ``"artist1"`` resolve to the same entry. Two
    artists whose names collapse to one identifier are rejected at construction.
    """

    def __init__(self, artists: Iterable[Artist] = ()) -> None:
        ordered = tuple(artists)
        index: dict[ArtistId, Artist] = {}
        for artist in ordered:
            identifier = artist.id
            existing = index.get(identifier)
            if existing is not None:
                raise DuplicateArtistError(identifier, (existing.name, artist.name))
            index[identifier] = artist
        self._artists = ordered
        self._index = index
        log.debug("Listing store holds %d artist(s)", len(ordered))

    def __len__(self) -> int:
        return len(self._artists)

    def all_artists(self) -> tuple[Artist, ...]:
        return self._artists

    def find_artist(self, identifier: ArtistId) -> Artist:
        artist = self._index.get(artist_id_for(identifier))
        if artist is None:
            raise ArtistNotFoundError(identifier)
        return artist

    def listings_for(self, identifier: ArtistId) -> tuple[Listing, ...]:
        return self.find_artist(identifier).listings
