"""Public domain model surface."""

from __future__ import annotations

from nftcatalog.domain.model.artist import Artist
from nftcatalog.domain.model.enums import Availability, MediaType
from nftcatalog.domain.model.listing import ActiveState, Listing, ListingState, SoldState
from nftcatalog.domain.model.primitives import (
    Amount,
    ArtistId,
    Price,
    artist_id_for,
    parse_amount,
)

__all__ = [  # noqa: RUF022
    # catalog
    "Artist",
    "Listing",
    # lifecycle
    "ActiveState",
    "SoldState",
    "ListingState",
    # enums
    "Availability",
    "MediaType",
    # primitives
    "Amount",
    "ArtistId",
    "Price",
    "artist_id_for",
    "parse_amount",
]
