"""Translate validated catalog records into domain objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nftcatalog.domain.errors import InvalidListingError
from nftcatalog.domain.model import ActiveState, Artist, Listing, Price, SoldState

if TYPE_CHECKING:
    from nftcatalog.domain.model import ListingState

    from .schema import ArtistRecord, CatalogDocument, WorkRecord


def translate_catalog(document: CatalogDocument) -> list[Artist]:
    return [translate_artist(record) for record in document.artists]


def translate_artist(record: ArtistRecord) -> Artist:
    return Artist(
        name=record.name,
        bio=record.bio,
        image=record.image,
        social_links=record.social_links,
        listings=tuple(translate_work(work) for work in record.ordered_works),
    )


def translate_work(work: WorkRecord) -> Listing:
    state = _build_state(work)
    match (work.price, state):
        case (None, SoldState(sold_price=sold_price)):
            # sold works listed without an asking price keep their sale price
            price = sold_price
        case (None, ActiveState()):
            raise InvalidListingError(f"work on sale needs a price: {work.title!r}")
        case (raw_price, _):
            price = Price.parse(raw_price)
    return Listing(
        title=work.title,
        media_type=work.media_type,
        genre=work.genre,
        price=price,
        state=state,
        image=work.image,
    )


def _build_state(work: WorkRecord) -> ListingState:
    if work.sold_for is not None:
        return SoldState(sold_price=Price.parse(work.sold_for))
    if work.available is None:
        raise InvalidListingError(f"work needs an available count: {work.title!r}")
    return ActiveState(available=work.available)
