"""Listings and their lifecycle state.

A listing is either still on sale (``ActiveState``) or already sold (``SoldState``).
The state is a tagged variant so a listing can never carry both an available count
and a sold price.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from nftcatalog.domain.errors import InvalidListingError
from nftcatalog.domain.model.enums import Availability

if TYPE_CHECKING:
    from nftcatalog.domain.model.enums import MediaType
    from nftcatalog.domain.model.primitives import Price


@dataclass(frozen=True, slots=True)
class ActiveState:
    available: int

    def __post_init__(self) -> None:
        if self.available < 0:
            raise InvalidListingError(f"available count must be >= 0, got {self.available}")


@dataclass(frozen=True, slots=True)
class SoldState:
    sold_price: Price


ListingState: TypeAlias = ActiveState | SoldState


@dataclass(frozen=True, slots=True, kw_only=True)
class Listing:
    title: str
    media_type: MediaType
    price: Price
    state: ListingState
    genre: str | None = None
    image: str | None = None

    @property
    def is_sold(self) -> bool:
        return isinstance(self.state, SoldState)

    @property
    def available(self) -> int | None:
        """Units left for sale; ``None`` once sold."""
        match self.state:
            case ActiveState(available=available):
                return available
            case SoldState():
                return None

    @property
    def sold_price(self) -> Price | None:
        match self.state:
            case SoldState(sold_price=sold_price):
                return sold_price
            case ActiveState():
                return None

    @property
    def availability(self) -> Availability:
        match self.state:
            case SoldState():
                return Availability.SOLD
            case ActiveState(available=available) if available > 0:
                return Availability.AVAILABLE
            case ActiveState():
                return Availability.UNAVAILABLE

    @property
    def is_purchasable(self) -> bool:
        return self.availability is Availability.AVAILABLE
