"""Filter criteria and the predicates compiled from them.

Every criterion compiles to its own predicate; the composite predicate is the logical
AND of the active ones. Criteria with nothing set compile to the identity predicate.

Criteria usually come straight from free-form user input, so construction is
lenient: empty strings count as "unset" and a max price that is not a number is
logged and dropped (treated as unbounded) instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias, TypeVar

from nftcatalog.domain.errors import InvalidCriteriaError
from nftcatalog.domain.model import parse_amount

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from decimal import Decimal

    from nftcatalog.domain.model import Amount, Listing, MediaType

ListingPredicate: TypeAlias = "Callable[[Listing], bool]"

_T = TypeVar("_T", bound=str)

log = logging.getLogger(__name__)


def _empty_to_none(value: _T | None) -> _T | None:
    # only "" means unset; whitespace is a literal value
    if value is None or value == "":
        return None
    return value


@dataclass(frozen=True, slots=True, kw_only=True)
class FilterCriteria:
    """User-supplied constraints narrowing a catalog query. All fields optional."""

    text: str | None = None
    genre: str | None = None
    media_type: MediaType | str | None = None
    max_price: Amount | Decimal | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", _empty_to_none(self.text))
        object.__setattr__(self, "genre", _empty_to_none(self.genre))
        object.__setattr__(self, "media_type", _empty_to_none(self.media_type))
        object.__setattr__(self, "max_price", _lenient_max_price(self.max_price))

    @property
    def is_identity(self) -> bool:
        return not predicates_for(self)


def _lenient_max_price(value: Amount | None) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return parse_amount(value)
    except InvalidCriteriaError:
        log.warning("Ignoring malformed max price %r; treating it as unbounded", value)
        return None


def text_predicate(text: str) -> ListingPredicate:
    needle = text.casefold()

    def predicate(listing: Listing) -> bool:
        return needle in listing.title.casefold()

    return predicate


def genre_predicate(genre: str) -> ListingPredicate:
    def predicate(listing: Listing) -> bool:
        return listing.genre == genre

    return predicate


def media_type_predicate(media_type: MediaType | str) -> ListingPredicate:
    def predicate(listing: Listing) -> bool:
        return listing.media_type == media_type

    return predicate


def max_price_predicate(max_price: Decimal) -> ListingPredicate:
    # currency units are assumed uniform and are not compared
    def predicate(listing: Listing) -> bool:
        return listing.price.amount <= max_price

    return predicate


def predicates_for(criteria: FilterCriteria) -> tuple[ListingPredicate, ...]:
    """Compile each active criterion into an independent predicate."""

    predicates: list[ListingPredicate] = []
    if criteria.text is not None:
        predicates.append(text_predicate(criteria.text))
    if criteria.genre is not None:
        predicates.append(genre_predicate(criteria.genre))
    if criteria.media_type is not None:
        predicates.append(media_type_predicate(criteria.media_type))
    if criteria.max_price is not None:
        # already normalized to a Decimal in __post_init__
        predicates.append(max_price_predicate(parse_amount(criteria.max_price)))
    return tuple(predicates)


def compose(predicates: Sequence[ListingPredicate]) -> ListingPredicate:
    """AND the predicates together; an empty sequence gives the identity predicate."""

    checks = tuple(predicates)

    def predicate(listing: Listing) -> bool:
        return all(check(listing) for check in checks)

    return predicate


def build_predicate(criteria: FilterCriteria) -> ListingPredicate:
    return compose(predicates_for(criteria))


IDENTITY = FilterCriteria()
