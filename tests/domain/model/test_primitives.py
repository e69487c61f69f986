from __future__ import annotations

from decimal import Decimal

import pytest

from nftcatalog.domain.errors import InvalidCriteriaError
from nftcatalog.domain.model import Artist, Price, artist_id_for, parse_amount


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Artist 1", "artist1"),
        ("DJ Arafat", "djarafat"),
        ("  Didi\tB \n", "didib"),
        ("kerozen", "kerozen"),
    ],
)
def test_artist_id_lowercases_and_strips_whitespace(name: str, expected: str) -> None:
    assert artist_id_for(name) == expected


def test_names_differing_by_case_and_spacing_collide() -> None:
    assert Artist(name="Didi B").id == Artist(name="didib").id


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("0.5 ETH", Decimal("0.5")),
        ("  1.2ETH", Decimal("1.2")),
        (".75", Decimal("0.75")),
        ("3", Decimal(3)),
        ("1e2", Decimal(100)),
        ("2.5E-1 ETH", Decimal("0.25")),
        (0.8, Decimal("0.8")),
        (2, Decimal(2)),
        (Decimal("1.50"), Decimal("1.50")),
    ],
)
def test_parse_amount_reads_leading_number(raw: str | float, expected: Decimal) -> None:
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", "ETH", "abc", "nan", float("inf"), True])
def test_parse_amount_rejects_non_numeric(raw: object) -> None:
    with pytest.raises(InvalidCriteriaError):
        parse_amount(raw)  # type: ignore[arg-type]


def test_price_parse_keeps_currency_unit() -> None:
    price = Price.parse("0.5 ETH")

    assert price == Price(amount=Decimal("0.5"), currency="ETH")
    assert str(price) == "0.5 ETH"


def test_price_parse_without_unit() -> None:
    price = Price.parse(1.2)

    assert price.currency is None
    assert str(price) == "1.2"


def test_artist_social_links_are_read_only() -> None:
    links = {"twitter": "https://twitter.com/artist"}
    artist = Artist(name="Josey", social_links=links)
    links["instagram"] = "https://instagram.com/artist"

    assert dict(artist.social_links) == {"twitter": "https://twitter.com/artist"}
    with pytest.raises(TypeError):
        artist.social_links["x"] = "y"  # type: ignore[index]


def test_price_parse_reads_exponent_before_currency() -> None:
    assert Price.parse("1e2 ETH") == Price(amount=Decimal(100), currency="ETH")
    assert Price.parse("2.0ETH") == Price(amount=Decimal("2.0"), currency="ETH")
