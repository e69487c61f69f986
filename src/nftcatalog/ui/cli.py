# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from nftcatalog.app import build_catalog_engine
from nftcatalog.config import ConfigurationError, configure_logging, get_catalog_config
from nftcatalog.domain.errors import ArtistNotFoundError, CatalogError
from nftcatalog.domain.filtering import FilterCriteria
from nftcatalog.domain.model import Availability

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from nftcatalog.domain.catalog import CatalogQueryEngine
    from nftcatalog.domain.model import Listing

log = logging.getLogger(__name__)

EXIT_USAGE = 2
EXIT_LOAD = 1
EXIT_NOT_FOUND = 3


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse the NFT storefront catalog")
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path to the catalog JSON document (defaults to NFTCATALOG_CATALOG_PATH)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    artists = subparsers.add_parser("artists", help="List artists")
    artists.add_argument("--search", type=str, help="Case-insensitive name filter")

    artist = subparsers.add_parser("artist", help="Show one artist profile")
    artist.add_argument("artist_id", type=str, help="Artist identifier or display name")

    query = subparsers.add_parser("query", help="Filter listings")
    query.add_argument("--artist", type=str, help="Restrict the query to one artist")
    query.add_argument("--text", type=str, help="Substring of the listing title")
    query.add_argument("--genre", type=str, help="Exact genre (case-sensitive)")
    query.add_argument("--media-type", type=str, help="Exact media type, e.g. Audio")
    query.add_argument(
        "--max-price",
        type=str,
        help="Inclusive price ceiling; non-numeric values are ignored",
    )

    partition = subparsers.add_parser("partition", help="Split an artist's works")
    partition.add_argument("artist_id", type=str, help="Artist identifier or display name")

    facets = subparsers.add_parser("facets", help="Show the genres and media types on offer")
    facets.add_argument("--artist", type=str, help="Restrict facets to one artist")

    return parser.parse_args(list(argv))


def _format_listing(listing: Listing) -> str:
    match listing.availability:
        case Availability.AVAILABLE:
            badge = f"available: {listing.available}"
        case Availability.UNAVAILABLE:
            badge = "unavailable"
        case Availability.SOLD:
            badge = f"sold for {listing.sold_price}"
    return "\t".join(
        (listing.title, listing.genre or "-", listing.media_type, str(listing.price), badge)
    )


def _print_listings(listings: Sequence[Listing], *, empty: str) -> None:
    if not listings:
        print(empty)
        return
    for listing in listings:
        print(_format_listing(listing))


def _run_command(engine: CatalogQueryEngine, args: argparse.Namespace) -> None:
    if args.command == "artists":
        for artist in engine.search_artists(args.search):
            print(f"{artist.id}\t{artist.name}\t{len(artist.listings)} listing(s)")
    elif args.command == "artist":
        artist = engine.resolve_artist(args.artist_id)
        print(f"{artist.name} ({artist.id})")
        if artist.bio:
            print(artist.bio)
        for platform, url in artist.social_links.items():
            print(f"{platform}: {url}")
        print(f"{len(artist.listings)} listing(s)")
    elif args.command == "query":
        criteria = FilterCriteria(
            text=args.text,
            genre=args.genre,
            media_type=args.media_type,
            max_price=args.max_price,
        )
        if args.artist is None:
            result = engine.query(criteria)
        else:
            result = engine.query_artist(args.artist, criteria)
        _print_listings(result.listings, empty="No listings match.")
    elif args.command == "partition":
        partition = engine.partition(args.artist_id)
        print("Active:")
        _print_listings(partition.active, empty="(none)")
        print("Sold:")
        _print_listings(partition.sold, empty="(none)")
    elif args.command == "facets":
        facets = engine.facets(args.artist)
        print(f"genres: {', '.join(facets.genres)}")
        print(f"media types: {', '.join(facets.media_types)}")
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging(level=logging.WARNING)
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        config = get_catalog_config(path=parsed_args.catalog)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(EXIT_USAGE)
    configure_logging(level=config.log_level, force=True)

    try:
        engine = build_catalog_engine(config)
    except CatalogError:
        log.exception("Could not load catalog")
        sys.exit(EXIT_LOAD)

    try:
        _run_command(engine, parsed_args)
    except ArtistNotFoundError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(EXIT_NOT_FOUND)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
