"""Domain error taxonomy."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog domain errors."""


class ArtistNotFoundError(CatalogError, LookupError):
    """Raised when an artist identifier does not resolve to a catalog entry."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Artist not found: {identifier!r}")
        self.identifier = identifier


class DuplicateArtistError(CatalogError):
    """Raised when two artists normalize to the same identifier."""

    def __init__(self, identifier: str, names: tuple[str, str]) -> None:
        first, second = names
        super().__init__(
            f"Artists {first!r} and {second!r} share the identifier {identifier!r}"
        )
        self.identifier = identifier
        self.names = names


class InvalidCriteriaError(CatalogError, ValueError):
    """Raised by strict parsers when a filter value is malformed."""


class InvalidListingError(CatalogError, ValueError):
    """Raised when a listing violates its lifecycle invariants."""
