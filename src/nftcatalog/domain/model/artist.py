"""Artist aggregate: profile data plus the ordered listings it owns."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from nftcatalog.domain.model.primitives import ArtistId, artist_id_for

if TYPE_CHECKING:
    from collections.abc import Mapping

    from nftcatalog.domain.model.listing import Listing


def _freeze_links(links: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(links))


@dataclass(frozen=True, slots=True, kw_only=True)
class Artist:
    name: str
    bio: str = ""
    image: str | None = None
    social_links: Mapping[str, str] = field(default_factory=lambda: _freeze_links({}))
    listings: tuple[Listing, ...] = ()

    def __post_init__(self) -> None:
        # frozen: coerce caller-supplied containers into read-only ones
        object.__setattr__(self, "social_links", _freeze_links(self.social_links))
        object.__setattr__(self, "listings", tuple(self.listings))

    @property
    def id(self) -> ArtistId:
        return artist_id_for(self.name)
