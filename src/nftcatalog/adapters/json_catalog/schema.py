"""Pydantic models for catalog documents.

The document mirrors the storefront's artist records: an artist carries either a
single ``works`` list or the ``currentWorks`` / ``soldWorks`` pair, and every work
has exactly one of ``available`` or ``soldFor``.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator

from nftcatalog.domain.model import MediaType  # noqa: TC001


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, str_strip_whitespace=True)


class WorkRecord(CatalogBaseModel):
    title: str = Field(min_length=1)
    media_type: MediaType = Field(alias="mediaType")
    genre: str | None = None
    price: str | float | None = None
    available: NonNegativeInt | None = None
    sold_for: str | float | None = Field(default=None, alias="soldFor")
    image: str | None = None

    @model_validator(mode="after")
    def validate_state(self) -> Self:
        if (self.available is None) == (self.sold_for is None):
            raise ValueError("work needs exactly one of 'available' or 'soldFor'")
        if self.price is None and self.sold_for is None:
            raise ValueError("work on sale needs a 'price'")
        return self


class ArtistRecord(CatalogBaseModel):
    name: str = Field(min_length=1)
    bio: str = ""
    image: str | None = None
    social_links: dict[str, str] = Field(default_factory=dict, alias="socialLinks")
    works: list[WorkRecord] = Field(default_factory=list["WorkRecord"])
    current_works: list[WorkRecord] = Field(
        default_factory=list["WorkRecord"], alias="currentWorks"
    )
    sold_works: list[WorkRecord] = Field(default_factory=list["WorkRecord"], alias="soldWorks")

    @model_validator(mode="after")
    def validate_work_groups(self) -> Self:
        if self.works and (self.current_works or self.sold_works):
            raise ValueError("use either 'works' or 'currentWorks'/'soldWorks', not both")
        if any(work.sold_for is not None for work in self.current_works):
            raise ValueError("'currentWorks' entries cannot carry 'soldFor'")
        if any(work.sold_for is None for work in self.sold_works):
            raise ValueError("'soldWorks' entries need 'soldFor'")
        return self

    @property
    def ordered_works(self) -> list[WorkRecord]:
        if self.works:
            return list(self.works)
        return [*self.current_works, *self.sold_works]


class CatalogDocument(CatalogBaseModel):
    artists: list[ArtistRecord] = Field(default_factory=list["ArtistRecord"])
