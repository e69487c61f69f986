"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class MediaType(StrEnum):
    AUDIO = "Audio"
    VIDEO = "Video"


class Availability(StrEnum):
    """What the storefront badge shows for a listing."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    SOLD = "sold"
