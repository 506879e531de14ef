"""Provider-neutral image models."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple


class Provider(str, Enum):
    """Image provider; also the cache namespace."""

    FLICKR = "flickr"
    UNSPLASH = "unsplash"


class SizeVariant(str, Enum):
    """Resolution tiers an image resource may expose."""

    THUMBNAIL = "thumbnail"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"
    ORIGINAL = "original"

    @classmethod
    def parse(cls, text: str) -> "SizeVariant":
        """Parse a size tag such as "medium", "EXTRA_LARGE" or "extraLarge"."""
        if isinstance(text, cls):
            return text
        raw = str(text or "").strip()
        snake = "".join("_" + ch.lower() if ch.isupper() else ch for ch in raw).lstrip("_")
        for candidate in (raw.lower(), snake.lower()):
            for member in cls:
                if candidate in (member.value, member.name.lower()):
                    return member
        raise ValueError(f"Unknown image size: {text!r}")


@dataclass
class ImageArtifact:
    """One size variant of an image: its source URL and fetched bytes."""

    size: SizeVariant
    url: str | None = None
    data: bytes | None = None


_METADATA_FIELDS = ("title", "author", "date", "description", "location")


@dataclass
class ImageMetadata:
    """Descriptive metadata; every field is optional and set independently."""

    title: str | None = None
    author: str | None = None
    date: str | None = None
    description: str | None = None
    location: str | None = None
    cached: bool = False

    def to_dict(self) -> Dict[str, str]:
        """Serialize the populated fields for the cache store."""
        return {name: getattr(self, name) for name in _METADATA_FIELDS if getattr(self, name) is not None}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ImageMetadata":
        values = {name: str(raw[name]) for name in _METADATA_FIELDS if raw.get(name) is not None}
        return cls(cached=True, **values)

    def update(self, other: "ImageMetadata") -> None:
        """Copy every field of another record onto this one."""
        for name in _METADATA_FIELDS:
            setattr(self, name, getattr(other, name))
        self.cached = other.cached


@dataclass
class ImageRecord:
    """State shared by every provider variant: identity, artifacts and metadata."""

    provider: Provider
    identifier: str
    metadata: ImageMetadata = field(default_factory=ImageMetadata)
    artifacts: Dict[SizeVariant, ImageArtifact] = field(default_factory=dict)
    info_lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        for size in SizeVariant:
            self.artifacts.setdefault(size, ImageArtifact(size=size))

    def artifact(self, size: SizeVariant) -> ImageArtifact:
        return self.artifacts[size]


@dataclass
class NormalizedInfo:
    """Normalizer output: metadata plus coordinates still awaiting a place name."""

    metadata: ImageMetadata
    coordinates: Tuple[str, str] | None = None
