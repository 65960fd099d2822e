"""Enrichment – content hash of the media behind ``mediaUrl``."""
from __future__ import annotations

import hashlib
from enum import Enum
from typing import Protocol, runtime_checkable

__all__ = ["MediaFetcher", "MediaHasher", "MediaKind", "Sha256MediaHasher", "resolve_media_hash"]


class MediaKind(str, Enum):
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    AUDIO = "AUDIO"


@runtime_checkable
class MediaFetcher(Protocol):
    async def fetch(self, url: str) -> bytes: ...


@runtime_checkable
class MediaHasher(Protocol):
    def hash(self, data: bytes, kind: MediaKind) -> str: ...


class Sha256MediaHasher:
    """SHA-256 hex digest of the raw bytes, whatever the kind."""

    def hash(self, data: bytes, kind: MediaKind) -> str:  # noqa: ARG002
        return hashlib.sha256(data).hexdigest()


async def resolve_media_hash(fetcher: MediaFetcher, hasher: MediaHasher, url: str) -> str:
    data = await fetcher.fetch(url)
    # TODO: derive the kind from the response content type once video/audio hashing lands.
    return hasher.hash(data, MediaKind.IMAGE)
