"""Page fetchers binding REST listing calls to the cursor iterator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from .models import BucketInfo, BucketRef, OzoneKey, VolumeInfo
from .protocol import RestProtocol

VolumeT = TypeVar("VolumeT")
BucketT = TypeVar("BucketT")


class VolumePageFetcher(Generic[VolumeT]):
    """Lists volumes owned by ``parent`` (a user name)."""

    def __init__(
        self,
        protocol: RestProtocol,
        *,
        wrap: Callable[[VolumeInfo], VolumeT],
    ) -> None:
        self._protocol = protocol
        self._wrap = wrap

    def fetch_page(
        self,
        parent: str,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> list[VolumeT]:
        infos = self._protocol.list_volumes(parent, prefix, start_after, limit)
        return [self._wrap(info) for info in infos]


class BucketPageFetcher(Generic[BucketT]):
    """Lists buckets of the volume named ``parent``."""

    def __init__(
        self,
        protocol: RestProtocol,
        *,
        wrap: Callable[[BucketInfo], BucketT],
    ) -> None:
        self._protocol = protocol
        self._wrap = wrap

    def fetch_page(
        self,
        parent: str,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> list[BucketT]:
        infos = self._protocol.list_buckets(parent, prefix, start_after, limit)
        return [self._wrap(info) for info in infos]


class KeyPageFetcher:
    """Lists keys of the bucket identified by ``parent``."""

    def __init__(self, protocol: RestProtocol) -> None:
        self._protocol = protocol

    def fetch_page(
        self,
        parent: BucketRef,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> list[OzoneKey]:
        return self._protocol.list_keys(
            parent.volume_name,
            parent.bucket_name,
            prefix,
            start_after,
            limit,
        )


__all__ = [
    "VolumePageFetcher",
    "BucketPageFetcher",
    "KeyPageFetcher",
]
