"""Async page fetchers binding REST listing calls to the async cursor iterator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from .models import BucketInfo, BucketRef, OzoneKey, VolumeInfo
from .async_protocol import AsyncRestProtocol

VolumeT = TypeVar("VolumeT")
BucketT = TypeVar("BucketT")


class AsyncVolumePageFetcher(Generic[VolumeT]):
    """Lists volumes owned by ``parent`` (a user name)."""

    def __init__(
        self,
        protocol: AsyncRestProtocol,
        *,
        wrap: Callable[[VolumeInfo], VolumeT],
    ) -> None:
        self._protocol = protocol
        self._wrap = wrap

    async def fetch_page(
        self,
        parent: str,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> list[VolumeT]:
        infos = await self._protocol.list_volumes(parent, prefix, start_after, limit)
        return [self._wrap(info) for info in infos]


class AsyncBucketPageFetcher(Generic[BucketT]):
    """Lists buckets of the volume named ``parent``."""

    def __init__(
        self,
        protocol: AsyncRestProtocol,
        *,
        wrap: Callable[[BucketInfo], BucketT],
    ) -> None:
        self._protocol = protocol
        self._wrap = wrap

    async def fetch_page(
        self,
        parent: str,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> list[BucketT]:
        infos = await self._protocol.list_buckets(parent, prefix, start_after, limit)
        return [self._wrap(info) for info in infos]


class AsyncKeyPageFetcher:
    """Lists keys of the bucket identified by ``parent``."""

    def __init__(self, protocol: AsyncRestProtocol) -> None:
        self._protocol = protocol

    async def fetch_page(
        self,
        parent: BucketRef,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> list[OzoneKey]:
        return await self._protocol.list_keys(
            parent.volume_name,
            parent.bucket_name,
            prefix,
            start_after,
            limit,
        )


__all__ = [
    "AsyncVolumePageFetcher",
    "AsyncBucketPageFetcher",
    "AsyncKeyPageFetcher",
]
