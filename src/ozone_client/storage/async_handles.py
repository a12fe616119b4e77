"""Async object store, volume and bucket handles."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import ListingConfig
from ..core.async_pagination import AsyncCursorIterator
from ..core.pagination import always_open
from .async_fetchers import (
    AsyncBucketPageFetcher,
    AsyncKeyPageFetcher,
    AsyncVolumePageFetcher,
)
from .models import (
    BucketArgs,
    BucketInfo,
    BucketRef,
    OzoneAcl,
    OzoneKey,
    OzoneQuota,
    StorageType,
    VolumeArgs,
    VolumeInfo,
)
from .names import verify_resource_name
from .async_protocol import AsyncRestProtocol
from .protocol_shared import require_owner

logger = logging.getLogger("ozone_client")


class AsyncOzoneBucket:
    """A bucket inside a volume."""

    def __init__(
        self,
        protocol: AsyncRestProtocol,
        info: BucketInfo,
        *,
        listing: ListingConfig,
        ensure_open: Callable[[], None] | None = None,
    ) -> None:
        self._protocol = protocol
        self._ensure_open = ensure_open or always_open
        self._info = info
        self._list_cache_size = listing.list_cache_size

    @property
    def volume_name(self) -> str:
        return self._info.volume_name

    @property
    def name(self) -> str:
        return self._info.name

    @property
    def storage_type(self) -> StorageType | None:
        return self._info.storage_type

    @property
    def versioning(self) -> bool:
        return self._info.versioning

    @property
    def creation_time(self) -> str | None:
        return self._info.creation_time

    @property
    def acls(self) -> tuple[OzoneAcl, ...]:
        return self._info.acls

    @property
    def list_cache_size(self) -> int:
        return self._list_cache_size

    async def list_keys(
        self,
        prefix: str | None = None,
        *,
        start_after: str | None = None,
    ) -> AsyncCursorIterator[BucketRef, OzoneKey]:
        """Iterate over every key in the bucket, optionally filtered by prefix."""

        return await AsyncCursorIterator.open(
            AsyncKeyPageFetcher(self._protocol),
            BucketRef(self.volume_name, self.name),
            prefix,
            self._list_cache_size,
            start_after=start_after,
            ensure_open=self._ensure_open,
        )

    def __repr__(self) -> str:
        return f"AsyncOzoneBucket(volume_name={self.volume_name!r}, name={self.name!r})"


class AsyncOzoneVolume:
    """A volume and the buckets it contains."""

    def __init__(
        self,
        protocol: AsyncRestProtocol,
        info: VolumeInfo,
        *,
        listing: ListingConfig,
        ensure_open: Callable[[], None] | None = None,
    ) -> None:
        self._protocol = protocol
        self._ensure_open = ensure_open or always_open
        self._listing = listing
        self._list_cache_size = listing.list_cache_size
        self._name = info.name
        self._admin = info.admin
        self._owner = info.owner
        self._quota_in_bytes = info.quota_in_bytes
        self._creation_time = info.creation_time
        self._acls = info.acls

    @property
    def name(self) -> str:
        return self._name

    @property
    def admin(self) -> str | None:
        return self._admin

    @property
    def owner(self) -> str | None:
        return self._owner

    @property
    def quota_in_bytes(self) -> int | None:
        return self._quota_in_bytes

    @property
    def creation_time(self) -> str | None:
        return self._creation_time

    @property
    def acls(self) -> tuple[OzoneAcl, ...]:
        return self._acls

    @property
    def list_cache_size(self) -> int:
        return self._list_cache_size

    async def set_owner(self, owner: str) -> None:
        self._ensure_open()
        require_owner(owner)
        await self._protocol.set_volume_owner(self._name, owner)
        self._owner = owner

    async def set_quota(self, quota: OzoneQuota) -> None:
        self._ensure_open()
        await self._protocol.set_volume_quota(self._name, quota)
        self._quota_in_bytes = quota.size_in_bytes

    async def create_bucket(self, bucket_name: str, args: BucketArgs | None = None) -> None:
        self._ensure_open()
        verify_resource_name(bucket_name)
        await self._protocol.create_bucket(self._name, bucket_name, args)
        logger.info("bucket created volume=%s bucket=%s", self._name, bucket_name)

    async def get_bucket(self, bucket_name: str) -> AsyncOzoneBucket:
        self._ensure_open()
        verify_resource_name(bucket_name)
        info = await self._protocol.get_bucket_details(self._name, bucket_name)
        return self._wrap_bucket(info)

    async def delete_bucket(self, bucket_name: str) -> None:
        self._ensure_open()
        verify_resource_name(bucket_name)
        await self._protocol.delete_bucket(self._name, bucket_name)
        logger.info("bucket deleted volume=%s bucket=%s", self._name, bucket_name)

    async def list_buckets(
        self,
        prefix: str | None = None,
        *,
        start_after: str | None = None,
    ) -> AsyncCursorIterator[str, AsyncOzoneBucket]:
        """Iterate over every bucket in the volume.

        Returns all buckets when ``prefix`` is ``None``. Each call builds a
        fresh iterator; the first page is fetched before this returns.
        """

        return await AsyncCursorIterator.open(
            AsyncBucketPageFetcher(self._protocol, wrap=self._wrap_bucket),
            self._name,
            prefix,
            self._list_cache_size,
            start_after=start_after,
            ensure_open=self._ensure_open,
        )

    def _wrap_bucket(self, info: BucketInfo) -> AsyncOzoneBucket:
        return AsyncOzoneBucket(
            self._protocol,
            info,
            listing=self._listing,
            ensure_open=self._ensure_open,
        )

    def __repr__(self) -> str:
        return f"AsyncOzoneVolume(name={self._name!r}, owner={self._owner!r})"


class AsyncObjectStore:
    """Root of the volume/bucket/key hierarchy."""

    def __init__(
        self,
        protocol: AsyncRestProtocol,
        *,
        listing: ListingConfig,
        ensure_open: Callable[[], None] | None = None,
    ) -> None:
        self._protocol = protocol
        self._ensure_open = ensure_open or always_open
        self._listing = listing
        self._list_cache_size = listing.list_cache_size

    @property
    def list_cache_size(self) -> int:
        return self._list_cache_size

    async def create_volume(self, volume_name: str, args: VolumeArgs | None = None) -> None:
        self._ensure_open()
        verify_resource_name(volume_name)
        await self._protocol.create_volume(volume_name, args)
        logger.info("volume created volume=%s", volume_name)

    async def get_volume(self, volume_name: str) -> AsyncOzoneVolume:
        self._ensure_open()
        verify_resource_name(volume_name)
        info = await self._protocol.get_volume_details(volume_name)
        return self._wrap_volume(info)

    async def delete_volume(self, volume_name: str) -> None:
        self._ensure_open()
        verify_resource_name(volume_name)
        await self._protocol.delete_volume(volume_name)
        logger.info("volume deleted volume=%s", volume_name)

    async def list_volumes(
        self,
        prefix: str | None = None,
        *,
        user: str | None = None,
        start_after: str | None = None,
    ) -> AsyncCursorIterator[str, AsyncOzoneVolume]:
        """Iterate over volumes owned by ``user`` (default: the configured user)."""

        return await AsyncCursorIterator.open(
            AsyncVolumePageFetcher(self._protocol, wrap=self._wrap_volume),
            user or self._protocol.user_name,
            prefix,
            self._list_cache_size,
            start_after=start_after,
            ensure_open=self._ensure_open,
        )

    def _wrap_volume(self, info: VolumeInfo) -> AsyncOzoneVolume:
        return AsyncOzoneVolume(
            self._protocol,
            info,
            listing=self._listing,
            ensure_open=self._ensure_open,
        )


__all__ = [
    "AsyncObjectStore",
    "AsyncOzoneVolume",
    "AsyncOzoneBucket",
]
