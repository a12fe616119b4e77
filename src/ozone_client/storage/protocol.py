"""Single-request executor for the Ozone REST gateway."""

from __future__ import annotations

from ..core.transport import SyncTransport
from .models import BucketArgs, BucketInfo, OzoneKey, OzoneQuota, VolumeArgs, VolumeInfo
from .parser import (
    parse_bucket_info,
    parse_bucket_list,
    parse_key_list,
    parse_volume_info,
    parse_volume_list,
)
from .protocol_shared import (
    bucket_endpoint,
    build_bucket_body,
    build_list_params,
    build_list_volume_params,
    build_volume_body,
    require_owner,
    volume_endpoint,
)


class RestProtocol:
    """One method per REST call; each issues exactly one request."""

    def __init__(self, transport: SyncTransport, *, user_name: str) -> None:
        self._transport = transport
        self._user_name = user_name

    @property
    def user_name(self) -> str:
        return self._user_name

    def close(self) -> None:
        self._transport.close()

    # Volume operations

    def create_volume(self, volume_name: str, args: VolumeArgs | None = None) -> None:
        self._transport.request(
            "POST",
            volume_endpoint(volume_name),
            body=build_volume_body(args, default_owner=self._user_name),
        )

    def get_volume_details(self, volume_name: str) -> VolumeInfo:
        payload = self._transport.request(
            "GET",
            volume_endpoint(volume_name),
            params={"info": "volume-info"},
        )
        return parse_volume_info(payload)

    def set_volume_owner(self, volume_name: str, owner: str) -> None:
        self._transport.request(
            "PUT",
            volume_endpoint(volume_name),
            body={"owner": require_owner(owner)},
        )

    def set_volume_quota(self, volume_name: str, quota: OzoneQuota) -> None:
        self._transport.request(
            "PUT",
            volume_endpoint(volume_name),
            body={"quota": quota.size_in_bytes},
        )

    def delete_volume(self, volume_name: str) -> None:
        self._transport.request("DELETE", volume_endpoint(volume_name))

    def list_volumes(
        self,
        user: str,
        prefix: str | None,
        prev_volume: str | None,
        max_list_result: int,
    ) -> list[VolumeInfo]:
        payload = self._transport.request(
            "GET",
            "/",
            params=build_list_volume_params(
                user,
                prefix=prefix,
                prev_key=prev_volume,
                max_keys=max_list_result,
            ),
        )
        return parse_volume_list(payload)

    # Bucket operations

    def create_bucket(
        self,
        volume_name: str,
        bucket_name: str,
        args: BucketArgs | None = None,
    ) -> None:
        self._transport.request(
            "POST",
            bucket_endpoint(volume_name, bucket_name),
            body=build_bucket_body(args),
        )

    def get_bucket_details(self, volume_name: str, bucket_name: str) -> BucketInfo:
        payload = self._transport.request(
            "GET",
            bucket_endpoint(volume_name, bucket_name),
            params={"info": "bucket-info"},
        )
        return parse_bucket_info(payload)

    def delete_bucket(self, volume_name: str, bucket_name: str) -> None:
        self._transport.request("DELETE", bucket_endpoint(volume_name, bucket_name))

    def list_buckets(
        self,
        volume_name: str,
        prefix: str | None,
        prev_bucket: str | None,
        max_list_result: int,
    ) -> list[BucketInfo]:
        payload = self._transport.request(
            "GET",
            volume_endpoint(volume_name),
            params=build_list_params(
                "list-bucket",
                prefix=prefix,
                prev_key=prev_bucket,
                max_keys=max_list_result,
            ),
        )
        return parse_bucket_list(payload)

    # Key operations

    def list_keys(
        self,
        volume_name: str,
        bucket_name: str,
        prefix: str | None,
        prev_key: str | None,
        max_list_result: int,
    ) -> list[OzoneKey]:
        payload = self._transport.request(
            "GET",
            bucket_endpoint(volume_name, bucket_name),
            params=build_list_params(
                "list-key",
                prefix=prefix,
                prev_key=prev_key,
                max_keys=max_list_result,
            ),
        )
        return parse_key_list(payload)


__all__ = [
    "RestProtocol",
]
