"""Shared request preparation utilities for sync/async protocols."""

from __future__ import annotations

from urllib.parse import quote

from ..core.errors import OzoneValidationError
from ..core.pagination import validate_page_size
from .models import BucketArgs, VolumeArgs
from .names import verify_resource_name


def _path_segment(name: str) -> str:
    return quote(name, safe="")


def volume_endpoint(volume_name: str) -> str:
    return "/" + _path_segment(verify_resource_name(volume_name))


def bucket_endpoint(volume_name: str, bucket_name: str) -> str:
    return volume_endpoint(volume_name) + "/" + _path_segment(verify_resource_name(bucket_name))


def build_list_params(
    info: str,
    *,
    prefix: str | None,
    prev_key: str | None,
    max_keys: int,
) -> dict[str, str]:
    try:
        validate_page_size(max_keys)
    except (TypeError, ValueError) as exc:
        raise OzoneValidationError(f"max-keys is invalid: {exc}") from exc
    params = {"info": info, "max-keys": str(max_keys)}
    if prefix:
        params["prefix"] = prefix
    if prev_key is not None:
        params["prev-key"] = prev_key
    return params


def build_list_volume_params(
    user: str,
    *,
    prefix: str | None,
    prev_key: str | None,
    max_keys: int,
) -> dict[str, str]:
    if not user or not user.strip():
        raise OzoneValidationError("user is required to list volumes")
    params = build_list_params(
        "list-volume",
        prefix=prefix,
        prev_key=prev_key,
        max_keys=max_keys,
    )
    params["user"] = user
    return params


def build_volume_body(args: VolumeArgs | None, *, default_owner: str) -> dict[str, object]:
    resolved = args or VolumeArgs()
    body: dict[str, object] = {
        "owner": resolved.owner or default_owner,
        "admin": resolved.admin or default_owner,
        "acls": [acl.to_string() for acl in resolved.acls],
    }
    if resolved.quota is not None:
        body["quota"] = resolved.quota.size_in_bytes
    return body


def build_bucket_body(args: BucketArgs | None) -> dict[str, object]:
    resolved = args or BucketArgs()
    return {
        "versioning": "ENABLED" if resolved.versioning else "DISABLED",
        "storageType": resolved.storage_type.value,
        "acls": [acl.to_string() for acl in resolved.acls],
    }


def require_owner(owner: str | None) -> str:
    if owner is None or not owner.strip():
        raise OzoneValidationError("owner is required")
    return owner


__all__ = [
    "volume_endpoint",
    "bucket_endpoint",
    "build_list_params",
    "build_list_volume_params",
    "build_volume_body",
    "build_bucket_body",
    "require_owner",
]
