"""Parsers from Ozone JSON payload into typed storage records."""

from __future__ import annotations

from ..core.errors import OzoneProtocolError, OzoneValidationError
from .models import BucketInfo, OzoneAcl, OzoneKey, StorageType, VolumeInfo

JsonObject = dict[str, object]


def _normalize_text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _required_text(item: JsonObject, key: str) -> str:
    text = _normalize_text(item.get(key))
    if not text:
        raise OzoneProtocolError(f"{key} is missing in Ozone response")
    return text


def _optional_int(item: JsonObject, key: str) -> int | None:
    raw = item.get(key)
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise OzoneProtocolError(f"{key} must be an integer")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().lstrip("-").isdigit():
        return int(raw.strip())
    raise OzoneProtocolError(f"{key} must be an integer")


def _as_list(payload: JsonObject, key: str) -> list[JsonObject]:
    raw = payload.get(key, [])
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise OzoneProtocolError(f"{key} must be a list")
    for item in raw:
        if not isinstance(item, dict):
            raise OzoneProtocolError(f"{key} element must be an object")
    return raw


def _parse_acls(item: JsonObject) -> tuple[OzoneAcl, ...]:
    raw = item.get("acls", [])
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise OzoneProtocolError("acls must be a list")
    try:
        return tuple(OzoneAcl.parse(str(entry)) for entry in raw)
    except OzoneValidationError as exc:
        raise OzoneProtocolError(f"invalid ACL in Ozone response: {exc}") from exc


def _parse_storage_type(value: object) -> StorageType | None:
    text = _normalize_text(value)
    if text is None:
        return None
    try:
        return StorageType(text.upper())
    except ValueError as exc:
        raise OzoneProtocolError(f"unknown storageType {text!r}") from exc


def _parse_versioning(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    text = str(value).strip().upper()
    if text in ("ENABLED", "TRUE"):
        return True
    if text in ("DISABLED", "FALSE", "NOT_DEFINED", ""):
        return False
    raise OzoneProtocolError(f"unknown versioning value {value!r}")


def parse_volume_info(item: JsonObject) -> VolumeInfo:
    return VolumeInfo(
        name=_required_text(item, "volumeName"),
        admin=_normalize_text(item.get("admin")),
        owner=_normalize_text(item.get("owner")),
        quota_in_bytes=_optional_int(item, "quota"),
        creation_time=_normalize_text(item.get("createdOn")),
        acls=_parse_acls(item),
    )


def parse_bucket_info(item: JsonObject) -> BucketInfo:
    return BucketInfo(
        volume_name=_required_text(item, "volumeName"),
        name=_required_text(item, "bucketName"),
        storage_type=_parse_storage_type(item.get("storageType")),
        versioning=_parse_versioning(item.get("versioning")),
        creation_time=_normalize_text(item.get("createdOn")),
        acls=_parse_acls(item),
    )


def parse_key(item: JsonObject) -> OzoneKey:
    return OzoneKey(
        volume_name=_required_text(item, "volumeName"),
        bucket_name=_required_text(item, "bucketName"),
        name=_required_text(item, "keyName"),
        data_size=_optional_int(item, "size") or 0,
        creation_time=_normalize_text(item.get("createdOn")),
        modification_time=_normalize_text(item.get("modifiedOn")),
    )


def parse_volume_list(payload: JsonObject) -> list[VolumeInfo]:
    return [parse_volume_info(item) for item in _as_list(payload, "volumes")]


def parse_bucket_list(payload: JsonObject) -> list[BucketInfo]:
    return [parse_bucket_info(item) for item in _as_list(payload, "buckets")]


def parse_key_list(payload: JsonObject) -> list[OzoneKey]:
    return [parse_key(item) for item in _as_list(payload, "keys")]


__all__ = [
    "parse_volume_info",
    "parse_bucket_info",
    "parse_key",
    "parse_volume_list",
    "parse_bucket_list",
    "parse_key_list",
]
