"""Storage domain and wire models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from ..core.errors import OzoneValidationError


class AclType(str, Enum):
    USER = "user"
    GROUP = "group"
    WORLD = "world"


class AclRights(str, Enum):
    READ = "r"
    WRITE = "w"
    READ_WRITE = "rw"


@dataclass(slots=True, frozen=True)
class OzoneAcl:
    acl_type: AclType
    name: str
    rights: AclRights

    @classmethod
    def parse(cls, text: str) -> "OzoneAcl":
        """Parse ``type:name:rights``, e.g. ``user:alice:rw``."""

        parts = text.strip().split(":")
        if len(parts) != 3:
            raise OzoneValidationError(f"ACL must be type:name:rights, got {text!r}")
        raw_type, name, raw_rights = (part.strip() for part in parts)
        try:
            acl_type = AclType(raw_type.lower())
            rights = AclRights(raw_rights.lower())
        except ValueError as exc:
            raise OzoneValidationError(f"invalid ACL {text!r}") from exc
        if acl_type is not AclType.WORLD and name == "":
            raise OzoneValidationError("ACL name is required for user and group ACLs")
        return cls(acl_type=acl_type, name=name, rights=rights)

    def to_string(self) -> str:
        return f"{self.acl_type.value}:{self.name}:{self.rights.value}"


class QuotaUnit(str, Enum):
    BYTES = "BYTES"
    MB = "MB"
    GB = "GB"
    TB = "TB"


_UNIT_MULTIPLIERS: dict[QuotaUnit, int] = {
    QuotaUnit.BYTES: 1,
    QuotaUnit.MB: 1024**2,
    QuotaUnit.GB: 1024**3,
    QuotaUnit.TB: 1024**4,
}
_QUOTA_PATTERN = re.compile(r"^\s*(\d+)\s*([A-Za-z]*)\s*$")


@dataclass(slots=True, frozen=True)
class OzoneQuota:
    size: int
    unit: QuotaUnit = QuotaUnit.BYTES

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise OzoneValidationError("quota size must be int")
        if self.size < 0:
            raise OzoneValidationError("quota size must be >= 0")

    @property
    def size_in_bytes(self) -> int:
        return self.size * _UNIT_MULTIPLIERS[self.unit]

    @classmethod
    def parse(cls, text: str) -> "OzoneQuota":
        """Parse strings such as ``10GB``, ``512 MB`` or ``4096``."""

        match = _QUOTA_PATTERN.match(text)
        if match is None:
            raise OzoneValidationError(f"invalid quota {text!r}")
        size_text, unit_text = match.groups()
        unit_key = unit_text.upper() or QuotaUnit.BYTES.value
        if unit_key == "B":
            unit_key = QuotaUnit.BYTES.value
        try:
            unit = QuotaUnit(unit_key)
        except ValueError as exc:
            raise OzoneValidationError(f"invalid quota unit {unit_text!r}") from exc
        return cls(size=int(size_text), unit=unit)


class StorageType(str, Enum):
    DISK = "DISK"
    SSD = "SSD"
    ARCHIVE = "ARCHIVE"
    RAM_DISK = "RAM_DISK"


@dataclass(slots=True, frozen=True)
class VolumeArgs:
    admin: str | None = None
    owner: str | None = None
    quota: OzoneQuota | None = None
    acls: tuple[OzoneAcl, ...] | list[OzoneAcl] = ()

    def __post_init__(self) -> None:
        if isinstance(self.acls, tuple):
            return
        object.__setattr__(self, "acls", tuple(self.acls))


@dataclass(slots=True, frozen=True)
class BucketArgs:
    versioning: bool = False
    storage_type: StorageType = StorageType.DISK
    acls: tuple[OzoneAcl, ...] | list[OzoneAcl] = ()

    def __post_init__(self) -> None:
        if isinstance(self.acls, tuple):
            return
        object.__setattr__(self, "acls", tuple(self.acls))


@dataclass(slots=True, frozen=True)
class BucketRef:
    """Parent identifier for key listings."""

    volume_name: str
    bucket_name: str

    def __str__(self) -> str:
        return f"{self.volume_name}/{self.bucket_name}"


@dataclass(slots=True, frozen=True)
class VolumeInfo:
    name: str
    admin: str | None
    owner: str | None
    quota_in_bytes: int | None
    creation_time: str | None = None
    acls: tuple[OzoneAcl, ...] = field(default=())


@dataclass(slots=True, frozen=True)
class BucketInfo:
    volume_name: str
    name: str
    storage_type: StorageType | None
    versioning: bool
    creation_time: str | None = None
    acls: tuple[OzoneAcl, ...] = field(default=())


@dataclass(slots=True, frozen=True)
class OzoneKey:
    volume_name: str
    bucket_name: str
    name: str
    data_size: int
    creation_time: str | None = None
    modification_time: str | None = None


__all__ = [
    "AclType",
    "AclRights",
    "OzoneAcl",
    "QuotaUnit",
    "OzoneQuota",
    "StorageType",
    "VolumeArgs",
    "BucketArgs",
    "BucketRef",
    "VolumeInfo",
    "BucketInfo",
    "OzoneKey",
]
