"""Storage hierarchy package."""

from .handles import ObjectStore, OzoneBucket, OzoneVolume
from .models import (
    AclRights,
    AclType,
    BucketArgs,
    BucketRef,
    OzoneAcl,
    OzoneKey,
    OzoneQuota,
    QuotaUnit,
    StorageType,
    VolumeArgs,
)

__all__ = [
    "ObjectStore",
    "OzoneVolume",
    "OzoneBucket",
    "OzoneKey",
    "OzoneAcl",
    "AclType",
    "AclRights",
    "OzoneQuota",
    "QuotaUnit",
    "StorageType",
    "VolumeArgs",
    "BucketArgs",
    "BucketRef",
]
