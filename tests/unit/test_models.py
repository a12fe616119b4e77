from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from ozone_client.core.errors import OzoneValidationError
from ozone_client.storage.models import (
    AclRights,
    AclType,
    BucketArgs,
    BucketRef,
    OzoneAcl,
    OzoneKey,
    OzoneQuota,
    QuotaUnit,
    VolumeArgs,
)


@pytest.mark.parametrize(
    ("text", "size", "unit", "size_in_bytes"),
    [
        ("4096", 4096, QuotaUnit.BYTES, 4096),
        ("4096B", 4096, QuotaUnit.BYTES, 4096),
        ("512 MB", 512, QuotaUnit.MB, 512 * 1024**2),
        ("10gb", 10, QuotaUnit.GB, 10 * 1024**3),
        ("2TB", 2, QuotaUnit.TB, 2 * 1024**4),
    ],
)
def test_quota_parse(text: str, size: int, unit: QuotaUnit, size_in_bytes: int):
    quota = OzoneQuota.parse(text)
    assert quota.size == size
    assert quota.unit is unit
    assert quota.size_in_bytes == size_in_bytes


@pytest.mark.parametrize("text", ["", "GB", "-1GB", "10PB", "1.5GB"])
def test_quota_parse_rejects_invalid_text(text: str):
    with pytest.raises(OzoneValidationError):
        OzoneQuota.parse(text)


def test_quota_rejects_negative_size():
    with pytest.raises(OzoneValidationError):
        OzoneQuota(size=-1)


def test_acl_parse_and_render():
    acl = OzoneAcl.parse("user:alice:rw")
    assert acl == OzoneAcl(AclType.USER, "alice", AclRights.READ_WRITE)
    assert acl.to_string() == "user:alice:rw"
    assert OzoneAcl.parse("WORLD::r").acl_type is AclType.WORLD


@pytest.mark.parametrize("text", ["user:alice", "robot:alice:rw", "user:alice:x", "group::rw"])
def test_acl_parse_rejects_invalid_text(text: str):
    with pytest.raises(OzoneValidationError):
        OzoneAcl.parse(text)


def test_args_normalize_acl_lists_to_tuples():
    acls = [OzoneAcl.parse("user:alice:rw")]
    assert isinstance(VolumeArgs(acls=acls).acls, tuple)
    assert isinstance(BucketArgs(acls=acls).acls, tuple)


def test_key_and_ref_are_immutable():
    key = OzoneKey(volume_name="vol", bucket_name="bkt", name="k1", data_size=1)
    with pytest.raises(FrozenInstanceError):
        key.name = "k2"  # type: ignore[misc]
    assert str(BucketRef("vol", "bkt")) == "vol/bkt"
