from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.shared.fetchers import SortedListingFetcher  # noqa: E402


@pytest.fixture
def bucket_names() -> list[str]:
    return [f"bucket-{index:03d}" for index in range(25)]


@pytest.fixture
def sorted_fetcher(bucket_names: list[str]) -> SortedListingFetcher:
    return SortedListingFetcher(bucket_names)
