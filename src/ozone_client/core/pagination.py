"""Cursor-continued listing iteration over a paged fetch endpoint."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Generic, Protocol, TypeVar

from .errors import OzoneIterationError

logger = logging.getLogger("ozone_client")


class Named(Protocol):
    @property
    def name(self) -> str: ...


ChildT = TypeVar("ChildT", bound=Named)
ChildT_co = TypeVar("ChildT_co", bound=Named, covariant=True)
ParentT = TypeVar("ParentT")
ParentT_contra = TypeVar("ParentT_contra", contravariant=True)


class PageFetcher(Protocol[ParentT_contra, ChildT_co]):
    """Returns one ordered page of children of ``parent``.

    ``start_after`` of ``None`` means the beginning of the (optionally
    prefix-filtered) ordering; otherwise only names strictly greater than it
    are returned. The result holds at most ``limit`` entities.
    """

    def fetch_page(
        self,
        parent: ParentT_contra,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> Sequence[ChildT_co]: ...


class CallablePageFetcher(Generic[ParentT, ChildT]):
    """Adapts a plain four-argument function to ``PageFetcher``."""

    def __init__(
        self,
        fetch: Callable[[ParentT, str | None, str | None, int], Sequence[ChildT]],
    ) -> None:
        self._fetch = fetch

    def fetch_page(
        self,
        parent: ParentT,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> Sequence[ChildT]:
        return self._fetch(parent, prefix, start_after, limit)


def always_open() -> None:
    """Open-check used when no client owns the iterator."""


def validate_page_size(page_size: int) -> int:
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise TypeError("page_size must be int")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return page_size


class CursorIterator(Generic[ParentT, ChildT]):
    """Lazy, forward-only sequence of every child of one parent.

    The first page is fetched while the iterator is constructed. Later pages
    are fetched only when the buffered page is drained and the previous page
    came back full; the name of the last yielded child is sent as
    ``start_after``. A page shorter than ``page_size`` ends the listing
    without another call, and an empty page ends it as well. When the real
    last page happens to be exactly full, one more call returning an empty
    page is needed to see the end.

    ``ensure_open`` runs before construction and before every step; a client
    passes its closed-check so that a closed client stops its iterators.

    Not safe for concurrent use. Restart by building a new iterator.
    """

    def __init__(
        self,
        fetcher: PageFetcher[ParentT, ChildT],
        parent: ParentT,
        prefix: str | None,
        page_size: int,
        *,
        start_after: str | None = None,
        ensure_open: Callable[[], None] | None = None,
    ) -> None:
        if parent is None:
            raise ValueError("parent must not be None")
        self._fetcher = fetcher
        self._parent = parent
        self._prefix = prefix
        self._page_size = validate_page_size(page_size)
        self._cursor = start_after
        self._page: Sequence[ChildT] = ()
        self._position = 0
        self._last_page_full = False
        self._exhausted = False
        self._fetch_count = 0
        self._ensure_open = ensure_open or always_open

        self._ensure_open()
        self._load_page(self._fetch(start_after))

    @property
    def parent(self) -> ParentT:
        return self._parent

    @property
    def prefix(self) -> str | None:
        return self._prefix

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def cursor(self) -> str | None:
        """Name of the last yielded child (or the initial ``start_after``)."""
        return self._cursor

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def fetch_count(self) -> int:
        return self._fetch_count

    def __iter__(self) -> Iterator[ChildT]:
        return self

    def __next__(self) -> ChildT:
        if not self.has_next():
            raise StopIteration
        item = self._page[self._position]
        self._position += 1
        self._cursor = item.name
        return item

    def next(self) -> ChildT:
        return self.__next__()

    def has_next(self) -> bool:
        self._ensure_open()
        if self._position < len(self._page):
            return True
        if self._exhausted:
            return False
        if not self._last_page_full:
            self._mark_exhausted("short page")
            return False
        self._load_page(self._fetch(self._cursor))
        return not self._exhausted

    def _fetch(self, start_after: str | None) -> Sequence[ChildT]:
        try:
            page = self._fetcher.fetch_page(
                self._parent,
                self._prefix,
                start_after,
                self._page_size,
            )
        except Exception as exc:
            logger.warning(
                "listing fetch failed parent=%s start_after=%s error=%s",
                self._parent,
                start_after,
                exc.__class__.__name__,
            )
            raise OzoneIterationError(
                "listing page fetch failed",
                source=exc,
                parent=self._parent,
                start_after=start_after,
            ) from exc
        self._fetch_count += 1
        logger.debug(
            "listing page fetched parent=%s prefix=%s start_after=%s limit=%s returned=%s",
            self._parent,
            self._prefix,
            start_after,
            self._page_size,
            len(page),
        )
        return page

    def _load_page(self, page: Sequence[ChildT]) -> None:
        if len(page) == 0:
            self._page = ()
            self._position = 0
            self._mark_exhausted("empty page")
            return
        self._page = page
        self._position = 0
        self._last_page_full = len(page) >= self._page_size

    def _mark_exhausted(self, reason: str) -> None:
        self._exhausted = True
        self._page = ()
        self._position = 0
        logger.debug(
            "listing exhausted parent=%s reason=%s fetches=%s",
            self._parent,
            reason,
            self._fetch_count,
        )


__all__ = [
    "Named",
    "PageFetcher",
    "CallablePageFetcher",
    "CursorIterator",
    "always_open",
    "validate_page_size",
]
