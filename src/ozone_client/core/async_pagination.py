"""Async cursor-continued listing iteration over a paged fetch endpoint."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from typing import Generic, Protocol

from .errors import OzoneIterationError
from .pagination import (
    ChildT,
    ChildT_co,
    ParentT,
    ParentT_contra,
    always_open,
    validate_page_size,
)

logger = logging.getLogger("ozone_client")


class AsyncPageFetcher(Protocol[ParentT_contra, ChildT_co]):
    async def fetch_page(
        self,
        parent: ParentT_contra,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> Sequence[ChildT_co]: ...


class AsyncCallablePageFetcher(Generic[ParentT, ChildT]):
    """Adapts a plain four-argument coroutine function to ``AsyncPageFetcher``."""

    def __init__(
        self,
        fetch: Callable[[ParentT, str | None, str | None, int], Awaitable[Sequence[ChildT]]],
    ) -> None:
        self._fetch = fetch

    async def fetch_page(
        self,
        parent: ParentT,
        prefix: str | None,
        start_after: str | None,
        limit: int,
    ) -> Sequence[ChildT]:
        return await self._fetch(parent, prefix, start_after, limit)


class AsyncCursorIterator(Generic[ParentT, ChildT]):
    """Async counterpart of ``CursorIterator``.

    Build it with ``await AsyncCursorIterator.open(...)``, which performs the
    eager first fetch.
    """

    def __init__(
        self,
        fetcher: AsyncPageFetcher[ParentT, ChildT],
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
        self._primed = False
        self._ensure_open = ensure_open or always_open

    @classmethod
    async def open(
        cls,
        fetcher: AsyncPageFetcher[ParentT, ChildT],
        parent: ParentT,
        prefix: str | None,
        page_size: int,
        *,
        start_after: str | None = None,
        ensure_open: Callable[[], None] | None = None,
    ) -> "AsyncCursorIterator[ParentT, ChildT]":
        iterator = cls(
            fetcher,
            parent,
            prefix,
            page_size,
            start_after=start_after,
            ensure_open=ensure_open,
        )
        await iterator._prime()
        return iterator

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
        return self._cursor

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def fetch_count(self) -> int:
        return self._fetch_count

    def __aiter__(self) -> AsyncIterator[ChildT]:
        return self

    async def __anext__(self) -> ChildT:
        if not await self.has_next():
            raise StopAsyncIteration
        item = self._page[self._position]
        self._position += 1
        self._cursor = item.name
        return item

    async def has_next(self) -> bool:
        self._ensure_open()
        if not self._primed:
            await self._prime()
        if self._position < len(self._page):
            return True
        if self._exhausted:
            return False
        if not self._last_page_full:
            self._mark_exhausted("short page")
            return False
        self._load_page(await self._fetch(self._cursor))
        return not self._exhausted

    async def _prime(self) -> None:
        if self._primed:
            return
        self._ensure_open()
        page = await self._fetch(self._cursor)
        self._primed = True
        self._load_page(page)

    async def _fetch(self, start_after: str | None) -> Sequence[ChildT]:
        try:
            page = await self._fetcher.fetch_page(
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
    "AsyncPageFetcher",
    "AsyncCallablePageFetcher",
    "AsyncCursorIterator",
]
