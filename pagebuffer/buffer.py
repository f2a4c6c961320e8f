"""A buffer pool that caches pages of a page file in a fixed set of frames."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

from .errors import (
    NoFreeBufferError,
    PageNotFoundError,
    PinnedPagesError,
    PoolNotInitError,
    ReadNonExistingPageError,
)
from .replacement import NO_PAGE, Frame, ReplacementStrategy, VictimSelector
from .storage import PageFile


@dataclass
class PageHandle:
    """A pinned page: its number and the frame memory that holds it."""

    page_num: int = NO_PAGE
    data: bytearray = field(default_factory=bytearray)


class BufferPool:
    """Keeps up to ``num_pages`` pages of a page file in memory."""

    def __init__(
        self,
        page_file: str | os.PathLike,
        num_pages: int,
        strategy: ReplacementStrategy = ReplacementStrategy.FIFO,
        strat_data: Any = None,
    ) -> None:
        self._file: PageFile | None = PageFile(page_file)
        self.page_file = page_file
        self.num_pages = num_pages
        self.strategy = ReplacementStrategy(strategy)
        self.strat_data = strat_data
        self._frames = [Frame() for _ in range(num_pages)]
        self._selector = VictimSelector(self.strategy)
        self._access_counter = 0
        self._read_io = 0
        self._write_io = 0

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def _require_open(self) -> PageFile:
        if self._file is None:
            raise PoolNotInitError("buffer pool is not initialised")
        return self._file

    def find_frame(self, page_num: int) -> int | None:
        """Return the index of the frame holding ``page_num``, or None."""
        self._require_open()
        if page_num == NO_PAGE:
            return None
        return next(
            (i for i, frame in enumerate(self._frames) if frame.page_num == page_num),
            None,
        )

    def _frame_of(self, page: PageHandle) -> Frame:
        index = self.find_frame(page.page_num)
        if index is None:
            raise PageNotFoundError(f"page {page.page_num} is not in the buffer pool")
        return self._frames[index]

    def _write_back(self, file: PageFile, frame: Frame) -> None:
        file.write_block(frame.page_num, frame.data)
        frame.dirty = False
        self._write_io += 1

    def pin_page(self, page_num: int) -> PageHandle:
        """Bring ``page_num`` into the pool, pin it and return its handle."""
        file = self._require_open()
        self._access_counter += 1
        tick = self._access_counter

        index = self.find_frame(page_num)
        if index is not None:
            frame = self._frames[index]
            frame.fix_count += 1
            self._selector.record_access(frame, tick)
            return PageHandle(page_num, frame.data)

        index = self._selector.select(self._frames)
        if index is None:
            raise NoFreeBufferError("every frame of the buffer pool is pinned")
        frame = self._frames[index]

        if frame.dirty:
            self._write_back(file, frame)

        try:
            block = file.read_block(page_num)
        except ReadNonExistingPageError:
            file.ensure_capacity(page_num + 1)
            block = file.read_block(page_num)
        frame.data[:] = block
        self._read_io += 1

        frame.page_num = page_num
        frame.fix_count = 1
        frame.dirty = False
        self._selector.record_load(frame, tick)
        return PageHandle(page_num, frame.data)

    def unpin_page(self, page: PageHandle) -> None:
        """Release one pin on the page; never goes below zero."""
        frame = self._frame_of(page)
        if frame.fix_count > 0:
            frame.fix_count -= 1

    def mark_dirty(self, page: PageHandle) -> None:
        """Record that the page was modified."""
        self._frame_of(page).dirty = True

    def force_page(self, page: PageHandle) -> None:
        """Write the page to disk now if it is dirty."""
        file = self._require_open()
        frame = self._frame_of(page)
        if frame.dirty:
            self._write_back(file, frame)

    def force_flush(self) -> None:
        """Write every dirty, unpinned page to disk."""
        file = self._require_open()
        for frame in self._frames:
            if frame.dirty and not frame.pinned:
                self._write_back(file, frame)

    def shutdown(self) -> None:
        """Flush dirty pages and close the pool; fails while pages are pinned."""
        file = self._require_open()
        if any(frame.pinned for frame in self._frames):
            raise PinnedPagesError("cannot shut down with pinned pages")
        self.force_flush()
        file.close()
        self._file = None

    def frame_contents(self) -> list[int]:
        """Page number held by each frame, NO_PAGE for empty frames."""
        self._require_open()
        return [frame.page_num for frame in self._frames]

    def dirty_flags(self) -> list[bool]:
        """Whether each frame holds a modified page."""
        self._require_open()
        return [frame.dirty for frame in self._frames]

    def fix_counts(self) -> list[int]:
        """Pin count of each frame."""
        self._require_open()
        return [frame.fix_count for frame in self._frames]

    def num_read_io(self) -> int:
        """Number of pages read from disk."""
        return self._read_io

    def num_write_io(self) -> int:
        """Number of pages written to disk."""
        return self._write_io

    def __enter__(self) -> BufferPool:
        return self

    def __exit__(self, *args) -> None:
        if self.is_open:
            self.shutdown()