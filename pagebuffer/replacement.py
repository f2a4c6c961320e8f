"""Frames of a buffer pool and the policies that choose which one to evict."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence

from .storage import PAGE_SIZE

NO_PAGE = -1


class ReplacementStrategy(IntEnum):
    """Page replacement policies a buffer pool can use."""

    FIFO = 0
    LRU = 1
    CLOCK = 2
    LFU = 3
    LRU_K = 4


@dataclass
class Frame:
    """One slot of a buffer pool, holding at most one page."""

    page_num: int = NO_PAGE
    data: bytearray = field(default_factory=lambda: bytearray(PAGE_SIZE))
    dirty: bool = False
    fix_count: int = 0
    last_two: list[int] = field(default_factory=lambda: [0, 0])
    access_count: int = 0
    use_bit: int = 0

    @property
    def pinned(self) -> bool:
        return self.fix_count > 0

    @property
    def empty(self) -> bool:
        return self.page_num == NO_PAGE

    def reset(self) -> None:
        """Make the frame empty, clean and unpinned."""
        self.page_num = NO_PAGE
        self.dirty = False
        self.fix_count = 0


class VictimSelector:
    """Chooses the frame to evict and keeps the bookkeeping a strategy needs.

    Timestamps are kept in ``Frame.last_two``: FIFO stores the load time in
    the first slot, LRU stores the latest access in the second slot, and
    LRU-K keeps the two most recent accesses, older first.
    """

    def __init__(self, strategy: ReplacementStrategy) -> None:
        self.strategy = ReplacementStrategy(strategy)
        self.clock_hand = 0

    def select(self, frames: Sequence[Frame]) -> int | None:
        """Return the index of the frame to evict, or None if all are pinned."""
        for index, frame in enumerate(frames):
            if frame.empty and not frame.pinned:
                return index

        candidates = [(i, f) for i, f in enumerate(frames) if not f.pinned]
        if not candidates:
            return None

        if self.strategy is ReplacementStrategy.FIFO:
            return min(candidates, key=lambda item: item[1].last_two[0])[0]
        if self.strategy in (ReplacementStrategy.LRU, ReplacementStrategy.LRU_K):
            return min(candidates, key=lambda item: item[1].last_two[1])[0]
        if self.strategy is ReplacementStrategy.LFU:
            return min(candidates, key=lambda item: item[1].access_count)[0]
        return self._select_clock(frames)

    def _select_clock(self, frames: Sequence[Frame]) -> int:
        count = len(frames)
        self.clock_hand %= count
        while True:
            frame = frames[self.clock_hand]
            if not frame.pinned:
                if frame.use_bit == 0:
                    return self.clock_hand
                frame.use_bit = 0
            self.clock_hand = (self.clock_hand + 1) % count

    def record_access(self, frame: Frame, tick: int) -> None:
        """Note a hit on a page that is already in ``frame``."""
        if self.strategy is ReplacementStrategy.LRU:
            frame.last_two[1] = tick
        elif self.strategy is ReplacementStrategy.LRU_K:
            frame.last_two[0] = frame.last_two[1]
            frame.last_two[1] = tick
        elif self.strategy is ReplacementStrategy.CLOCK:
            frame.use_bit = 1
        elif self.strategy is ReplacementStrategy.LFU:
            frame.access_count += 1

    def record_load(self, frame: Frame, tick: int) -> None:
        """Note that a new page has just been read into ``frame``."""
        if self.strategy is ReplacementStrategy.FIFO:
            frame.last_two[:] = [tick, 0]
        elif self.strategy in (ReplacementStrategy.LRU, ReplacementStrategy.LRU_K):
            frame.last_two[:] = [0, tick]
        else:
            frame.last_two[:] = [0, 0]