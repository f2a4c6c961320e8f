"""Text views of a buffer pool and of page contents."""

from __future__ import annotations

from .buffer import BufferPool, PageHandle
from .replacement import ReplacementStrategy
from .storage import PAGE_SIZE

_STRATEGY_NAMES = {
    ReplacementStrategy.FIFO: "FIFO",
    ReplacementStrategy.LRU: "LRU",
    ReplacementStrategy.CLOCK: "CLOCK",
    ReplacementStrategy.LFU: "LFU",
    ReplacementStrategy.LRU_K: "LRU-K",
}


def strategy_name(strategy: ReplacementStrategy | int) -> str:
    """Short display name of a strategy; unknown values show their number."""
    try:
        return _STRATEGY_NAMES[ReplacementStrategy(strategy)]
    except ValueError:
        return str(int(strategy))


def pool_content(pool: BufferPool) -> str:
    """Frames as '[page<x if dirty>fixcount]', separated by commas."""
    return ",".join(
        f"[{page}{'x' if dirty else ' '}{fix}]"
        for page, dirty, fix in zip(
            pool.frame_contents(), pool.dirty_flags(), pool.fix_counts()
        )
    )


def print_pool_content(pool: BufferPool) -> None:
    """Print the strategy, pool size and frame contents on one line."""
    print(f"{{{strategy_name(pool.strategy)} {pool.num_pages}}}: {pool_content(pool)}")


def page_content(page: PageHandle) -> str:
    """Hex dump of a page: 8-byte groups, 64 bytes to a line."""
    parts = [f"[Page {page.page_num}]\n"]
    data = bytes(page.data[:PAGE_SIZE]).ljust(PAGE_SIZE, b"\0")
    for position, byte in enumerate(data, start=1):
        parts.append(f"{byte:02X}")
        if position % 8 == 0:
            parts.append(" ")
        if position % 64 == 0:
            parts.append("\n")
    return "".join(parts)


def print_page_content(page: PageHandle) -> None:
    """Print the hex dump of a page."""
    print(page_content(page), end="")