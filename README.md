# pagebuffer

A small storage layer for fixed-size pages, built from two pieces:

- **Page files** (`pagebuffer.storage`): a file on disk made of 4096-byte
  blocks (`PAGE_SIZE`), with block-level reads and writes, a current-block
  position, and growth by appending empty blocks.
- **Buffer pool** (`pagebuffer.buffer`): a fixed number of in-memory frames
  that cache pages of one page file. Pages are pinned while in use, marked
  dirty when changed, and written back when evicted, forced, or flushed.

When a page must be loaded, the pool first uses an empty, unpinned frame.
Once every frame holds a page, it picks a victim among the unpinned frames
with one of the strategies in `pagebuffer.replacement.ReplacementStrategy`:

- `FIFO` — the page that was loaded earliest
- `LRU` — the page whose latest access is oldest
- `LRU_K` — keeps the two latest access times of each page and evicts the
  page whose latest access is oldest
- `CLOCK` — a clock hand sweeps the frames, clearing use bits, and takes the
  first unpinned frame whose use bit is clear
- `LFU` — the page with the fewest repeated accesses

If every frame is pinned, `pin_page` raises `NoFreeBufferError`.

## Installing

```
pip install .
```

Python 3.10 or later; no third-party dependencies.

## Page files

```python
from pagebuffer.storage import PageFile, create_page_file, destroy_page_file

create_page_file("data.bin")          # one zero-filled page

with PageFile("data.bin") as pf:
    pf.ensure_capacity(10)             # grow to at least 10 pages
    pf.write_block(3, b"hello")        # padded with zero bytes to a full page
    block = pf.read_block(3)
    first = pf.read_first_block()
    following = pf.read_next_block()   # block 1
    print(pf.total_num_pages, pf.cur_page_pos)

destroy_page_file("data.bin")
```

`PageFile` also offers `read_previous_block()`, `read_current_block()`,
`read_last_block()`, `write_current_block(data)` and `append_empty_block()`.
Every write is flushed to the file at once.

Reading outside the file raises `ReadNonExistingPageError`, writing outside it
raises `WriteFailedError`, and opening, creating or removing a file that
cannot be used raises `PageFileNotFoundError` (all in `pagebuffer.errors`).

## Buffer pool

```python
from pagebuffer.buffer import BufferPool
from pagebuffer.replacement import ReplacementStrategy
from pagebuffer.stats import pool_content
from pagebuffer.storage import create_page_file

create_page_file("data.bin")

with BufferPool("data.bin", 3, ReplacementStrategy.FIFO, None) as pool:
    page = pool.pin_page(0)            # a PageHandle: page_num and data
    page.data[:5] = b"hello"           # data is the frame's own bytearray
    pool.mark_dirty(page)
    pool.unpin_page(page)
    pool.force_page(page)

    print(pool_content(pool))          # "[0 0],[-1 0],[-1 0]"
    print(pool.num_read_io(), pool.num_write_io())
```

Leaving the `with` block shuts the pool down if it is still open: dirty pages
are flushed and the page file is closed. `shutdown()` refuses to run while any
page is still pinned and raises `PinnedPagesError`. `force_flush()` writes
every dirty page that is not pinned. Pinning a page past the end of the file
grows the file to hold it; pinning a negative page number raises
`ReadNonExistingPageError`. Unpinning never takes a pin count below zero.

Inspecting the pool:

- `find_frame(page_num)` — index of the frame holding a page, or `None`
- `frame_contents()` — page number held by each frame (`-1` for an empty frame)
- `dirty_flags()` — whether each frame holds a modified page
- `fix_counts()` — how many pins each frame currently has
- `num_read_io()` / `num_write_io()` — pages read from and written to disk
- `is_open` — whether the pool has not yet been shut down

Unpinning, marking or forcing a page that is not in the pool raises
`PageNotFoundError`. After shutdown, pinning, flushing, shutting down again
and the inspection methods other than the I/O counters raise
`PoolNotInitError`.

The `strat_data` argument is stored on the pool but does not change how any
strategy behaves.

## Debug output

`pagebuffer.stats` renders the pool and pages as text:

- `pool_content(pool)` — one `[<page><dirty><fix>]` entry per frame, comma
  separated, where the dirty marker is `x` for a dirty frame and a space
  otherwise
- `print_pool_content(pool)` — the same, prefixed by `{<strategy> <frames>}: `
- `page_content(page)` / `print_page_content(page)` — a hex dump of a page,
  starting with `[Page <n>]`, in 8-byte groups and 64 bytes to a line
- `strategy_name(strategy)` — `FIFO`, `LRU`, `CLOCK`, `LFU` or `LRU-K`; any
  other value is shown as its number

## Errors

All errors derive from `pagebuffer.errors.DBError`, and each subclass carries
a `code` from `pagebuffer.errors.ReturnCode`. `error_message(error)` formats
an error as `EC (<code>), "<message>"` followed by a newline, or
`EC (<code>)` alone when there is no message; given a plain integer code it
returns `EC (<code>)`.

## What this package does not do

It stores raw pages only. There are no records, tables, schemas, expressions
or indexes on top of the pages, and there is no command-line tool or server:
the package is used as a library from Python code.

## Running the tests

```
pip install ".[test]"
pytest
```