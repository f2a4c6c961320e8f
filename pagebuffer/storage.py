"""Page files: fixed-size blocks stored one after another in a file."""

from __future__ import annotations

import os
from typing import BinaryIO

from .errors import (
    FileHandleNotInitError,
    PageFileNotFoundError,
    ReadNonExistingPageError,
    WriteFailedError,
)

PAGE_SIZE = 4096

_EMPTY_PAGE = bytes(PAGE_SIZE)


def create_page_file(file_name: str | os.PathLike) -> None:
    """Create (or overwrite) a page file holding one empty page."""
    try:
        with open(file_name, "wb") as fh:
            fh.write(_EMPTY_PAGE)
    except OSError as exc:
        raise PageFileNotFoundError(f"cannot create {file_name}") from exc


def destroy_page_file(file_name: str | os.PathLike) -> None:
    """Remove a page file."""
    try:
        os.remove(file_name)
    except OSError as exc:
        raise PageFileNotFoundError(f"cannot remove {file_name}") from exc


class PageFile:
    """An open page file with a current block position."""

    def __init__(self, file_name: str | os.PathLike) -> None:
        try:
            self._file: BinaryIO | None = open(file_name, "r+b")
        except OSError as exc:
            raise PageFileNotFoundError(f"cannot open {file_name}") from exc
        self.file_name = file_name
        self._file.seek(0, os.SEEK_END)
        self.total_num_pages = self._file.tell() // PAGE_SIZE
        self.cur_page_pos = 0

    def close(self) -> None:
        """Close the file; further block access fails."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def read_block(self, page_num: int) -> bytes:
        """Return the contents of block ``page_num`` and make it current."""
        if self._file is None or not 0 <= page_num < self.total_num_pages:
            raise ReadNonExistingPageError(f"page {page_num} does not exist")
        self._file.seek(page_num * PAGE_SIZE)
        data = self._file.read(PAGE_SIZE)
        self.cur_page_pos = page_num
        return data.ljust(PAGE_SIZE, b"\0")

    def read_first_block(self) -> bytes:
        return self.read_block(0)

    def read_previous_block(self) -> bytes:
        if self.cur_page_pos == 0:
            raise ReadNonExistingPageError("already at the first page")
        return self.read_block(self.cur_page_pos - 1)

    def read_current_block(self) -> bytes:
        return self.read_block(self.cur_page_pos)

    def read_next_block(self) -> bytes:
        if self.cur_page_pos + 1 >= self.total_num_pages:
            raise ReadNonExistingPageError("already at the last page")
        return self.read_block(self.cur_page_pos + 1)

    def read_last_block(self) -> bytes:
        return self.read_block(self.total_num_pages - 1)

    def write_block(self, page_num: int, data: bytes) -> None:
        """Write one page of ``data`` to block ``page_num`` and make it current.

        Shorter data is padded with zero bytes; longer data is cut to a page.
        """
        if self._file is None or not 0 <= page_num < self.total_num_pages:
            raise WriteFailedError(f"cannot write page {page_num}")
        self._file.seek(page_num * PAGE_SIZE)
        self._file.write(bytes(data[:PAGE_SIZE]).ljust(PAGE_SIZE, b"\0"))
        self._file.flush()
        self.cur_page_pos = page_num

    def write_current_block(self, data: bytes) -> None:
        self.write_block(self.cur_page_pos, data)

    def append_empty_block(self) -> None:
        """Add one zero-filled page at the end of the file."""
        if self._file is None:
            raise FileHandleNotInitError("page file is not open")
        self._file.seek(0, os.SEEK_END)
        self._file.write(_EMPTY_PAGE)
        self._file.flush()
        self.total_num_pages += 1

    def ensure_capacity(self, number_of_pages: int) -> None:
        """Append empty pages until the file holds ``number_of_pages``."""
        while self.total_num_pages < number_of_pages:
            self.append_empty_block()

    def __enter__(self) -> PageFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()