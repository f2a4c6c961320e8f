import os

import pytest

from pagebuffer.errors import (
    FileHandleNotInitError,
    PageFileNotFoundError,
    ReadNonExistingPageError,
    WriteFailedError,
)
from pagebuffer.storage import (
    PAGE_SIZE,
    PageFile,
    create_page_file,
    destroy_page_file,
)


@pytest.fixture
def page_path(tmp_path):
    path = tmp_path / "pages.bin"
    create_page_file(path)
    return path


def test_created_file_holds_one_empty_page(page_path):
    assert os.path.getsize(page_path) == PAGE_SIZE
    with PageFile(page_path) as pf:
        assert pf.total_num_pages == 1
        assert pf.cur_page_pos == 0
        assert pf.read_first_block() == bytes(PAGE_SIZE)


def test_open_missing_file_raises(tmp_path):
    with pytest.raises(PageFileNotFoundError):
        PageFile(tmp_path / "missing.bin")


def test_destroy_removes_file(page_path):
    destroy_page_file(page_path)
    assert not page_path.exists()
    with pytest.raises(PageFileNotFoundError):
        destroy_page_file(page_path)


def test_write_then_read_round_trip(page_path):
    payload = bytes(range(256)) * (PAGE_SIZE // 256)
    with PageFile(page_path) as pf:
        pf.write_block(0, payload)
        assert pf.read_block(0) == payload


def test_short_data_is_padded(page_path):
    with PageFile(page_path) as pf:
        pf.write_current_block(b"Page-0")
        block = pf.read_current_block()
    assert len(block) == PAGE_SIZE
    assert block.startswith(b"Page-0")
    assert block[len(b"Page-0"):] == bytes(PAGE_SIZE - len(b"Page-0"))


def test_data_persists_after_reopen(page_path):
    with PageFile(page_path) as pf:
        pf.ensure_capacity(3)
        pf.write_block(2, b"third")
    with PageFile(page_path) as pf:
        assert pf.total_num_pages == 3
        assert pf.read_block(2).startswith(b"third")


def test_out_of_range_access_raises(page_path):
    with PageFile(page_path) as pf:
        with pytest.raises(ReadNonExistingPageError):
            pf.read_block(1)
        with pytest.raises(ReadNonExistingPageError):
            pf.read_block(-1)
        with pytest.raises(WriteFailedError):
            pf.write_block(1, b"x")
        with pytest.raises(WriteFailedError):
            pf.write_block(-10, b"x")


def test_append_adds_empty_page(page_path):
    with PageFile(page_path) as pf:
        pf.write_block(0, b"first")
        pf.append_empty_block()
        assert pf.total_num_pages == 2
        assert pf.read_last_block() == bytes(PAGE_SIZE)
        assert pf.cur_page_pos == 1
    assert os.path.getsize(page_path) == 2 * PAGE_SIZE


def test_ensure_capacity_only_grows(page_path):
    with PageFile(page_path) as pf:
        pf.ensure_capacity(5)
        assert pf.total_num_pages == 5
        pf.ensure_capacity(3)
        assert pf.total_num_pages == 5
    assert os.path.getsize(page_path) == 5 * PAGE_SIZE


def test_relative_navigation(page_path):
    with PageFile(page_path) as pf:
        pf.ensure_capacity(3)
        for n in range(3):
            pf.write_block(n, f"Page-{n}".encode())
        assert pf.read_first_block().startswith(b"Page-0")
        assert pf.read_next_block().startswith(b"Page-1")
        assert pf.read_next_block().startswith(b"Page-2")
        assert pf.cur_page_pos == 2
        with pytest.raises(ReadNonExistingPageError):
            pf.read_next_block()
        assert pf.read_previous_block().startswith(b"Page-1")
        assert pf.read_current_block().startswith(b"Page-1")
        assert pf.read_previous_block().startswith(b"Page-0")
        with pytest.raises(ReadNonExistingPageError):
            pf.read_previous_block()


def test_closed_file_rejects_access(page_path):
    with PageFile(page_path) as pf:
        pass
    with pytest.raises(ReadNonExistingPageError):
        pf.read_block(0)
    with pytest.raises(WriteFailedError):
        pf.write_block(0, b"x")
    with pytest.raises(FileHandleNotInitError):
        pf.append_empty_block()


def test_partial_trailing_page_is_not_counted(tmp_path):
    path = tmp_path / "odd.bin"
    path.write_bytes(bytes(PAGE_SIZE + 10))
    with PageFile(path) as pf:
        assert pf.total_num_pages == 1
        with pytest.raises(ReadNonExistingPageError):
            pf.read_block(1)