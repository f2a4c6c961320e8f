"""Return codes and the exceptions raised by the storage and buffer layers."""

from __future__ import annotations

from enum import IntEnum


class ReturnCode(IntEnum):
    """Numeric codes that identify each kind of failure."""

    OK = 0
    FILE_NOT_FOUND = 1
    FILE_HANDLE_NOT_INIT = 2
    WRITE_FAILED = 3
    READ_NON_EXISTING_PAGE = 4

    MALLOC_FAILED = 1000
    PINNED_PAGES_IN_BUFFER = 1001
    BUFFER_POOL_NOT_INIT = 1002
    PAGE_NOT_FOUND = 1003
    NO_FREE_BUFFER_ERROR = 1004
    NO_AVAILABLE_FRAME = 1005

    RM_COMPARE_VALUE_OF_DIFFERENT_DATATYPE = 200
    RM_EXPR_RESULT_IS_NOT_BOOLEAN = 201
    RM_BOOLEAN_EXPR_ARG_IS_NOT_BOOLEAN = 202
    RM_NO_MORE_TUPLES = 203
    RM_NO_PRINT_FOR_DATATYPE = 204
    RM_UNKNOWN_DATATYPE = 205

    IM_KEY_NOT_FOUND = 300
    IM_KEY_ALREADY_EXISTS = 301
    IM_N_TOO_LARGE = 302
    IM_NO_MORE_ENTRIES = 303


class DBError(Exception):
    """Base class of every error raised by this package."""

    code: ReturnCode | None = None

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class PageFileNotFoundError(DBError):
    """The page file could not be created, opened or removed."""

    code = ReturnCode.FILE_NOT_FOUND


class FileHandleNotInitError(DBError):
    """The page file is not open."""

    code = ReturnCode.FILE_HANDLE_NOT_INIT


class WriteFailedError(DBError):
    """A block could not be written."""

    code = ReturnCode.WRITE_FAILED


class ReadNonExistingPageError(DBError):
    """A block outside the file was requested."""

    code = ReturnCode.READ_NON_EXISTING_PAGE


class PinnedPagesError(DBError):
    """The buffer pool still holds pinned pages."""

    code = ReturnCode.PINNED_PAGES_IN_BUFFER


class PoolNotInitError(DBError):
    """The buffer pool is not initialised."""

    code = ReturnCode.BUFFER_POOL_NOT_INIT


class PageNotFoundError(DBError):
    """The page is not held in the buffer pool."""

    code = ReturnCode.PAGE_NOT_FOUND


class NoFreeBufferError(DBError):
    """No frame of the buffer pool can take a new page."""

    code = ReturnCode.NO_FREE_BUFFER_ERROR


def error_message(error: DBError | int) -> str:
    """Describe an error or a return code as 'EC (code), "message"'."""
    if isinstance(error, DBError):
        code = "?" if error.code is None else str(int(error.code))
        if error.message:
            return f'EC ({code}), "{error.message}"\n'
        return f"EC ({code})\n"
    return f"EC ({int(error)})\n"