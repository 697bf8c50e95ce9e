"""
Data file header codec.

Every LiteCoreDB data file starts with a fixed 100-byte header:

    [0..15]  (16 bytes): ASCII magic string, NUL-padded
    [16..17] (2 bytes):  Page size (uint16 LE), must be nonzero
    [18..99] (82 bytes): Reserved (zeroed)

Bytes past the header are not interpreted here.
"""

import logging
import os
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)

# Header layout
HEADER_SIZE = 100
MAGIC_LEN = 16
PAGE_SIZE_OFFSET = 16
PAGE_SIZE_LEN = 2
MIN_HEADER_VALID_BYTES = PAGE_SIZE_OFFSET + PAGE_SIZE_LEN  # 18 bytes

DEFAULT_PAGE_SIZE = 4096
MAGIC_STRING = "LiteCoreDB v1"

# Full header: magic, page size, reserved padding
HEADER_STRUCT = struct.Struct("<16sH82x")
# Readable prefix: magic + page size only
PREFIX_STRUCT = struct.Struct("<16sH")

MSG_TOO_SMALL = "Invalid database header: file too small"
MSG_BAD_MAGIC = "Invalid database header: magic string mismatch"
MSG_BAD_PAGE_SIZE = "Invalid database header: bad page size"


class HeaderError(Exception):
    """Base exception for data file header errors."""

    pass


class HeaderTooSmallError(HeaderError):
    """Fewer than 18 header bytes available."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(MSG_TOO_SMALL)


class HeaderInvalidError(HeaderError):
    """Magic string mismatch or zero page size."""

    def __init__(self, message: str = MSG_BAD_MAGIC):
        super().__init__(message)


@dataclass
class Header:
    """
    Decoded header fields.

    Attributes:
        magic: Magic string with trailing NULs stripped.
        page_size: Page size in bytes.
    """

    magic: str
    page_size: int

    @property
    def is_valid(self) -> bool:
        """Check magic and page size."""
        return self.magic == MAGIC_STRING and self.page_size > 0


class HeaderStatus(Enum):
    """Outcome of checking a data file."""

    CREATED = "created"
    OK = "ok"
    TOO_SMALL = "too_small"
    BAD_MAGIC = "bad_magic"
    BAD_PAGE_SIZE = "bad_page_size"


_STATUS_MESSAGES = {
    HeaderStatus.CREATED: "",
    HeaderStatus.OK: "",
    HeaderStatus.TOO_SMALL: MSG_TOO_SMALL,
    HeaderStatus.BAD_MAGIC: MSG_BAD_MAGIC,
    HeaderStatus.BAD_PAGE_SIZE: MSG_BAD_PAGE_SIZE,
}


@dataclass
class HeaderCheck:
    """
    Result of check_data_file().

    Attributes:
        status: What happened to the file.
        path: Path that was checked.
        bytes_read: Header bytes read from an existing file.
    """

    status: HeaderStatus
    path: str
    bytes_read: int = 0

    @property
    def ok(self) -> bool:
        """True when the file was created or has a valid header."""
        return self.status in (HeaderStatus.CREATED, HeaderStatus.OK)

    @property
    def message(self) -> str:
        """Human readable failure message (empty on success)."""
        return _STATUS_MESSAGES[self.status]

    def to_error(self) -> HeaderError:
        """Convert a failed check to the matching exception."""
        if self.status == HeaderStatus.TOO_SMALL:
            return HeaderTooSmallError(self.bytes_read)
        return HeaderInvalidError(self.message)


def create_header(page_size: int = DEFAULT_PAGE_SIZE) -> bytes:
    """
    Build a 100-byte header.

    Args:
        page_size: Page size to store. Masked to 16 bits, so values
            >= 65536 wrap.

    Returns:
        Header bytes: magic (NUL-padded), page size (uint16 LE), zeroed
        reserved region.
    """
    magic = MAGIC_STRING.encode("ascii")
    return HEADER_STRUCT.pack(magic, page_size & 0xFFFF)


def parse_header(buf: bytes) -> Header:
    """
    Decode the magic string and page size from a header buffer.

    Args:
        buf: Header bytes (at least 18).

    Returns:
        Decoded header.

    Raises:
        HeaderTooSmallError: If buf is shorter than 18 bytes.
    """
    if len(buf) < MIN_HEADER_VALID_BYTES:
        raise HeaderTooSmallError(len(buf))

    magic_raw, page_size = PREFIX_STRUCT.unpack_from(buf, 0)
    magic = magic_raw.rstrip(b"\x00").decode("ascii", errors="replace")
    return Header(magic=magic, page_size=page_size)


def is_valid_header(buf: bytes) -> bool:
    """
    Validate a header buffer.

    Args:
        buf: Header bytes.

    Returns:
        True if the magic string matches and the page size is nonzero.
    """
    if len(buf) < MIN_HEADER_VALID_BYTES:
        return False
    return parse_header(buf).is_valid


def _read_header_bytes(path: Union[str, os.PathLike]) -> bytes:
    with open(path, "rb") as f:
        return f.read(HEADER_SIZE)


def check_data_file(
    path: Union[str, os.PathLike], page_size: int = DEFAULT_PAGE_SIZE
) -> HeaderCheck:
    """
    Create a data file or validate the header of an existing one.

    A missing file is created containing exactly one header. An existing file
    is opened read-only and never modified.

    Args:
        path: Data file path.
        page_size: Page size written when the file is created.

    Returns:
        Check result.

    Raises:
        OSError: On filesystem errors.
    """
    path_str = os.fspath(path)

    if not os.path.exists(path_str):
        with open(path_str, "wb") as f:
            f.write(create_header(page_size))
        logger.info(f"Created data file {path_str} (page_size={page_size & 0xFFFF})")
        return HeaderCheck(HeaderStatus.CREATED, path_str)

    data = _read_header_bytes(path_str)

    if len(data) < MIN_HEADER_VALID_BYTES:
        logger.warning(f"Header too small in {path_str}: {len(data)} bytes")
        return HeaderCheck(HeaderStatus.TOO_SMALL, path_str, len(data))

    header = parse_header(data)
    if header.magic != MAGIC_STRING:
        logger.warning(f"Magic mismatch in {path_str}: {header.magic!r}")
        return HeaderCheck(HeaderStatus.BAD_MAGIC, path_str)
    if header.page_size == 0:
        logger.warning(f"Zero page size in {path_str}")
        return HeaderCheck(HeaderStatus.BAD_PAGE_SIZE, path_str)

    logger.debug(f"Validated data file {path_str} (page_size={header.page_size})")
    return HeaderCheck(HeaderStatus.OK, path_str)


def ensure_data_file(
    path: Union[str, os.PathLike], page_size: int = DEFAULT_PAGE_SIZE
) -> None:
    """
    Ensure a valid data file exists at path.

    Same as check_data_file() but raises on an invalid header.

    Raises:
        HeaderTooSmallError: If the existing file holds fewer than 18 bytes.
        HeaderInvalidError: If the magic string or page size is wrong.
        OSError: On filesystem errors.
    """
    result = check_data_file(path, page_size)
    if not result.ok:
        raise result.to_error()
