"""Fixed-layout binary persistence for Bloom filters.

Layout, all integers big-endian::

    offset  length  field
    0       4       magic ``b"CCBF"``
    4       2       format version (u16)
    6       2       hash_count (u16)
    8       4       size in bits (u32)
    12      size    bit array, one byte per bit (0x00 or 0x01)

The planning inputs (false-positive probability, expected items) are not
stored. This byte-per-bit layout is independent of the packed in-memory
representation.
"""

import io
import logging
import os
import struct
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

from bloomcheck.errors import (
    CodecError,
    FilterFormatError,
    TruncatedInputError,
    VersionMismatchError,
)
from bloomcheck.filter.bloom_filter import BloomFilter

logger = logging.getLogger(__name__)

MAGIC = b"CCBF"
HEADER = struct.Struct(">4sHHI")
_FIELDS = struct.Struct(">HHI")

MAX_VERSION = 0xFFFF
MAX_HASH_COUNT = 0xFFFF
MAX_SIZE = 0xFFFFFFFF

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class FilterHeader:
    version: int
    hash_count: int
    size: int

    @property
    def total_length(self) -> int:
        return HEADER.size + self.size


def _encode_header(bf: BloomFilter, version: int) -> bytes:
    if not 0 <= version <= MAX_VERSION:
        raise CodecError(f"version {version} does not fit in 16 bits")
    if not 1 <= bf.hash_count <= MAX_HASH_COUNT:
        raise CodecError(f"hash_count {bf.hash_count} does not fit in 16 bits")
    if not 1 <= bf.size <= MAX_SIZE:
        raise CodecError(f"size {bf.size} does not fit in 32 bits")
    return HEADER.pack(MAGIC, version, bf.hash_count, bf.size)


def _read_exact(stream: BinaryIO, n: int) -> bytes:
    chunks = []
    remaining = n
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_header(stream: BinaryIO) -> FilterHeader:
    """Parse the 12-byte header, leaving the stream at the bit array."""
    magic = _read_exact(stream, len(MAGIC))
    if magic != MAGIC:
        raise FilterFormatError("Invalid file format: missing CCBF identifier")
    raw = _read_exact(stream, _FIELDS.size)
    if len(raw) < _FIELDS.size:
        raise TruncatedInputError("header", HEADER.size, len(MAGIC) + len(raw))
    version, hash_count, size = _FIELDS.unpack(raw)
    return FilterHeader(version=version, hash_count=hash_count, size=size)


def dump(bf: BloomFilter, stream: BinaryIO, version: int) -> None:
    stream.write(_encode_header(bf, version))
    stream.write(bf.cells())


def dumps(bf: BloomFilter, version: int) -> bytes:
    return _encode_header(bf, version) + bf.cells()


def load(stream: BinaryIO, expected_version: int) -> BloomFilter:
    """Decode a filter from ``stream``.

    Checks run in order: magic, header length, version, then exactly
    ``size`` bytes of bit array. Bytes after the bit array are left unread.
    """
    header = read_header(stream)
    if header.version != expected_version:
        raise VersionMismatchError(expected_version, header.version)
    if header.size == 0 or header.hash_count == 0:
        raise FilterFormatError(
            f"Invalid header: size={header.size} hash_count={header.hash_count}"
        )
    cells = _read_exact(stream, header.size)
    if len(cells) < header.size:
        raise TruncatedInputError("bit array", header.size, len(cells))
    return BloomFilter.from_cells(cells, header.hash_count)


def loads(data: bytes, expected_version: int) -> BloomFilter:
    return load(io.BytesIO(data), expected_version)


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save(bf: BloomFilter, path: PathLike, version: int) -> None:
    """Write ``bf`` to ``path`` through a temp file and an atomic rename."""
    payload = dumps(bf, version)
    target = Path(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600; match what a plain open() would give
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug(
        "Saved filter to %s (version %d, %d bytes)", target, version, len(payload)
    )


def load_file(path: PathLike, expected_version: int) -> BloomFilter:
    with open(path, "rb") as f:
        bf = load(f, expected_version)
    logger.debug(
        "Loaded filter from %s (size=%d hash_count=%d)",
        path,
        bf.size,
        bf.hash_count,
    )
    return bf


def read_file_header(path: PathLike) -> FilterHeader:
    with open(path, "rb") as f:
        return read_header(f)
