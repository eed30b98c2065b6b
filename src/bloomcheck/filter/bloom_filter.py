"""Probabilistic membership testing with Bloom filters."""

import hashlib
import logging
import math
from typing import Any, Iterable, List, Union

import numpy as np

from bloomcheck.errors import ConstructionError

logger = logging.getLogger(__name__)

_LN2 = math.log(2)


def optimal_size(n: int, p: float) -> int:
    """Bit slots needed for ``n`` items at false-positive rate ``p``."""
    return max(1, math.ceil(-n * math.log(p) / _LN2 ** 2))


def optimal_hash_count(m: int, n: int) -> int:
    """Hash rounds for ``m`` slots and ``n`` items, never below one."""
    return max(1, int(m / n * _LN2))


def hash_index(item: Any, round_index: int, size: int) -> int:
    """Slot for ``item`` in hash round ``round_index``.

    BLAKE2b with an 8-byte digest over ``str(item) + str(round_index)``,
    read big-endian and reduced modulo ``size``. Persisted filters depend on
    this mapping, so it must not change.
    """
    data = f"{item}{round_index}".encode("utf-8")
    digest = hashlib.blake2b(data, digest_size=8).digest()
    return int.from_bytes(digest, "big") % size


class BloomFilter:
    """Fixed-size Bloom filter over a packed bit array.

    ``false_positive_probability`` and ``expected_items`` are planning
    inputs only. Filters rebuilt from persisted cells carry ``0.0`` and
    ``0`` there, meaning unknown; do not size anything from them.

    Instances are not thread-safe. Concurrent ``add``/``clear`` calls on
    one filter must be serialized by the caller.
    """

    def __init__(
        self, expected_items: int, false_positive_probability: float
    ) -> None:
        if isinstance(expected_items, bool) or not isinstance(
            expected_items, int
        ):
            raise ConstructionError(
                f"expected_items must be an integer, got {expected_items!r}"
            )
        if expected_items < 1:
            raise ConstructionError(
                f"expected_items must be positive, got {expected_items}"
            )
        if not 0.0 < false_positive_probability < 1.0:
            raise ConstructionError(
                "false_positive_probability must be in (0, 1), "
                f"got {false_positive_probability}"
            )
        self.expected_items = expected_items
        self.false_positive_probability = false_positive_probability
        self._size = optimal_size(expected_items, false_positive_probability)
        self._hash_count = optimal_hash_count(self._size, expected_items)
        self.bits = bytearray((self._size + 7) // 8)
        logger.debug(
            "Constructed filter n=%d p=%g size=%d hash_count=%d",
            expected_items,
            false_positive_probability,
            self._size,
            self._hash_count,
        )

    @classmethod
    def from_cells(
        cls, cells: Union[bytes, bytearray, memoryview], hash_count: int
    ) -> "BloomFilter":
        """Rebuild a filter from a byte-per-bit array; non-zero cells are set."""
        if len(cells) < 1:
            raise ConstructionError("cell array must not be empty")
        if hash_count < 1:
            raise ConstructionError(
                f"hash_count must be positive, got {hash_count}"
            )
        bf = cls.__new__(cls)
        bf.expected_items = 0
        bf.false_positive_probability = 0.0
        bf._size = len(cells)
        bf._hash_count = hash_count
        packed = np.packbits(
            np.frombuffer(cells, dtype=np.uint8), bitorder="little"
        )
        bf.bits = bytearray(packed.tobytes())
        return bf

    @property
    def size(self) -> int:
        return self._size

    @property
    def hash_count(self) -> int:
        return self._hash_count

    def positions(self, item: Any) -> List[int]:
        return [
            hash_index(item, i, self._size) for i in range(self._hash_count)
        ]

    def add(self, item: Any) -> None:
        for pos in self.positions(item):
            self.bits[pos // 8] |= 1 << pos % 8

    def add_many(self, items: Iterable[Any]) -> None:
        for item in items:
            self.add(item)

    def probably_contains(self, item: Any) -> bool:
        # Short-circuits on the first unset slot.
        for i in range(self._hash_count):
            pos = hash_index(item, i, self._size)
            if not self.bits[pos // 8] & 1 << pos % 8:
                return False
        return True

    def __contains__(self, item: Any) -> bool:
        return self.probably_contains(item)

    def clear(self) -> None:
        self.bits[:] = bytes(len(self.bits))

    def cells(self) -> bytes:
        """Byte-per-bit view: ``size`` bytes, each ``0x00`` or ``0x01``."""
        unpacked = np.unpackbits(
            np.frombuffer(bytes(self.bits), dtype=np.uint8),
            count=self._size,
            bitorder="little",
        )
        return unpacked.tobytes()

    def bits_set(self) -> int:
        return int(
            np.unpackbits(np.frombuffer(bytes(self.bits), dtype=np.uint8)).sum()
        )

    def fill_ratio(self) -> float:
        return self.bits_set() / self._size

    def estimated_false_positive_rate(self) -> float:
        """Current false-positive estimate from the share of set slots."""
        return self.fill_ratio() ** self._hash_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return (
            self._size == other._size
            and self._hash_count == other._hash_count
            and self.bits == other.bits
        )

    def __repr__(self) -> str:
        return (
            f"BloomFilter(size={self._size}, hash_count={self._hash_count}, "
            f"bits_set={self.bits_set()})"
        )
