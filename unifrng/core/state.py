"""
Fixed-size storage for generator state words.

Each descriptor owns one StateStore. Words are unsigned 32-bit; every read
and write is checked against the store's capacity.
"""

from numbers import Integral
from typing import Iterable, List

import numpy as np

from .errors import InvalidParameter

UINT32_MASK = 0xFFFFFFFF
INT32_MIN = -(1 << 31)
UINT32_LIMIT = 1 << 32


def to_uint32(value) -> int:
    """
    Coerce a seed word to its unsigned 32-bit image.

    Negative values down to -2^31 are the signed view of the same word and
    are accepted.
    """
    if isinstance(value, bool) or not isinstance(value, (Integral, np.integer)):
        raise InvalidParameter(f"state word must be an integer, got {value!r}")
    value = int(value)
    if not INT32_MIN <= value < UINT32_LIMIT:
        raise InvalidParameter(f"state word {value} does not fit in 32 bits")
    return value & UINT32_MASK


def as_signed(word: int) -> int:
    """Read an unsigned 32-bit word as a signed int32."""
    word = int(word) & UINT32_MASK
    return word - UINT32_LIMIT if word & 0x80000000 else word


class StateStore:
    """
    Bounds-checked array of unsigned 32-bit words.

    Usage:
        store = StateStore(3)
        store[0] = 12345
        store.write(1, [6, 7])
        words = store.words()
    """

    def __init__(self, size: int):
        if size < 0:
            raise InvalidParameter(f"state size must be non-negative, got {size}")
        self._words = np.zeros(size, dtype=np.uint32)

    def __len__(self) -> int:
        return len(self._words)

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, (Integral, np.integer)):
            raise TypeError(f"state index must be an integer, got {index!r}")
        index = int(index)
        if not 0 <= index < len(self._words):
            raise IndexError(
                f"state index {index} out of range for {len(self._words)} words"
            )
        return index

    def _check_span(self, start: int, count: int):
        if start < 0 or count < 0 or start + count > len(self._words):
            raise IndexError(
                f"state span [{start}, {start + count}) out of range "
                f"for {len(self._words)} words"
            )

    def __getitem__(self, index: int) -> int:
        return int(self._words[self._check_index(index)])

    def __setitem__(self, index: int, value: int):
        self._words[self._check_index(index)] = int(value) & UINT32_MASK

    def read(self, start: int, count: int) -> List[int]:
        """Read ``count`` words starting at ``start``."""
        self._check_span(start, count)
        return [int(w) for w in self._words[start:start + count]]

    def write(self, start: int, values: Iterable[int]):
        """Write ``values`` starting at ``start``, masking each to 32 bits."""
        values = [int(v) & UINT32_MASK for v in values]
        self._check_span(start, len(values))
        self._words[start:start + len(values)] = np.asarray(values, dtype=np.uint32)

    def assign(self, values: Iterable[int]):
        """
        Install externally supplied words verbatim from index 0.

        Args:
            values: Words in ``[-2^31, 2^32)``; at most ``len(self)`` of them.
                A shorter sequence overwrites only the leading words.
        """
        words = [to_uint32(v) for v in values]
        self._check_span(0, len(words))
        self._words[:len(words)] = np.asarray(words, dtype=np.uint32)

    def words(self) -> List[int]:
        """Return all words as Python ints."""
        return [int(w) for w in self._words]

    def all_zero(self, start: int = 0, stop: int = None) -> bool:
        stop = len(self._words) if stop is None else stop
        self._check_span(start, stop - start)
        return not np.any(self._words[start:stop])

    def __repr__(self) -> str:
        return f"StateStore({self.words()!r})"
