"""
Knuth's lagged-Fibonacci generator (TAOCP vol. 2, section 3.6).

The stream works directly on a descriptor's state: words 0..KK-1 are the
running lag table and word KK is the cursor into it. Both the 2002
bootstrap and the historical 1997 one are provided.
"""

import logging
from typing import List

from ..core.errors import InvalidParameter
from ..core.state import StateStore, as_signed

logger = logging.getLogger(__name__)

KK = 100  # the long lag
LL = 37  # the short lag
MM = 1 << 30  # the modulus
TT = 70  # guaranteed separation between streams
QUALITY = 1009  # batch length recommended for high-resolution use


def mod_diff(x: int, y: int) -> int:
    """Subtraction modulo MM."""
    return (x - y) & (MM - 1)


def evenize(x: int) -> int:
    return x & (MM - 2)


def is_odd(x: int) -> int:
    return x & 1


class KnuthStream:
    """
    Lagged-Fibonacci engine over a 101-word state.

    Usage:
        stream = KnuthStream(descriptor.state)
        stream.start(seed)
        word = stream.next_word()
    """

    def __init__(self, state: StateStore):
        if len(state) < KK + 1:
            raise InvalidParameter(
                f"Knuth stream needs {KK + 1} state words, got {len(state)}"
            )
        self.state = state
        self.batch: List[int] = [0] * QUALITY

    @property
    def cursor(self) -> int:
        return as_signed(self.state[KK])

    @cursor.setter
    def cursor(self, value: int):
        self.state[KK] = value

    def lags(self) -> List[int]:
        """The running lag table, ``ran_x`` in Knuth's code."""
        return self.state.read(0, KK)

    def refill(self, n: int) -> List[int]:
        """
        Generate ``n`` new words and advance the lag table past them.

        Args:
            n: Number of words, at least KK.

        Returns:
            The generated words; the lag table afterwards continues the
            same sequence.
        """
        if n < KK:
            raise InvalidParameter(f"refill length must be at least {KK}, got {n}")
        ran_x = self.lags()
        aa = ran_x + [0] * (n - KK)
        for j in range(KK, n):
            aa[j] = mod_diff(aa[j - KK], aa[j - LL])
        j = n
        for i in range(LL):
            ran_x[i] = mod_diff(aa[j - KK], aa[j - LL])
            j += 1
        for i in range(LL, KK):
            ran_x[i] = mod_diff(aa[j - KK], ran_x[i - LL])
            j += 1
        self.state.write(0, ran_x)
        return aa

    def cycle(self) -> int:
        """Regenerate the batch and return its first word."""
        self.batch = self.refill(QUALITY)
        logger.debug("Refilled Knuth batch of %d words", QUALITY)
        return self.batch[0]

    def next_word(self) -> int:
        """Return the next lag word, regenerating the batch once exhausted."""
        pos = self.cursor
        if pos >= KK:
            self.cycle()
            pos = 0
        word = self.state[pos]
        self.cursor = pos + 1
        return word

    def start(self, seed: int):
        """Bootstrap the lag table from ``seed`` (2002 revision)."""
        x = [0] * (KK + KK - 1)
        ss = (seed + 2) & (MM - 2)
        for j in range(KK):
            x[j] = ss
            ss <<= 1
            if ss >= MM:
                ss -= MM - 2  # cyclic shift 29 bits
        x[1] += 1  # make x[1] (and only x[1]) odd

        ss = seed & (MM - 1)
        t = TT - 1
        while t:
            for j in range(KK - 1, 0, -1):  # "square"
                x[j + j] = x[j]
                x[j + j - 1] = 0
            for j in range(KK + KK - 2, KK - 1, -1):
                x[j - (KK - LL)] = mod_diff(x[j - (KK - LL)], x[j])
                x[j - KK] = mod_diff(x[j - KK], x[j])
            if is_odd(ss):  # "multiply by z"
                for j in range(KK, 0, -1):
                    x[j] = x[j - 1]
                x[0] = x[KK]  # shift the buffer cyclically
                x[LL] = mod_diff(x[LL], x[KK])
            if ss:
                ss >>= 1
            else:
                t -= 1

        self._install(x)
        for _ in range(10):  # warm things up
            self.refill(KK + KK - 1)

    def start_1997(self, seed: int):
        """Bootstrap the lag table from ``seed`` (original 1997 revision)."""
        x = [0] * (KK + KK - 1)
        ss = evenize(seed + 2)
        for j in range(KK):
            x[j] = ss
            ss <<= 1
            if ss >= MM:
                ss -= MM - 2
        x[1] += 1

        ss = seed & (MM - 1)
        t = TT - 1
        while t:
            for j in range(KK - 1, 0, -1):
                x[j + j] = x[j]
            for j in range(KK + KK - 2, KK - LL, -2):
                x[KK + KK - 1 - j] = evenize(x[j])
            for j in range(KK + KK - 2, KK - 1, -1):
                if is_odd(x[j]):
                    x[j - (KK - LL)] = mod_diff(x[j - (KK - LL)], x[j])
                    x[j - KK] = mod_diff(x[j - KK], x[j])
            if is_odd(ss):
                for j in range(KK, 0, -1):
                    x[j] = x[j - 1]
                x[0] = x[KK]
                if is_odd(x[KK]):
                    x[LL] = mod_diff(x[LL], x[KK])
            if ss:
                ss >>= 1
            else:
                t -= 1

        self._install(x)

    def _install(self, x: List[int]):
        """Fold the preparation buffer into the lag table."""
        ran_x = [0] * KK
        for j in range(LL):
            ran_x[j + KK - LL] = x[j]
        for j in range(LL, KK):
            ran_x[j - LL] = x[j]
        self.state.write(0, ran_x)
