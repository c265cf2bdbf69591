"""Wichmann-Hill: three combined multiplicative congruential generators."""

from .base import CongruentialSeededGenerator
from ..core.registry import get_registry
from ..core.types import GeneratorKind

MODULI = (30269, 30307, 30323)
MULTIPLIERS = (171, 172, 170)


class WichmannHillGenerator(CongruentialSeededGenerator):
    """
    Wichmann & Hill (1982), AS 183.

    Each word runs its own congruence; the variate is the fractional part
    of the sum of the three ratios to their moduli.
    """

    kind = GeneratorKind.WICHMANN_HILL

    def _fixup(self, initial: bool):
        words = [w % m for w, m in zip(self.state.words(), MODULI)]
        # a word congruent to 0 would stay 0 forever
        self.state.write(0, [w if w else 1 for w in words])

    def _next(self) -> float:
        words = [
            w * a % m for w, a, m in zip(self.state.words(), MULTIPLIERS, MODULI)
        ]
        self.state.write(0, words)
        value = sum(w / float(m) for w, m in zip(words, MODULI))
        return value - int(value)


get_registry("generators").register(GeneratorKind.WICHMANN_HILL, WichmannHillGenerator)
