"""Mersenne-Twister state handling (seeding and repair)."""

from .base import CongruentialSeededGenerator, unimplemented_draw
from ..core.registry import get_registry
from ..core.state import as_signed
from ..core.types import GeneratorKind

N = 624


class MersenneTwisterGenerator(CongruentialSeededGenerator):
    """
    Matsumoto & Nishimura (1998) MT19937 state.

    Word 0 is the position within the 624-word table. Seeding and repair
    are supported; extraction is not, and drawing raises.
    """

    kind = GeneratorKind.MERSENNE_TWISTER
    drawable = False

    def _fixup(self, initial: bool):
        if initial:
            self.state[0] = N
        if as_signed(self.state[0]) <= 0:
            self.state[0] = N
        if self.state.all_zero(1, N + 1):
            self.randomize()

    def _next(self) -> float:
        return unimplemented_draw(self)


get_registry("generators").register(GeneratorKind.MERSENNE_TWISTER, MersenneTwisterGenerator)
