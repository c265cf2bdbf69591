"""Marsaglia's Super-Duper: Tausworthe shift register XOR a congruential generator."""

from .base import CongruentialSeededGenerator, I2_32M1, LCG_MULTIPLIER
from ..core.registry import get_registry
from ..core.state import UINT32_MASK
from ..core.types import GeneratorKind


class SuperDuperGenerator(CongruentialSeededGenerator):
    """Reeds et al. (1984) implementation on unsigned words."""

    kind = GeneratorKind.SUPER_DUPER

    def _fixup(self, initial: bool):
        if self.state[0] == 0:
            self.state[0] = 1
        # the congruential word must be odd
        self.state[1] = self.state[1] | 1

    def _next(self) -> float:
        i1, i2 = self.state.words()
        i1 ^= (i1 >> 15) & 0x1FFFF
        i1 ^= (i1 << 17) & UINT32_MASK
        i2 = (i2 * LCG_MULTIPLIER) & UINT32_MASK
        self.state.write(0, [i1, i2])
        return (i1 ^ i2) * I2_32M1


get_registry("generators").register(GeneratorKind.SUPER_DUPER, SuperDuperGenerator)
