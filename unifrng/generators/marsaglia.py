"""Marsaglia multiply-with-carry."""

from .base import CongruentialSeededGenerator, I2_32M1
from ..core.registry import get_registry
from ..core.state import UINT32_MASK
from ..core.types import GeneratorKind


class MarsagliaMulticarryGenerator(CongruentialSeededGenerator):
    """
    Two 16-bit multiply-with-carry generators combined into 32 bits.

    Each word holds a 16-bit value in its low half and the carry in its
    high half.
    """

    kind = GeneratorKind.MARSAGLIA_MULTICARRY

    def _fixup(self, initial: bool):
        if self.state[0] == 0:
            self.state[0] = 1
        if self.state[1] == 0:
            self.state[1] = 1

    def _next(self) -> float:
        i1, i2 = self.state.words()
        i1 = 36969 * (i1 & 0xFFFF) + (i1 >> 16)
        i2 = 18000 * (i2 & 0xFFFF) + (i2 >> 16)
        self.state.write(0, [i1, i2])
        return (((i1 << 16) & UINT32_MASK) ^ (i2 & 0xFFFF)) * I2_32M1


get_registry("generators").register(
    GeneratorKind.MARSAGLIA_MULTICARRY, MarsagliaMulticarryGenerator
)
