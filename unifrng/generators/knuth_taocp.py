"""Knuth TAOCP lagged-Fibonacci generators, 1997 and 2002 bootstraps."""

from .base import BaseGenerator, unimplemented_draw
from .knuth_stream import KK, KnuthStream
from ..core.registry import get_registry
from ..core.types import GeneratorDescriptor, GeneratorKind

SEED_MODULUS = 1073741821


class KnuthTAOCPGenerator(BaseGenerator):
    """
    Knuth's generator seeded with the historical 1997 bootstrap.

    State is 100 lag words followed by the cursor. Drawing is not wired
    up for either Knuth kind and raises.
    """

    kind = GeneratorKind.KNUTH_TAOCP
    drawable = False

    def __init__(self, descriptor: GeneratorDescriptor):
        super().__init__(descriptor)
        self.stream = KnuthStream(descriptor.state)

    def _seed(self, seed: int):
        self.stream.start_1997(seed % SEED_MODULUS)
        self.stream.cursor = KK

    def _fixup(self, initial: bool):
        if not 0 < self.stream.cursor <= KK:
            self.stream.cursor = KK
        if self.state.all_zero(0, KK):
            self.randomize()

    def _next(self) -> float:
        return unimplemented_draw(self)


class KnuthTAOCP2Generator(KnuthTAOCPGenerator):
    """Knuth's generator with the 2002 bootstrap and warm-up."""

    kind = GeneratorKind.KNUTH_TAOCP2

    def _seed(self, seed: int):
        self.stream.start(seed % SEED_MODULUS)
        self.stream.cursor = KK


get_registry("generators").register(GeneratorKind.KNUTH_TAOCP, KnuthTAOCPGenerator)
get_registry("generators").register(GeneratorKind.KNUTH_TAOCP2, KnuthTAOCP2Generator)
