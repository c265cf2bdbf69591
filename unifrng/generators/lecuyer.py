"""L'Ecuyer (1999) combined multiple-recursive generator MRG32k3a."""

from .base import BaseGenerator, lcg_step
from ..core.registry import get_registry
from ..core.types import GeneratorKind

M1 = 4294967087
M2 = 4294944443
NORMC = 2.328306549295727688e-10
A12 = 1403580
A13N = 810728
A21 = 527612
A23N = 1370589


class LecuyerCMRGGenerator(BaseGenerator):
    """
    Two order-3 recurrences, words 0-2 modulo m1 and words 3-5 modulo m2.

    Seeding draws each word from the seeding congruence, skipping values
    at or above m2, so seeded state never needs repair.
    """

    kind = GeneratorKind.LECUYER_CMRG

    def _seed(self, seed: int):
        words = []
        for _ in range(len(self.state)):
            seed = lcg_step(seed)
            while seed >= M2:
                seed = lcg_step(seed)
            words.append(seed)
        self.state.write(0, words)

    def _fixup(self, initial: bool):
        words = self.state.words()
        for triple, modulus in ((words[:3], M1), (words[3:], M2)):
            if not any(triple) or any(w >= modulus for w in triple):
                self.randomize()
                return

    def _next(self) -> float:
        s = self.state.words()

        # Python's floored modulo already adds the modulus back to negatives
        p1 = (A12 * s[1] - A13N * s[0]) % M1
        s[0], s[1], s[2] = s[1], s[2], p1

        p2 = (A21 * s[5] - A23N * s[3]) % M2
        s[3], s[4], s[5] = s[4], s[5], p2

        self.state.write(0, s)
        return (p1 - p2 if p1 > p2 else p1 - p2 + M1) * NORMC


get_registry("generators").register(GeneratorKind.LECUYER_CMRG, LecuyerCMRGGenerator)
