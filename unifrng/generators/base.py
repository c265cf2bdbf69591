"""Base generator interface: seeding, state repair and drawing."""

import logging
import math
from abc import ABC, abstractmethod
from numbers import Integral, Real

import numpy as np

from ..core import timeseed
from ..core.errors import InvalidParameter, UnimplementedGeneratorKind
from ..core.state import INT32_MIN, UINT32_LIMIT, UINT32_MASK, StateStore
from ..core.types import GeneratorDescriptor, GeneratorKind

logger = logging.getLogger(__name__)

I2_32M1 = 2.328306437080797e-10  # 1 / (2^32 - 1)
LCG_MULTIPLIER = 69069
SCRAMBLE_ROUNDS = 50


def lcg_step(seed: int) -> int:
    """One step of the 32-bit seeding congruence ``69069 * seed + 1``."""
    return (LCG_MULTIPLIER * seed + 1) & UINT32_MASK


def scramble(seed: int) -> int:
    """Run the seeding congruence over ``seed`` before any kind-specific use."""
    for _ in range(SCRAMBLE_ROUNDS):
        seed = lcg_step(seed)
    return seed


def check_seed(seed) -> int:
    """
    Validate a user seed and return its unsigned 32-bit image.

    Integer-valued finite reals such as ``3.0`` are accepted; fractional
    values, NaN, infinities, non-numbers and values outside
    ``[-2^31, 2^32)`` are rejected.
    """
    if isinstance(seed, bool):
        raise InvalidParameter(f"seed must be an integer, got {seed!r}")
    if isinstance(seed, (Integral, np.integer)):
        value = int(seed)
    elif isinstance(seed, (Real, np.floating)):
        if not math.isfinite(seed):
            raise InvalidParameter(f"seed must be finite, got {seed!r}")
        value = int(seed)
        if value != seed:
            raise InvalidParameter(f"seed must be integer-valued, got {seed!r}")
    else:
        raise InvalidParameter(f"seed must be an integer, got {seed!r}")
    if not INT32_MIN <= value < UINT32_LIMIT:
        raise InvalidParameter(f"seed {value} does not fit in 32 bits")
    return value & UINT32_MASK


def clamp_unit(x: float) -> float:
    """Keep a variate strictly inside (0, 1)."""
    if x <= 0.0:
        return 0.5 * I2_32M1
    if 1.0 - x <= 0.0:
        return 1.0 - 0.5 * I2_32M1
    return x


class BaseGenerator(ABC):
    """
    Abstract base class for uniform generators.

    A generator is bound to one descriptor and owns its seeding rule, its
    state repair rule and its state transition. Subclasses implement
    ``_seed``, ``_fixup`` and ``_next``.
    """

    kind: GeneratorKind = None
    drawable: bool = True

    def __init__(self, descriptor: GeneratorDescriptor):
        self.descriptor = descriptor

    @property
    def state(self) -> StateStore:
        return self.descriptor.state

    @property
    def name(self) -> str:
        return self.descriptor.name

    def initialize(self, seed: int):
        """
        Expand a 32-bit seed into the full state.

        Args:
            seed: User seed; see ``check_seed`` for the accepted domain.
        """
        seed = scramble(check_seed(seed))
        self._seed(seed)
        self.descriptor.seeded = True
        self.descriptor.needs_fixup = False
        logger.debug("Initialized %s", self.name)

    def randomize(self):
        """Re-seed from the time-derived seed."""
        seed = timeseed.time_seed()
        logger.debug("Re-seeding %s from time seed %d", self.name, seed)
        self.initialize(seed)

    def fixup(self, initial: bool = False):
        """
        Repair the state in place so it satisfies the algorithm's invariants.

        Args:
            initial: True when called straight after seeding.
        """
        self._fixup(initial)
        self.descriptor.needs_fixup = False

    def draw(self) -> float:
        """Advance the state and return a variate in (0, 1)."""
        return clamp_unit(self._next())

    @abstractmethod
    def _seed(self, seed: int):
        """Populate the state from an already scrambled seed."""
        raise NotImplementedError

    @abstractmethod
    def _fixup(self, initial: bool):
        raise NotImplementedError

    @abstractmethod
    def _next(self) -> float:
        """Advance the state and return the raw variate."""
        raise NotImplementedError


class CongruentialSeededGenerator(BaseGenerator):
    """Generator whose state words are consecutive steps of the seeding congruence."""

    def _seed(self, seed: int):
        words = []
        for _ in range(len(self.state)):
            seed = lcg_step(seed)
            words.append(seed)
        self.state.write(0, words)
        self.fixup(initial=True)


def unimplemented_draw(generator: BaseGenerator):
    raise UnimplementedGeneratorKind(
        f"drawing from {generator.name} is not implemented"
    )
