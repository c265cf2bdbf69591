"""
unifrng: uniform pseudo-random variates for statistical routines.

Provides the classic generator family (Wichmann-Hill, Marsaglia
multiply-with-carry, Super-Duper, Mersenne-Twister, Knuth TAOCP,
L'Ecuyer CMRG) behind a single engine handle with saveable state.
"""

__version__ = "0.1.0"

from .core.types import GeneratorKind, NormalKind, GeneratorDescriptor, Snapshot
from .core.errors import (
    RNGError,
    RNGWarning,
    InvalidParameter,
    UnknownGeneratorKind,
    UnknownNormalKind,
    IncompatibleKindPair,
    UnimplementedGeneratorKind,
    SeedLengthMismatch,
)
from .core.engine import Engine
from .core.random import get_engine, set_engine, select, set_seed, draw

from . import generators
from . import config
