"""Core data types for generator kinds, descriptors and snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple

from .state import StateStore


class GeneratorKind(IntEnum):
    """Uniform generator algorithms, numbered by their conventional codes."""

    WICHMANN_HILL = 0
    MARSAGLIA_MULTICARRY = 1
    SUPER_DUPER = 2
    MERSENNE_TWISTER = 3
    KNUTH_TAOCP = 4
    USER_UNIF = 5  # reserved, no descriptor
    KNUTH_TAOCP2 = 6
    LECUYER_CMRG = 7


class NormalKind(IntEnum):
    """Normal transforms a uniform generator can be paired with."""

    BUGGY_KINDERMAN_RAMAGE = 0
    AHRENS_DIETER = 1
    BOX_MULLER = 2
    USER_NORM = 3
    INVERSION = 4
    KINDERMAN_RAMAGE = 5


@dataclass(frozen=True)
class GeneratorInfo:
    """Immutable identity of a generator.

    Args:
        kind (GeneratorKind): The uniform algorithm.
        normal_kind (NormalKind): The paired normal transform.
        name (str): Display name.
        seed_word_count (int): Number of 32-bit state words.

    Returns:
        GeneratorInfo: A frozen catalog entry.
    """
    kind: GeneratorKind
    normal_kind: NormalKind
    name: str
    seed_word_count: int


@dataclass
class GeneratorDescriptor:
    """A catalog entry together with the state words it owns.

    ``seeded`` is set once the state has been populated by seeding or by a
    load; ``needs_fixup`` marks loaded state that has not been repaired yet.
    """
    info: GeneratorInfo
    state: StateStore = None
    seeded: bool = False
    needs_fixup: bool = False

    def __post_init__(self):
        if self.state is None:
            self.state = StateStore(self.info.seed_word_count)

    @property
    def kind(self) -> GeneratorKind:
        return self.info.kind

    @property
    def normal_kind(self) -> NormalKind:
        return self.info.normal_kind

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def seed_word_count(self) -> int:
        return self.info.seed_word_count


@dataclass(frozen=True)
class Snapshot:
    """Saved generator state: the kind pair and its words, in order."""
    kind: GeneratorKind
    normal_kind: NormalKind
    words: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def code(self) -> int:
        """Integer tag combining both kinds, as stored ahead of saved words."""
        return int(self.kind) + 100 * int(self.normal_kind)

    def as_list(self) -> List[int]:
        return list(self.words)
