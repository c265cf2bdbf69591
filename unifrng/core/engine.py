"""
Generator engine: the handle collaborators draw uniform variates from.

An Engine owns one descriptor, with its own state words, per implemented
generator kind, plus the currently active kind. Switching kinds keeps every
other kind's state, so a previously used generator resumes where it stopped.
"""

import logging
from typing import Dict, List, Optional, Sequence, Union

import numpy as np

from .errors import InvalidParameter, UnimplementedGeneratorKind, UnknownGeneratorKind
from .registry import GENERATOR_TABLE, get_registry
from .serializer import find_descriptor, install_words, resolve_kind, resolve_normal_kind
from .types import GeneratorDescriptor, GeneratorKind, NormalKind, Snapshot
from ..generators.base import BaseGenerator, unimplemented_draw

logger = logging.getLogger(__name__)

DEFAULT_KIND = GeneratorKind.LECUYER_CMRG

KindLike = Union[GeneratorKind, int, str]


class Engine:
    """
    Uniform generator engine.

    Usage:
        engine = Engine()
        engine.select("Marsaglia-Multicarry")
        engine.set_seed(1)
        u = engine.draw()
        saved = engine.snapshot()
        engine.load("Marsaglia", "Buggy", saved.words)
    """

    def __init__(self, kind: KindLike = DEFAULT_KIND):
        self._descriptors: Dict[GeneratorKind, GeneratorDescriptor] = {}
        self._generators: Dict[GeneratorKind, BaseGenerator] = {}
        registry = get_registry("generators")
        for info in GENERATOR_TABLE:
            descriptor = GeneratorDescriptor(info)
            self._descriptors[info.kind] = descriptor
            self._generators[info.kind] = registry.create(info.kind, descriptor)

        self.active_kind: GeneratorKind = DEFAULT_KIND
        self.select(kind)

    # -- registry / state store ------------------------------------------

    def lookup(self, kind: KindLike) -> GeneratorDescriptor:
        """Return the descriptor for ``kind``."""
        kind = resolve_kind(kind)
        try:
            return self._descriptors[kind]
        except KeyError:
            raise UnknownGeneratorKind(f"no generator implemented for {kind.name}") from None

    def generator(self, kind: Optional[KindLike] = None) -> BaseGenerator:
        """
        Return the generator bound to ``kind`` (default: the active kind).

        Raises:
            UnknownGeneratorKind: ``kind`` names no generator at all.
            UnimplementedGeneratorKind: ``kind`` is a known tag with no
                implementation, such as the reserved user-supplied kind.
        """
        kind = resolve_kind(self.active_kind if kind is None else kind)
        try:
            return self._generators[kind]
        except KeyError:
            raise UnimplementedGeneratorKind(
                f"no seeding or repair rule for {kind.name}"
            ) from None

    @property
    def descriptors(self) -> List[GeneratorDescriptor]:
        return list(self._descriptors.values())

    @property
    def active(self) -> GeneratorDescriptor:
        return self._descriptors[self.active_kind]

    # -- external interface ---------------------------------------------

    def select(self, kind: KindLike) -> GeneratorKind:
        """
        Make ``kind`` the active generator.

        Returns:
            The previously active kind.
        """
        descriptor = self.lookup(kind)
        previous = self.active_kind
        self.active_kind = descriptor.kind
        if previous != descriptor.kind:
            logger.info("Switched generator from %s to %s",
                        previous.name, descriptor.kind.name)
        return previous

    def initialize(self, kind: KindLike, seed: int):
        """Seed ``kind`` deterministically from ``seed``."""
        self.generator(kind).initialize(seed)

    def set_seed(self, seed: int):
        """Seed the active generator."""
        self.initialize(self.active_kind, seed)

    def randomize(self, kind: Optional[KindLike] = None):
        """Seed ``kind`` (default: the active kind) from the time-derived seed."""
        self.generator(kind).randomize()

    def fixup(self, kind: Optional[KindLike] = None, initial: bool = False):
        """Repair the state of ``kind`` (default: the active kind)."""
        self.generator(kind).fixup(initial=initial)

    def draw(self) -> float:
        """
        Return the next uniform variate in (0, 1) from the active generator.

        Kinds without a wired-up draw raise before their state is re-seeded
        or repaired.
        """
        generator = self._generators[self.active_kind]
        descriptor = generator.descriptor
        if not generator.drawable:
            unimplemented_draw(generator)
        if not descriptor.seeded:
            generator.randomize()
        elif descriptor.needs_fixup:
            generator.fixup(initial=False)
        return generator.draw()

    def draw_many(self, n: int) -> np.ndarray:
        """Return ``n`` successive variates as a float64 array."""
        if n < 0:
            raise InvalidParameter(f"sample size must be non-negative, got {n}")
        return np.fromiter((self.draw() for _ in range(n)), dtype=np.float64, count=n)

    def load(self, uniform_name: KindLike, normal_name: Union[NormalKind, int, str],
             seed_words: Sequence[int]) -> GeneratorDescriptor:
        """
        Restore saved state for the generator named by the kind pair.

        The restored kind becomes the active one. The words are installed
        verbatim; repair is deferred to ``fixup`` or to the next draw. A
        vector longer than the descriptor, or an empty one, re-seeds the
        generator from time instead.

        Args:
            uniform_name: Uniform kind, code or (partial) name.
            normal_name: Normal kind, code or (partial) name.
            seed_words: Saved state words.

        Returns:
            The descriptor that received the state.
        """
        kind = resolve_kind(uniform_name)
        normal_kind = resolve_normal_kind(normal_name)
        descriptor = find_descriptor(self._descriptors.values(), kind, normal_kind)
        if not install_words(descriptor, seed_words):
            self._generators[kind].randomize()
        self.select(kind)
        return descriptor

    def snapshot(self, kind: Optional[KindLike] = None) -> Snapshot:
        """Save the state of ``kind`` (default: the active kind)."""
        descriptor = self.lookup(self.active_kind if kind is None else kind)
        return Snapshot(descriptor.kind, descriptor.normal_kind,
                        tuple(descriptor.state.words()))

    def state(self, kind: Optional[KindLike] = None) -> List[int]:
        """Return a copy of the state words of ``kind``."""
        return list(self.snapshot(kind).words)
