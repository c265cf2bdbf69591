"""
Kind-name resolution and installation of externally supplied state.

Names are normalized once here: case is ignored and every character that is
not a letter or digit is dropped, so ``"L'Ecuyer-CMRG"``, ``"lecuyer_cmrg"``
and ``"LECUYER"`` all resolve to the same kind. An exact match on the enum
name or the display name wins; otherwise the first kind, in code order,
with a name starting with the query is chosen.
"""

import logging
import re
import warnings
from enum import IntEnum
from typing import Dict, Iterable, Sequence, Tuple, Type, TypeVar, Union

from .errors import (
    IncompatibleKindPair,
    SeedLengthMismatch,
    UnknownGeneratorKind,
    UnknownNormalKind,
)
from .registry import GENERATOR_TABLE
from .types import GeneratorDescriptor, GeneratorKind, NormalKind

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=IntEnum)

NORMAL_NAMES: Dict[NormalKind, str] = {
    NormalKind.BUGGY_KINDERMAN_RAMAGE: "Buggy Kinderman-Ramage",
    NormalKind.AHRENS_DIETER: "Ahrens-Dieter",
    NormalKind.BOX_MULLER: "Box-Muller",
    NormalKind.USER_NORM: "user-supplied",
    NormalKind.INVERSION: "Inversion",
    NormalKind.KINDERMAN_RAMAGE: "Kinderman-Ramage",
}

UNIFORM_NAMES: Dict[GeneratorKind, str] = {info.kind: info.name for info in GENERATOR_TABLE}
UNIFORM_NAMES[GeneratorKind.USER_UNIF] = "user-supplied"


def normalize_name(name: str) -> str:
    return re.sub(r"[^0-9A-Z]", "", name.upper())


def _aliases(names: Dict[K, str], enum_cls: Type[K]) -> Tuple[Tuple[K, Tuple[str, ...]], ...]:
    return tuple(
        (kind, (normalize_name(kind.name), normalize_name(names.get(kind, kind.name))))
        for kind in enum_cls
    )


_UNIFORM_ALIASES = _aliases(UNIFORM_NAMES, GeneratorKind)
_NORMAL_ALIASES = _aliases(NORMAL_NAMES, NormalKind)


def _match(value, enum_cls: Type[K], aliases, error: Type[Exception]) -> K:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_cls(value)
        except ValueError:
            raise error(f"no {enum_cls.__name__} with code {value}") from None
    if not isinstance(value, str):
        raise error(f"cannot resolve {value!r} to a {enum_cls.__name__}")

    query = normalize_name(value)
    if query:
        for kind, names in aliases:
            if query in names:
                return kind
        for kind, names in aliases:
            if any(name.startswith(query) for name in names):
                return kind
    raise error(f"unknown {enum_cls.__name__}: {value!r}")


def resolve_kind(value: Union[GeneratorKind, int, str]) -> GeneratorKind:
    """Resolve a kind, code or (partial) name to a GeneratorKind."""
    return _match(value, GeneratorKind, _UNIFORM_ALIASES, UnknownGeneratorKind)


def resolve_normal_kind(value: Union[NormalKind, int, str]) -> NormalKind:
    """Resolve a kind, code or (partial) name to a NormalKind."""
    return _match(value, NormalKind, _NORMAL_ALIASES, UnknownNormalKind)


def find_descriptor(
    descriptors: Iterable[GeneratorDescriptor],
    kind: GeneratorKind,
    normal_kind: NormalKind,
) -> GeneratorDescriptor:
    """Return the descriptor pairing ``kind`` with ``normal_kind``."""
    for descriptor in descriptors:
        if descriptor.kind == kind and descriptor.normal_kind == normal_kind:
            return descriptor
    raise IncompatibleKindPair(
        f"no generator pairs {kind.name} with {normal_kind.name}"
    )


def install_words(descriptor: GeneratorDescriptor, seed_words: Sequence[int]) -> bool:
    """
    Install saved words into a descriptor.

    Args:
        descriptor: Target descriptor.
        seed_words: Saved words, at most ``seed_word_count`` of them.

    Returns:
        True if the words were installed, False if the caller has to
        re-seed the descriptor from time instead.
    """
    seed_words = list(seed_words) if seed_words is not None else []
    capacity = descriptor.seed_word_count

    if len(seed_words) > capacity:
        message = (f"{descriptor.name}: incorrect seed length {len(seed_words)} "
                   f"(expected at most {capacity}), re-initializing")
        logger.warning(message)
        warnings.warn(message, SeedLengthMismatch, stacklevel=3)
        return False
    if not seed_words:
        logger.debug("%s: empty seed, re-initializing", descriptor.name)
        return False

    descriptor.state.assign(seed_words)
    descriptor.seeded = True
    descriptor.needs_fixup = True
    return True
