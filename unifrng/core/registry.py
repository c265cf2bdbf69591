"""
Generator catalog and component registry.

GENERATOR_TABLE is the immutable catalog of every implemented generator;
the named registries map generator kinds to the classes implementing them.
"""

from typing import Any, Dict, Hashable, Tuple, Type

from .errors import UnknownGeneratorKind
from .types import GeneratorInfo, GeneratorKind, NormalKind


GENERATOR_TABLE: Tuple[GeneratorInfo, ...] = (
    GeneratorInfo(GeneratorKind.WICHMANN_HILL, NormalKind.BUGGY_KINDERMAN_RAMAGE,
                  "Wichmann-Hill", 3),
    GeneratorInfo(GeneratorKind.MARSAGLIA_MULTICARRY, NormalKind.BUGGY_KINDERMAN_RAMAGE,
                  "Marsaglia-MultiCarry", 2),
    GeneratorInfo(GeneratorKind.SUPER_DUPER, NormalKind.BUGGY_KINDERMAN_RAMAGE,
                  "Super-Duper", 2),
    # word 0 is the Mersenne-Twister position, 624 words follow
    GeneratorInfo(GeneratorKind.MERSENNE_TWISTER, NormalKind.BUGGY_KINDERMAN_RAMAGE,
                  "Mersenne-Twister", 1 + 624),
    # 100 lag words, word 100 is the cursor
    GeneratorInfo(GeneratorKind.KNUTH_TAOCP, NormalKind.BUGGY_KINDERMAN_RAMAGE,
                  "Knuth-TAOCP", 1 + 100),
    GeneratorInfo(GeneratorKind.KNUTH_TAOCP2, NormalKind.BUGGY_KINDERMAN_RAMAGE,
                  "Knuth-TAOCP-2002", 1 + 100),
    GeneratorInfo(GeneratorKind.LECUYER_CMRG, NormalKind.BUGGY_KINDERMAN_RAMAGE,
                  "L'Ecuyer-CMRG", 6),
)

_INFO_BY_KIND: Dict[GeneratorKind, GeneratorInfo] = {
    info.kind: info for info in GENERATOR_TABLE
}


def lookup_info(kind: GeneratorKind) -> GeneratorInfo:
    """Return the catalog entry for ``kind``."""
    try:
        return _INFO_BY_KIND[kind]
    except KeyError:
        raise UnknownGeneratorKind(f"no generator registered for {kind!r}") from None


class Registry:
    """
    Generic registry for component classes.

    Usage:
        registry = Registry("generators", error=UnknownGeneratorKind)
        registry.register(GeneratorKind.WICHMANN_HILL, WichmannHillGenerator)
        gen_cls = registry.get(GeneratorKind.WICHMANN_HILL)
        gen = gen_cls(descriptor)
    """

    def __init__(self, name: str, error: Type[Exception] = KeyError):
        self.name = name
        self.error = error
        self._registry: Dict[Hashable, Type] = {}

    def register(self, name: Hashable, cls: Type) -> Type:
        """Register a component class under ``name``."""
        self._registry[name] = cls
        return cls

    def get(self, name: Hashable) -> Type:
        """Get a registered class by name."""
        if name in self._registry:
            return self._registry[name]
        raise self.error(f"'{name}' not found in {self.name} registry. "
                         f"Available: {self.list()}")

    def create(self, name: Hashable, *args, **kwargs) -> Any:
        """Create an instance of a registered component."""
        return self.get(name)(*args, **kwargs)

    def list(self) -> list:
        """List all registered component names."""
        return list(self._registry.keys())


# Global registries
_registries: Dict[str, Registry] = {}


def get_registry(name: str) -> Registry:
    """Get or create a named registry."""
    if name not in _registries:
        error = UnknownGeneratorKind if name == "generators" else KeyError
        _registries[name] = Registry(name, error=error)
    return _registries[name]


generators = get_registry("generators")
