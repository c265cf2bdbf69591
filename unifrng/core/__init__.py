"""Core types, registry, state storage and the engine."""

from .types import GeneratorKind, NormalKind, GeneratorInfo, GeneratorDescriptor, Snapshot
from .registry import Registry, get_registry, lookup_info, GENERATOR_TABLE
from .state import StateStore
from .engine import Engine
from .random import get_engine, set_seed, draw
