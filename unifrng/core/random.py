"""
Process-default engine.

Collaborators that do not hold an Engine handle of their own draw through
these module-level functions, which share one lazily created instance.
"""

from typing import Optional, Union

from .engine import Engine
from .types import GeneratorKind

_global_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get the process-default engine, creating it on first use."""
    global _global_engine
    if _global_engine is None:
        _global_engine = Engine()
    return _global_engine


def set_engine(engine: Optional[Engine]) -> Optional[Engine]:
    """Replace the process-default engine; returns the previous one."""
    global _global_engine
    previous = _global_engine
    _global_engine = engine
    return previous


def select(kind: Union[GeneratorKind, int, str]) -> GeneratorKind:
    """Set the active generator of the default engine."""
    return get_engine().select(kind)


def set_seed(seed: int, kind: Union[GeneratorKind, int, str] = None):
    """Seed the default engine, optionally switching generator first."""
    engine = get_engine()
    if kind is not None:
        engine.select(kind)
    engine.set_seed(seed)


def draw() -> float:
    """Draw the next uniform variate from the default engine."""
    return get_engine().draw()
