"""Configuration schema and validation."""

import math
from dataclasses import dataclass, fields
from numbers import Integral, Real
from typing import Any, Dict, List, Optional, Union

import yaml

from ..core.engine import Engine
from ..core.errors import InvalidParameter, RNGError
from ..core.serializer import find_descriptor, resolve_kind, resolve_normal_kind


@dataclass
class EngineConfig:
    kind: str = "L'Ecuyer-CMRG"
    normal_kind: str = "Buggy Kinderman-Ramage"
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "EngineConfig":
        errors = validate_config(config)
        if errors:
            raise InvalidParameter("; ".join(errors))
        section = _engine_section(config)
        return cls(**{f.name: section[f.name] for f in fields(cls) if f.name in section})


def _engine_section(config: Dict[str, Any]) -> Dict[str, Any]:
    return config.get("engine", config) if config else {}


def load_config(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate configuration, return list of errors."""
    errors = []
    if config is None:
        return errors
    if not isinstance(config, dict):
        return [f"Configuration must be a mapping, got {type(config).__name__}"]

    section = _engine_section(config)
    if not isinstance(section, dict):
        return ["'engine' section must be a mapping"]

    known = {f.name for f in fields(EngineConfig)}
    for key in section:
        if key not in known:
            errors.append(f"Unknown key 'engine.{key}'")

    if "kind" in section:
        try:
            resolve_kind(section["kind"])
        except RNGError:
            errors.append(f"Unknown generator kind {section['kind']!r}")

    if "normal_kind" in section:
        try:
            resolve_normal_kind(section["normal_kind"])
        except RNGError:
            errors.append(f"Unknown normal kind {section['normal_kind']!r}")

    seed = section.get("seed")
    if seed is not None:
        if isinstance(seed, bool) or not isinstance(seed, Real):
            errors.append(f"'engine.seed' must be an integer, got {seed!r}")
        elif not isinstance(seed, Integral) and not (math.isfinite(seed) and seed == int(seed)):
            errors.append(f"'engine.seed' must be an integer, got {seed!r}")

    return errors


def build_engine(config: Union[EngineConfig, Dict[str, Any], None] = None) -> Engine:
    """
    Build an Engine from configuration.

    Args:
        config: An EngineConfig, a raw config dict (optionally nested under
            an ``engine`` key), or None for defaults.

    Returns:
        Engine with the configured kind active, seeded when a seed is given.
    """
    if not isinstance(config, EngineConfig):
        config = EngineConfig.from_dict(config or {})

    engine = Engine(config.kind)
    find_descriptor(engine.descriptors, resolve_kind(config.kind),
                    resolve_normal_kind(config.normal_kind))
    if config.seed is not None:
        engine.set_seed(config.seed)
    return engine
