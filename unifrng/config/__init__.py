"""Engine configuration."""

from .schema import EngineConfig, load_config, validate_config, build_engine
