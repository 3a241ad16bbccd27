from __future__ import annotations
import os
from typing import Any, Dict, Optional
import logging
import yaml  # type: ignore
from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator

from ..utils.paths import config_path

logger = logging.getLogger('powerstat.config')


class CollectorConfig(BaseModel):
    """Timeouts, cache TTL and sensor bounds used by the collectors."""
    power_cache_ttl: float = 30.0
    fast_timeout: float = 0.5
    slow_timeout: float = 3.0
    default_timeout: float = 2.0
    sensor_min_c: float = 0.0
    sensor_max_c: float = 150.0
    power_supply_glob: str = "/sys/class/power_supply/BAT*/capacity"
    log_level: str = "INFO"

    @field_validator("power_cache_ttl", "fast_timeout", "slow_timeout", "default_timeout")
    @classmethod
    def _fix_non_positive(cls, v: float, info: ValidationInfo) -> float:
        """Fix invalid values."""
        if v <= 0:
            return cls.model_fields[info.field_name].default
        return v


DEFAULT_CONFIG: Dict[str, Any] = CollectorConfig().model_dump()


def load_config(path: Optional[str] = None) -> CollectorConfig:
    """
    Load <config>/powerstat.yml if present, else return defaults.

    Unknown keys are ignored; a file that cannot be read or validated
    falls back to defaults with a warning.
    """
    path = path or config_path()
    if not os.path.exists(path):
        return CollectorConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            doc = yaml.safe_load(f) or {}
        if not isinstance(doc, dict):
            raise ValueError(f"expected a mapping, got {type(doc).__name__}")
        merged = dict(DEFAULT_CONFIG)
        merged.update({k: v for k, v in doc.items() if k in DEFAULT_CONFIG})
        return CollectorConfig(**merged)
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        logger.warning(f"Ignoring invalid config {path}: {e}")
        return CollectorConfig()
