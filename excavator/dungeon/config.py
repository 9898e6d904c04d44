import os
from dataclasses import dataclass, replace
from typing import Optional

from flask import current_app, has_app_context

SCATTER_OVERFLOW_MODES = ("raise", "cap")


@dataclass(frozen=True)
class ExcavationConfig:
    prefix: str = "nft1"
    scatter_divisor: int = 50
    level_divisor: int = 1000
    seed: Optional[int] = None
    scatter_overflow: str = "raise"
    fold_case_frequency: bool = False
    unknown_type: str = "Unknown"
    enable_metrics: bool = True

    def __post_init__(self):
        if self.scatter_overflow not in SCATTER_OVERFLOW_MODES:
            raise ValueError(f"scatter_overflow must be one of {SCATTER_OVERFLOW_MODES}, got {self.scatter_overflow!r}")
        if self.scatter_divisor <= 0 or self.level_divisor <= 0:
            raise ValueError("divisors must be positive")


def _truthy(val) -> bool:
    if isinstance(val, str):
        return val.strip().lower() not in {"0", "false", "no", ""}
    return bool(val)


# key -> (config attribute, coercion)
_OVERRIDES = {
    "EXCAVATOR_TOKEN_PREFIX": ("prefix", str),
    "EXCAVATOR_SCATTER_OVERFLOW": ("scatter_overflow", lambda v: str(v).strip().lower()),
    "EXCAVATOR_FOLD_CASE_FREQUENCY": ("fold_case_frequency", _truthy),
    "EXCAVATOR_ENABLE_METRICS": ("enable_metrics", _truthy),
}


def load_config(base: Optional[ExcavationConfig] = None) -> ExcavationConfig:
    """Return ``base`` (or defaults) with environment and Flask overrides applied.

    Precedence, lowest to highest: dataclass defaults / ``base``, environment
    variables, then ``current_app.config`` when an application context is active.
    """
    cfg = base or ExcavationConfig()
    changes = {}
    for env_key, (attr, coerce) in _OVERRIDES.items():
        if env_key in os.environ:
            changes[attr] = coerce(os.environ[env_key])
    if has_app_context():
        app_cfg = current_app.config
        for key, (attr, coerce) in _OVERRIDES.items():
            if app_cfg.get(key) is not None:
                changes[attr] = coerce(app_cfg[key])
    return replace(cfg, **changes) if changes else cfg


__all__ = ["ExcavationConfig", "SCATTER_OVERFLOW_MODES", "load_config"]
