"""Configuration models and load utilities."""
from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pidcontrol.control import BoundedRange, PIDController

logger = logging.getLogger(__name__)


@dataclass
class ControllerConfig:
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    period: float = 0.01
    position_tolerance: float = 0.05
    velocity_tolerance: float = math.inf
    # Bounds on the integral term's contribution, not on the raw accumulator
    integrator_min: float = -math.inf
    integrator_max: float = math.inf


@dataclass
class Config:
    controller: ControllerConfig = field(default_factory=ControllerConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Config":
        def _merge(cls, payload):
            if payload is None:
                return cls()
            return cls(**payload)

        return Config(controller=_merge(ControllerConfig, data.get("controller")))


def make_controller(cfg: ControllerConfig) -> PIDController:
    """Build a controller from config, raising the controller's validation errors."""
    return PIDController(
        cfg.kp,
        cfg.ki,
        cfg.kd,
        period=cfg.period,
        position_tolerance=cfg.position_tolerance,
        velocity_tolerance=cfg.velocity_tolerance,
        integrator_range=BoundedRange(cfg.integrator_min, cfg.integrator_max),
    )


def _load_config_dict(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    if p.suffix in {".yml", ".yaml"}:
        data = yaml.safe_load(p.read_text())
    elif p.suffix == ".json":
        data = json.loads(p.read_text())
    else:
        raise ValueError("Config file must be .json or .yaml")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping, got: {type(data).__name__}")
    if isinstance(data, dict) and "include" in data:
        include_paths = data.get("include") or []
        if not isinstance(include_paths, list):
            raise ValueError("include must be a list of file paths")
        merged: Dict[str, Any] = {}
        for inc in include_paths:
            inc_path = Path(inc)
            if not inc_path.is_absolute():
                inc_path = p.parent / inc_path
            logger.debug("Including config %s from %s", inc_path, p)
            inc_data = _load_config_dict(str(inc_path))
            merged = _deep_merge(merged, inc_data)
        # Overlay current file (excluding include)
        data = {k: v for k, v in data.items() if k != "include"}
        merged = _deep_merge(merged, data)
        data = merged
    return data


def _coerce_number(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def _coerce_numbers(data: Dict[str, Any]) -> Dict[str, Any]:
    # Only numeric controller fields accept string numbers such as "inf"
    controller = data.get("controller")
    if not isinstance(controller, dict):
        return data
    numeric = {f.name for f in fields(ControllerConfig) if f.type in ("float", float)}
    out = dict(data)
    out["controller"] = {k: _coerce_number(v) if k in numeric else v for k, v in controller.items()}
    return out


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: Optional[str]) -> Config:
    if not path:
        return Config()
    data = _load_config_dict(path)
    data = _coerce_numbers(data)
    logger.debug("Loaded config from %s", path)
    return Config.from_dict(data)
