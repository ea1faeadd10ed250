"""Discrete-time PID controller for embedding in closed control loops."""
from pidcontrol.config import Config, ControllerConfig, load_config, make_controller
from pidcontrol.control import BoundedRange, PIDController, PIDGains
from pidcontrol.errors import (
    InvalidGainError,
    InvalidPeriodError,
    InvalidRangeError,
    InvalidToleranceError,
    PIDConfigError,
)

__all__ = [
    "BoundedRange",
    "Config",
    "ControllerConfig",
    "InvalidGainError",
    "InvalidPeriodError",
    "InvalidRangeError",
    "InvalidToleranceError",
    "PIDConfigError",
    "PIDController",
    "PIDGains",
    "load_config",
    "make_controller",
]
