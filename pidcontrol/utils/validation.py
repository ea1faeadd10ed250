"""Validation helpers for controller settings.

Each check returns the value as a float so callers can assign the result
directly. Comparisons follow IEEE-754 rules, so NaN passes every check.
Strings and booleans are rejected rather than converted.
"""
from __future__ import annotations

import numbers

from pidcontrol.errors import InvalidGainError, InvalidPeriodError, InvalidToleranceError


def _as_float(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got: {type(value).__name__}")
    return float(value)


def check_gain(name: str, value: float) -> float:
    value = _as_float(name, value)
    if value < 0:
        raise InvalidGainError(name, value)
    return value


def check_tolerance(name: str, value: float) -> float:
    value = _as_float(name, value)
    if value < 0:
        raise InvalidToleranceError(name, value)
    return value


def check_period(value: float) -> float:
    value = _as_float("period", value)
    if value <= 0:
        raise InvalidPeriodError(value)
    return value
