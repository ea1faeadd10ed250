"""Validation errors raised when configuring a controller."""
from __future__ import annotations


class PIDConfigError(ValueError):
    pass


class InvalidRangeError(PIDConfigError):
    def __init__(self, minimum: float, maximum: float) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Range minimum must not exceed maximum (got {minimum} > {maximum})")


class InvalidGainError(PIDConfigError):
    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be non-negative (got {value})")


class InvalidToleranceError(PIDConfigError):
    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be non-negative (got {value})")


class InvalidPeriodError(PIDConfigError):
    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"period must be positive (got {value})")
