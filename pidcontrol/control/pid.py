"""PID controller for scalar signals."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from pidcontrol.control.bounded_range import BoundedRange
from pidcontrol.utils.validation import check_gain, check_period, check_tolerance

logger = logging.getLogger(__name__)


@dataclass
class PIDGains:
    kp: float
    ki: float
    kd: float


class PIDController:
    """Discrete PID controller driven by caller-supplied samples.

    ``position_error`` and ``velocity_error`` start as NaN, meaning no sample
    has been seen yet. The derivative term is skipped until a previous error
    exists, and ``at_setpoint`` stays false while either error is NaN.
    """

    def __init__(
        self,
        kp: float,
        ki: float,
        kd: float,
        period: float = 0.01,
        position_tolerance: float = 0.05,
        velocity_tolerance: float = math.inf,
        integrator_range: BoundedRange | None = None,
    ) -> None:
        self._kp = check_gain("kp", kp)
        self._ki = check_gain("ki", ki)
        self._kd = check_gain("kd", kd)
        self._period = check_period(period)
        self._position_tolerance = check_tolerance("position_tolerance", position_tolerance)
        self._velocity_tolerance = check_tolerance("velocity_tolerance", velocity_tolerance)
        self._integrator_range = BoundedRange.unbounded()
        if integrator_range is not None:
            self.integrator_range = integrator_range
        self._position_error = math.nan
        self._velocity_error = math.nan
        self._total_error = 0.0

    @classmethod
    def from_gains(cls, gains: PIDGains, **kwargs) -> "PIDController":
        return cls(gains.kp, gains.ki, gains.kd, **kwargs)

    @property
    def kp(self) -> float:
        """Proportional gain."""
        return self._kp

    @kp.setter
    def kp(self, value: float) -> None:
        self._kp = check_gain("kp", value)

    @property
    def ki(self) -> float:
        """Integral gain."""
        return self._ki

    @ki.setter
    def ki(self, value: float) -> None:
        # The accumulator is not rescaled against the new gain.
        self._ki = check_gain("ki", value)

    @property
    def kd(self) -> float:
        """Derivative gain."""
        return self._kd

    @kd.setter
    def kd(self, value: float) -> None:
        self._kd = check_gain("kd", value)

    @property
    def gains(self) -> PIDGains:
        return PIDGains(kp=self._kp, ki=self._ki, kd=self._kd)

    @gains.setter
    def gains(self, value: PIDGains) -> None:
        # Validate all three before assigning any
        kp = check_gain("kp", value.kp)
        ki = check_gain("ki", value.ki)
        kd = check_gain("kd", value.kd)
        self._kp, self._ki, self._kd = kp, ki, kd

    @property
    def period(self) -> float:
        """Time between calls to ``calculate`` in seconds."""
        return self._period

    @period.setter
    def period(self, value: float) -> None:
        self._period = check_period(value)

    @property
    def position_tolerance(self) -> float:
        return self._position_tolerance

    @position_tolerance.setter
    def position_tolerance(self, value: float) -> None:
        self._position_tolerance = check_tolerance("position_tolerance", value)

    @property
    def velocity_tolerance(self) -> float:
        return self._velocity_tolerance

    @velocity_tolerance.setter
    def velocity_tolerance(self, value: float) -> None:
        self._velocity_tolerance = check_tolerance("velocity_tolerance", value)

    @property
    def integrator_range(self) -> BoundedRange:
        """Bounds on the integral term's contribution to the output."""
        return self._integrator_range

    @integrator_range.setter
    def integrator_range(self, value: BoundedRange) -> None:
        if not isinstance(value, BoundedRange):
            raise TypeError(f"integrator_range must be a BoundedRange, got: {type(value).__name__}")
        logger.debug("Integrator range set to [%s, %s]", value.minimum, value.maximum)
        self._integrator_range = value

    @property
    def position_error(self) -> float:
        return self._position_error

    @property
    def velocity_error(self) -> float:
        return self._velocity_error

    def calculate(self, actual_position: float, desired_position: float, delta_time: float | None = None) -> float:
        """Advance the controller by one sample and return the correction.

        ``delta_time`` defaults to ``period``. A zero ``delta_time`` yields an
        infinite or NaN derivative term instead of raising.
        """
        if delta_time is None:
            delta_time = self._period
        last_error = self._position_error
        self._position_error = desired_position - actual_position

        d_term = 0.0
        if not math.isnan(last_error):
            with np.errstate(divide="ignore", invalid="ignore"):
                self._velocity_error = float(np.float64(self._position_error - last_error) / delta_time)
            d_term = self._velocity_error * self._kd

        if self._ki != 0.0:
            bounds = BoundedRange(self._integrator_range.minimum / self._ki, self._integrator_range.maximum / self._ki)
            total = self._total_error + self._position_error * delta_time
            if total < bounds.minimum or total > bounds.maximum:
                logger.debug("Integrator saturated at %s (unclamped %s)", bounds.clamp(total), total)
            self._total_error = bounds.clamp(total)

        return self._kp * self._position_error + self._ki * self._total_error + d_term

    def at_setpoint(self) -> bool:
        return abs(self._position_error) <= self._position_tolerance and abs(self._velocity_error) <= self._velocity_tolerance

    def reset(self) -> None:
        logger.debug("Resetting PID error state")
        self._position_error = math.nan
        self._velocity_error = math.nan
        self._total_error = 0.0

    def __repr__(self) -> str:
        return (
            f"PIDController(kp={self._kp}, ki={self._ki}, kd={self._kd}, period={self._period}, "
            f"position_tolerance={self._position_tolerance}, velocity_tolerance={self._velocity_tolerance})"
        )
