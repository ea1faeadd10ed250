"""Control modules: PID controller and the bounded range used by its integrator."""
from pidcontrol.control.bounded_range import BoundedRange
from pidcontrol.control.pid import PIDController, PIDGains

__all__ = ["BoundedRange", "PIDController", "PIDGains"]
