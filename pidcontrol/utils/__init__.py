"""Utility helpers: setting validation."""
from pidcontrol.utils.validation import check_gain, check_period, check_tolerance

__all__ = ["check_gain", "check_period", "check_tolerance"]
