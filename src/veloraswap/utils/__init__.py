"""Utility modules for veloraswap."""

from veloraswap.utils.units import format_units, parse_units

__all__ = ["format_units", "parse_units"]
