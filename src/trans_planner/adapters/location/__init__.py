"""Location platform adapters."""

from trans_planner.adapters.location.fixed_location_platform import FixedLocationPlatform

__all__ = ["FixedLocationPlatform"]
