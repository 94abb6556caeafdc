"""Diagnostics package.

- round_trip, pretty_month, easter_table: always available
- easter_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["round_trip", "pretty_month", "easter_table", "easter_scatter"]
