"""Diagnostics package.

Light-weight checks and tables. The leap-month plot needs the optional
numpy + matplotlib extras; everything else is pure Python.
"""

__all__ = ["round_trip", "new_years_table", "leap_months"]
