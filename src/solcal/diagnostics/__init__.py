"""Diagnostics package.

- events_table: plain-text table of the four events per year (no extras)
- longitude_scan: apparent-longitude residuals over 1900..2100
  (requires: pip install "solcal[diagnostics]")
"""

__all__ = ["events_table", "longitude_scan"]
