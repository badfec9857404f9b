"""Diagnostics package.

Optional tools (require the diagnostics extras: numpy, matplotlib).
"""

__all__ = ["bayram_drift"]
