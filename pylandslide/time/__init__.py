"""Time: fixed-tick stepping."""

from pylandslide.time.ticker import Ticker

__all__ = ["Ticker"]
