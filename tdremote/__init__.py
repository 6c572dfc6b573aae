"""Remote administration client for deployed TouchDevelop shells."""

__version__ = "0.1.0"
