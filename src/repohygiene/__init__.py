"""repohygiene — local secret detection for source trees."""

__version__ = "0.3.0"
