"""DriftProximity - geo-proximity filtering for profiles and events."""

__version__ = "0.1.0"
