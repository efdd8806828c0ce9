"""fsview - typed filesystem listings with preference-driven filtering and sorting."""

__version__ = "0.1.0"
