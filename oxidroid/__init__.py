"""Terminal dashboard for system monitoring, with a background metrics collector."""

__version__ = "0.1.0"