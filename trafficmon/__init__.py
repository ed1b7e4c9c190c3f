"""Network traffic, CPU usage and hardware sensor helpers, with a traffic history calendar."""

__version__ = "0.1.0"