"""Physics-list resolution for simulation engines."""

__version__ = "0.1.0"
