"""Multi-currency HD wallet configuration and coin dispatch."""

__version__ = "0.1.0"
