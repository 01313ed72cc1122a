"""Self-hosted analytics for your code habits."""

__version__ = "0.1.0"
