"""Timestamp service library: message types and a service that returns current or streamed timestamps."""

__version__ = "0.1.0"
__all__ = ["__version__"]