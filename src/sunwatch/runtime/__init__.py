"""Runtime components for the sunwatch tools."""

from .clock import Clock

__all__ = [
    "Clock",
]
