"""API components for sunwatch."""

from .rest import SunRestAPI

__all__ = [
    "SunRestAPI",
]
