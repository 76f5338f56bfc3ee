"""Control algorithms built on the base process classes."""

from .environmental import EnvironmentalControlSystem

__all__ = [
    "EnvironmentalControlSystem",
]
