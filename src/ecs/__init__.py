"""Threshold-based environmental control of a heater and a window."""

# Core classes
from .base import (
    Band,
    Controller,
    Decision,
    Device,
    Entity,
    Heater,
    Process,
    TemperatureSensor,
    ThresholdOrderError,
    Thresholds,
    Window,
)

# Controllers
from .controllers import EnvironmentalControlSystem

__all__ = [
    "Band",
    "Controller",
    "Decision",
    "Device",
    "Entity",
    "EnvironmentalControlSystem",
    "Heater",
    "Process",
    "TemperatureSensor",
    "ThresholdOrderError",
    "Thresholds",
    "Window",
]
