"""Base classes for the ecs environmental control package."""

from ecs.base.device import Device, Heater, TemperatureSensor, Window
from ecs.base.entity import Entity
from ecs.base.process import Controller, Process
from ecs.base.state import Decision
from ecs.base.thresholds import Band, ThresholdOrderError, Thresholds

__all__ = [
    "Band",
    "Controller",
    "Decision",
    "Device",
    "Entity",
    "Heater",
    "Process",
    "TemperatureSensor",
    "ThresholdOrderError",
    "Thresholds",
    "Window",
]
