"""Collaborator contracts for the hardware the ECS talks to."""

from abc import ABC, abstractmethod

from pydantic import ConfigDict

from .entity import Entity


class Device(Entity, ABC):
    """Base class for hardware interface points (sensors and actuators).

    A Device is a live handle on a piece of hardware, not a snapshot,
    so unlike a plain Entity it is mutable: concrete drivers are free to
    keep connection handles or cached readings on the instance.

    The ECS only relies on the methods declared by the subclasses below.
    Anything exposing the same methods can be injected in their place.
    """

    model_config = ConfigDict(frozen=False)


class TemperatureSensor(Device):
    """A device that reports the current temperature."""

    @abstractmethod
    def read(self) -> int:
        """Return the current temperature reading."""


class Heater(Device):
    """An actuator that heats the controlled space.

    Both commands are idempotent: turning on a heater that is already on
    is a no-op as far as the caller is concerned.
    """

    @abstractmethod
    def turn_on(self) -> None:
        """Switch the heater on."""

    @abstractmethod
    def turn_off(self) -> None:
        """Switch the heater off."""


class Window(Device):
    """An actuator that vents the controlled space.

    Both commands are idempotent.
    """

    @abstractmethod
    def open(self) -> None:
        """Open the window."""

    @abstractmethod
    def close(self) -> None:
        """Close the window."""
