"""Process classes for control system execution.

A Process is a computational unit that runs one cycle per call to
execute(). Data gathered during a cycle lives on the instance only
between the import and export phases of that cycle; nothing computed in
one cycle may influence the next.
"""

import logging
from abc import ABC
from typing import Any

from pydantic import ConfigDict, Field

from .entity import Entity


class Process(Entity, ABC):
    """Base class for computational units in the control system.

    Each cycle runs the three-method pattern:
    _import_state() → _think() → _export_state()

    - _import_state() gathers inputs, for example by reading sensors
    - _think() turns those inputs into a decision
    - _export_state() acts on the decision and returns it

    Subclasses typically override all three. A cycle that raises
    propagates the exception unchanged and is not counted.
    """

    model_config = ConfigDict(extra="allow", frozen=False)

    execution_count: int = Field(
        default=0,
        description="Number of successfully completed execution cycles",
        ge=0,
    )

    def __init__(self, **data: Any) -> None:
        """Initialize process with logging and execution tracking."""
        super().__init__(**data)
        # Create a logger specific to this process instance
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}."
            f"{self.__class__.__name__}."
            f"{self.name}"
        )

    def execute(self) -> Any:
        """Run one cycle of this process.

        Template method that calls _execute() and, on success, updates
        the execution count.

        Returns:
            Whatever the cycle exported
        """
        result = self._execute()
        self.update_execution_count()
        return result

    def _execute(self) -> Any:
        """Run the three-method pattern.

        Can be overridden by subclasses that need a custom execution
        flow.
        """
        self._import_state()
        self._think()
        return self._export_state()

    def _import_state(self) -> None:
        """Gather the inputs for this cycle.

        Default implementation does nothing.
        """

    def _think(self) -> None:
        """Core computation logic using the imported inputs.

        Default implementation does nothing.
        """

    def _export_state(self) -> Any:
        """Act on the outcome of _think() and return it.

        Default implementation returns None.
        """
        return None

    def update_execution_count(self) -> None:
        """Update execution count after a successful cycle.

        Called automatically by execute(). Can be overridden by
        subclasses to customize execution count behavior.
        """
        self.execution_count += 1


class Controller(Process, ABC):
    """Abstract base class for control logic.

    A Controller reads Sensors and commands Actuators. It owns no
    actuator state of its own: the devices are the single source of
    truth for whether a heater is running or a window is open, so every
    cycle re-asserts the commands implied by its own inputs.
    """
