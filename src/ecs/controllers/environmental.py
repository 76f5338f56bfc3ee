"""Threshold-based environmental controller driving a heater and a window."""

from typing import Any

from pydantic import ConfigDict, Field

from ecs.base.device import Heater, TemperatureSensor, Window
from ecs.base.process import Controller
from ecs.base.state import Decision
from ecs.base.thresholds import Thresholds


class EnvironmentalControlSystem(Controller):
    """Keep a space between two temperatures with a heater and a window.

    Each call to regulate() reads the sensor once and issues exactly one
    heater command and exactly one window command:

    - below the lower threshold: heater on, window closed
    - between the thresholds, bounds included: heater off, window closed
    - above the upper threshold: heater off, window open

    Commands are sent every cycle whether or not they change anything,
    so a device that missed or forgot a command is corrected on the next
    cycle.

    The thresholds can be changed between cycles through the
    lower_temperature_threshold and upper_temperature_threshold
    properties. An assignment that would put lower above upper raises
    ThresholdOrderError and leaves both thresholds as they were.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(
        default="ecs",
        min_length=1,
        description="Human-readable name for this controller",
    )
    thresholds: Thresholds = Field(
        description="Current lower and upper temperature thresholds"
    )

    def __init__(
        self,
        sensor: TemperatureSensor,
        heater: Heater,
        window: Window,
        lower: int,
        upper: int,
        **data: Any,
    ) -> None:
        """Initialize the controller with its devices and thresholds.

        Args:
            sensor: Source of temperature readings
            heater: Heater to switch on and off
            window: Window to open and close
            lower: Initial lower temperature threshold
            upper: Initial upper temperature threshold
            **data: Additional field values, such as name

        Raises:
            ThresholdOrderError: If lower is greater than upper
        """
        super().__init__(thresholds=Thresholds.ordered(lower, upper), **data)
        # Runtime collaborators (not serialized)
        self._sensor = sensor
        self._heater = heater
        self._window = window
        # Per-cycle scratch, cleared when the cycle ends
        self._temperature: int | float | None = None
        self._decision: Decision | None = None

    @property
    def lower_temperature_threshold(self) -> int:
        """Readings strictly below this turn the heater on."""
        return self.thresholds.lower

    @lower_temperature_threshold.setter
    def lower_temperature_threshold(self, value: int) -> None:
        previous = self.thresholds.lower
        self.thresholds = self.thresholds.with_lower(value)
        self._logger.info(
            "Lower temperature threshold changed from %s to %s",
            previous,
            value,
        )

    @property
    def upper_temperature_threshold(self) -> int:
        """Readings strictly above this open the window."""
        return self.thresholds.upper

    @upper_temperature_threshold.setter
    def upper_temperature_threshold(self, value: int) -> None:
        previous = self.thresholds.upper
        self.thresholds = self.thresholds.with_upper(value)
        self._logger.info(
            "Upper temperature threshold changed from %s to %s",
            previous,
            value,
        )

    def regulate(self) -> Decision:
        """Run one control cycle.

        Returns:
            The decision that was applied to the heater and window
        """
        return self.execute()

    def _execute(self) -> Decision:
        try:
            return super()._execute()
        finally:
            self._temperature = None
            self._decision = None

    def _import_state(self) -> None:
        self._temperature = self._sensor.read()

    def _think(self) -> None:
        temperature = self._temperature
        band = self.thresholds.classify(temperature)
        self._decision = Decision.for_band(temperature, band)

    def _export_state(self) -> Decision:
        """Send one command to each device and return the decision."""
        decision = self._decision
        if decision.heater_on:
            self._heater.turn_on()
        else:
            self._heater.turn_off()

        if decision.window_open:
            self._window.open()
        else:
            self._window.close()

        self._logger.debug(
            "Temperature %s is %s %r: heater %s, window %s",
            decision.temperature,
            decision.band.value,
            self.thresholds,
            "on" if decision.heater_on else "off",
            "open" if decision.window_open else "closed",
        )
        return decision
