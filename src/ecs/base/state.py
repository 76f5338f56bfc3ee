"""Snapshot of a single regulation cycle."""

from pydantic import BaseModel, ConfigDict, Field

from .thresholds import Band


class Decision(BaseModel):
    """What one regulation cycle saw and what it commanded.

    Decisions are immutable records. They are returned to the caller
    for inspection and are never fed back into the next cycle: every
    cycle decides from its own reading alone.
    """

    model_config = ConfigDict(frozen=True)

    temperature: int | float = Field(
        description="Sensor reading the decision was based on"
    )
    band: Band = Field(description="Classification of the reading")
    heater_on: bool = Field(description="True if the heater was turned on")
    window_open: bool = Field(description="True if the window was opened")

    @classmethod
    def for_band(cls, temperature: int | float, band: Band) -> "Decision":
        """Build the decision implied by a classified reading.

        The heater runs only below the band and the window opens only
        above it; everywhere else both are driven to their resting
        state.
        """
        return cls(
            temperature=temperature,
            band=band,
            heater_on=band is Band.BELOW,
            window_open=band is Band.ABOVE,
        )

    def __repr__(self) -> str:
        heater = "on" if self.heater_on else "off"
        window = "open" if self.window_open else "closed"
        return (
            f"Decision(temperature={self.temperature}, "
            f"band={self.band.value}, heater={heater}, window={window})"
        )
