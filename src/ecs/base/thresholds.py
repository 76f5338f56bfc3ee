"""Temperature threshold pair and reading classification."""

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)
from pydantic_core import PydanticCustomError

THRESHOLD_ORDER_ERROR = "threshold_order"


class ThresholdOrderError(ValueError):
    """Raised when a threshold update would put lower above upper."""

    def __init__(self, lower: int, upper: int) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Lower temperature threshold {lower} must not exceed "
            f"upper temperature threshold {upper}"
        )


class Band(str, Enum):
    """Where a temperature reading sits relative to a threshold pair."""

    BELOW = "below"
    WITHIN = "within"
    ABOVE = "above"


class Thresholds(BaseModel):
    """An ordered pair of temperature thresholds.

    Thresholds are immutable. Updating one bound produces a new pair via
    with_lower() or with_upper(), which refuse any value that would
    break lower <= upper. Both bounds may be equal, in which case the
    WITHIN band shrinks to that single temperature.
    """

    model_config = ConfigDict(frozen=True)

    lower: int = Field(
        description="Readings strictly below this turn the heater on"
    )
    upper: int = Field(
        description="Readings strictly above this open the window"
    )

    @model_validator(mode="after")
    def _check_order(self) -> "Thresholds":
        if self.lower > self.upper:
            raise PydanticCustomError(
                THRESHOLD_ORDER_ERROR,
                "lower ({lower}) must not exceed upper ({upper})",
                {"lower": self.lower, "upper": self.upper},
            )
        return self

    @classmethod
    def ordered(cls, lower: int, upper: int) -> "Thresholds":
        """Build a threshold pair, raising ThresholdOrderError if unordered.

        Prefer this over the constructor when the caller wants the
        domain error rather than a pydantic ValidationError. Values that
        are not integers still raise ValidationError, since they never
        get as far as the ordering check.
        """
        try:
            return cls(lower=lower, upper=upper)
        except ValidationError as err:
            error_types = {error["type"] for error in err.errors()}
            if error_types == {THRESHOLD_ORDER_ERROR}:
                raise ThresholdOrderError(lower, upper) from err
            raise

    def with_lower(self, value: int) -> "Thresholds":
        """Return a new pair with the lower bound replaced."""
        return self.ordered(value, self.upper)

    def with_upper(self, value: int) -> "Thresholds":
        """Return a new pair with the upper bound replaced."""
        return self.ordered(self.lower, value)

    def classify(self, temperature: float) -> Band:
        """Classify a reading against this pair.

        Both bounds belong to the WITHIN band.
        """
        if temperature < self.lower:
            return Band.BELOW
        if temperature > self.upper:
            return Band.ABOVE
        return Band.WITHIN

    def __repr__(self) -> str:
        return f"Thresholds(lower={self.lower}, upper={self.upper})"
