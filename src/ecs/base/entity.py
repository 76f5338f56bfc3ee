"""Base entity class for named controllers and devices."""

from typing import Any
from uuid import NAMESPACE_DNS, UUID, getnode, uuid4, uuid5

from pydantic import BaseModel, ConfigDict, Field

# Namespace for UUIDs derived from hardware addresses
HARDWARE_NAMESPACE = uuid5(NAMESPACE_DNS, "hardware.ecs.local")


def hardware_uuid(unique_id: str) -> UUID:
    """Return the UUID for a hardware address on this machine.

    The same address on the same machine always maps to the same UUID,
    so a sensor on /dev/i2c-1 keeps its identity across restarts.
    """
    return uuid5(HARDWARE_NAMESPACE, f"{getnode():012x}/{unique_id}")


class Entity(BaseModel):
    """Something in the control loop that can be named and told apart.

    Sensors, actuators and the controllers that drive them are all
    entities. Extra keyword arguments are kept as fields, which lets an
    installation tag devices with its own metadata (room, floor, bus
    address) without subclassing.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    uuid: UUID = Field(
        default_factory=uuid4,
        description="Unique identifier for this entity",
    )
    name: str = Field(
        min_length=1, description="Human-readable name for this entity"
    )

    def __init__(self, unique_id: str | None = None, **data: Any) -> None:
        """Initialize Entity, deriving the UUID from unique_id if given.

        Args:
            unique_id: Optional hardware address. Ignored when an
                explicit uuid is passed.
            **data: Field values for the entity
        """
        if unique_id is not None and "uuid" not in data:
            data["uuid"] = hardware_uuid(unique_id)
        super().__init__(**data)

    def __str__(self) -> str:
        return f"{self.__class__.__name__} '{self.name}'"

    def __repr__(self) -> str:
        """Return name first, then any other fields."""
        fields = [f"name='{self.name}'", f"uuid={self.uuid}"]
        for field_name, field_value in self.model_dump(
            exclude={"name", "uuid"}
        ).items():
            fields.append(f"{field_name}={field_value!r}")

        return f"{self.__class__.__name__}({', '.join(fields)})"
