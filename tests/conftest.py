from uuid import UUID, uuid4

import pytest

from ecs import EnvironmentalControlSystem

from .unit.base.mocks import (
    RecordingHeater,
    RecordingWindow,
    StubTemperatureSensor,
)


@pytest.fixture
def sample_uuid() -> UUID:
    """Provides a consistent UUID for testing."""
    return UUID("12345678-1234-5678-9abc-123456789abc")


@pytest.fixture
def sample_name() -> str:
    """Provides a consistent name for testing."""
    return "test_entity"


@pytest.fixture
def random_uuid() -> UUID:
    """Provides a random UUID for each test."""
    return uuid4()


@pytest.fixture
def sensor() -> StubTemperatureSensor:
    """Provides a sensor stub that reads 0 until told otherwise."""
    return StubTemperatureSensor(name="room_temp")


@pytest.fixture
def heater() -> RecordingHeater:
    """Provides a heater that records every command it receives."""
    return RecordingHeater(name="radiator")


@pytest.fixture
def window() -> RecordingWindow:
    """Provides a window that records every command it receives."""
    return RecordingWindow(name="skylight")


@pytest.fixture
def ecs(sensor, heater, window) -> EnvironmentalControlSystem:
    """Provides a controller with thresholds 25 and 28 wired to the fakes."""
    return EnvironmentalControlSystem(sensor, heater, window, 25, 28)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
