"""Pytest fixtures for FRITZ!DECT Buttons tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add repo root to path so custom_components can be found
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT))

from abc import ABCMeta
from typing import Any
from unittest.mock import MagicMock

import pytest

_HA_MODULES = [
    "homeassistant",
    "homeassistant.components",
    "homeassistant.components.device_automation",
    "homeassistant.components.event",
    "homeassistant.components.homeassistant",
    "homeassistant.components.homeassistant.triggers",
    "homeassistant.components.logbook",
    "homeassistant.components.sensor",
    "homeassistant.config_entries",
    "homeassistant.const",
    "homeassistant.core",
    "homeassistant.exceptions",
    "homeassistant.helpers",
    "homeassistant.helpers.device_registry",
    "homeassistant.helpers.entity_platform",
    "homeassistant.helpers.issue_registry",
    "homeassistant.helpers.trigger",
    "homeassistant.helpers.typing",
    "homeassistant.helpers.update_coordinator",
]

# Test constants
TEST_ENTRY_ID = "test_entry_id"
TEST_AIN_HANFUN = "11324 0244498-1"
TEST_AIN_DECT400 = "13096 0007307"
TEST_AIN_DECT440 = "09995 0000901"


class MockHomeAssistantError(Exception):
    """Stand-in for homeassistant.exceptions.HomeAssistantError."""


class MockConfigEntryNotReady(MockHomeAssistantError):
    """Stand-in for homeassistant.exceptions.ConfigEntryNotReady."""


class MockUpdateFailed(Exception):
    """Stand-in for homeassistant.helpers.update_coordinator.UpdateFailed."""


class MockDataUpdateCoordinator:
    """Minimal DataUpdateCoordinator with working listeners."""

    def __init__(self, hass, logger, *, name=None, update_interval=None, **kwargs):
        self.hass = hass
        self.logger = logger
        self.name = name
        self.update_interval = update_interval
        self.data = None
        self.last_update_success = True
        self._listeners: dict[object, Any] = {}

    def __class_getitem__(cls, item):
        return cls

    def async_add_listener(self, update_callback, context=None):
        key = object()
        self._listeners[key] = update_callback

        def remove_listener() -> None:
            self._listeners.pop(key, None)

        return remove_listener

    def async_update_listeners(self) -> None:
        for update_callback in list(self._listeners.values()):
            update_callback()

    def async_set_updated_data(self, data) -> None:
        self.data = data
        self.last_update_success = True
        self.async_update_listeners()

    async def async_refresh(self) -> None:
        self.data = await self._async_update_data()
        self.last_update_success = True
        self.async_update_listeners()

    async def async_config_entry_first_refresh(self) -> None:
        self.data = await self._async_update_data()


class MockCoordinatorEntity(metaclass=ABCMeta):
    """Minimal CoordinatorEntity."""

    _attr_unique_id: str | None = None

    def __init__(self, coordinator):
        self.coordinator = coordinator
        self.hass = None
        self._on_remove: list[Any] = []
        self.write_count = 0

    def __class_getitem__(cls, item):
        return cls

    @property
    def unique_id(self) -> str | None:
        return self._attr_unique_id

    async def async_added_to_hass(self) -> None:
        pass

    def async_on_remove(self, func) -> None:
        self._on_remove.append(func)

    async def async_will_remove_from_hass(self) -> None:
        while self._on_remove:
            self._on_remove.pop()()

    def async_write_ha_state(self) -> None:
        self.write_count += 1


class MockEventEntity:
    """Minimal EventEntity that records triggered events."""

    _attr_event_types: list[str] = []

    @property
    def event_types(self) -> list[str]:
        return self._attr_event_types

    def _trigger_event(self, event_type, event_attributes=None):
        if event_type not in self.event_types:
            raise ValueError(f"Invalid event type {event_type}")
        self.triggered = [*getattr(self, "triggered", []), event_type]


class MockSensorEntity:
    """Minimal SensorEntity."""


class MockFlow:
    """Minimal ConfigFlow / OptionsFlow."""

    def __init_subclass__(cls, domain=None, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.domain = domain

    def __init__(self):
        self.unique_id = None
        self.configured_ids: set[str] = set()

    async def async_set_unique_id(self, unique_id):
        self.unique_id = unique_id

    def _abort_if_unique_id_configured(self):
        if self.unique_id in self.configured_ids:
            raise RuntimeError("already_configured")

    def async_create_entry(self, *, title, data):
        return {"type": "create_entry", "title": title, "data": data}

    def async_show_form(self, *, step_id, data_schema=None, errors=None):
        return {"type": "form", "step_id": step_id, "data_schema": data_schema, "errors": errors or {}}


@pytest.fixture(autouse=True)
def ha_stubs():
    """Mock HA modules so the integration imports without Home Assistant."""
    saved_pkg = {}
    for key in list(sys.modules):
        if key.startswith("custom_components.fritzdect"):
            saved_pkg[key] = sys.modules.pop(key)

    saved = {}
    for mod in _HA_MODULES:
        if mod in sys.modules:
            saved[mod] = sys.modules[mod]
        sys.modules[mod] = MagicMock()

    sys.modules["homeassistant.core"].callback = lambda f: f
    sys.modules["homeassistant.exceptions"].HomeAssistantError = MockHomeAssistantError
    sys.modules["homeassistant.exceptions"].ConfigEntryNotReady = MockConfigEntryNotReady
    update_coordinator = sys.modules["homeassistant.helpers.update_coordinator"]
    update_coordinator.DataUpdateCoordinator = MockDataUpdateCoordinator
    update_coordinator.CoordinatorEntity = MockCoordinatorEntity
    update_coordinator.UpdateFailed = MockUpdateFailed
    sys.modules["homeassistant.helpers.device_registry"].DeviceInfo = dict
    sys.modules["homeassistant.components.event"].EventEntity = MockEventEntity
    sys.modules["homeassistant.components.sensor"].SensorEntity = MockSensorEntity
    sys.modules["homeassistant.config_entries"].ConfigFlow = MockFlow
    sys.modules["homeassistant.config_entries"].OptionsFlow = MockFlow
    sys.modules["homeassistant.components.logbook"].LOGBOOK_ENTRY_NAME = "name"
    sys.modules["homeassistant.components.logbook"].LOGBOOK_ENTRY_MESSAGE = "message"
    ha_const = sys.modules["homeassistant.const"]
    ha_const.CONF_DEVICE_ID = "device_id"
    ha_const.CONF_DOMAIN = "domain"
    ha_const.CONF_PLATFORM = "platform"
    ha_const.CONF_TYPE = "type"

    # Submodules are imported as package attributes
    sys.modules["homeassistant"].config_entries = sys.modules["homeassistant.config_entries"]
    helpers = sys.modules["homeassistant.helpers"]
    helpers.device_registry = sys.modules["homeassistant.helpers.device_registry"]
    helpers.issue_registry = sys.modules["homeassistant.helpers.issue_registry"]

    yield

    for mod in _HA_MODULES:
        if mod in saved:
            sys.modules[mod] = saved[mod]
        else:
            sys.modules.pop(mod, None)

    for key in list(sys.modules):
        if key.startswith("custom_components.fritzdect"):
            del sys.modules[key]
    sys.modules.update(saved_pkg)


# =============================================================================
# Mock device data (AHA field names)
# =============================================================================


def make_hanfun_device(last_pressed: int = 0, **overrides: Any) -> dict[str, Any]:
    """Return a HAN-FUN button device dictionary."""
    device = {
        "ain": TEST_AIN_HANFUN,
        "name": "Hallway Button",
        "productname": "HAN-FUN",
        "functionbitmask": 8200,  # HAN-FUN unit + HAN-FUN button
        "present": True,
        "buttons": [
            {"identifier": f"{TEST_AIN_HANFUN}", "name": "Hallway Button", "lastpressedtimestamp": last_pressed},
        ],
    }
    device.update(overrides)
    return device


def make_dect400_device(short_pressed: int = 0, long_pressed: int = 0, **overrides: Any) -> dict[str, Any]:
    """Return a FRITZ!DECT 400 device dictionary."""
    device = {
        "ain": TEST_AIN_DECT400,
        "name": "Bedroom Switch",
        "productname": "FRITZ!DECT 400",
        "functionbitmask": 1048864,  # battery + AVM button + ...
        "present": True,
        "battery": 100,
        "batterylow": False,
        "buttons": [
            {"identifier": f"{TEST_AIN_DECT400}-1", "name": "Bedroom Switch: kurz", "lastpressedtimestamp": short_pressed},
            {"identifier": f"{TEST_AIN_DECT400}-9", "name": "Bedroom Switch: lang", "lastpressedtimestamp": long_pressed},
        ],
    }
    device.update(overrides)
    return device


def make_dect440_device(timestamps: dict[str, int] | None = None, **overrides: Any) -> dict[str, Any]:
    """Return a FRITZ!DECT 440 device dictionary; timestamps map suffix to lastpressedtimestamp."""
    timestamps = timestamps if timestamps is not None else {"-1": 0, "-3": 0, "-5": 0, "-7": 0}
    device = {
        "ain": TEST_AIN_DECT440,
        "name": "Living Room Switch",
        "productname": "FRITZ!DECT 440",
        "functionbitmask": 1048864,
        "present": True,
        "battery": 80,
        "batterylow": False,
        "buttons": [
            {"identifier": f"{TEST_AIN_DECT440}{suffix}", "name": f"Taster {suffix}", "lastpressedtimestamp": ts}
            for suffix, ts in timestamps.items()
        ],
    }
    device.update(overrides)
    return device
