"""Base entity for FRITZ!DECT Buttons integration."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import callback
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import FritzDectCoordinator
from .coordinator.button_mapper import build_channel_id
from .coordinator.channels import ThingChannels


class entity_data:
    """Descriptor that reads a field from coordinator entity data.

    Requires the owning class to define ``_entity_type`` and inherit from
    ``FritzDectEntity``.

    Usage::

        class FritzBatterySensor(FritzDectEntity, SensorEntity):
            _entity_type = ENTITY_TYPE_BUTTONS
            native_value = entity_data("battery")
    """

    __slots__ = ("key", "default", "transform")

    def __init__(
        self,
        key: str,
        *,
        default: Any = None,
        transform: Any = None,
    ) -> None:
        self.key = key
        self.default = default
        self.transform = transform

    def __get__(self, obj: Any, objtype: Any = None) -> Any:
        if obj is None:
            return self
        data = obj._get_data()
        if data is None:
            return None
        value = data.get(self.key, self.default)
        if self.transform is not None and value is not None:
            return self.transform(value)
        return value


class FritzDectEntity(CoordinatorEntity[FritzDectCoordinator]):
    """Base class for FRITZ!DECT entities."""

    _attr_has_entity_name = True
    _entity_type: str | None = None

    def _get_data(self) -> dict[str, Any] | None:
        """Get this entity's data from the coordinator."""
        if self._entity_type is None:
            return None
        return self.coordinator.get_entity_data(self._entity_type, self._device_id)

    def __init__(
        self,
        coordinator: FritzDectCoordinator,
        device_id: str,
        name: str,
        model: str,
        entry: ConfigEntry,
    ) -> None:
        """Initialize the entity."""
        super().__init__(coordinator)
        self._device_id = device_id
        self._device_name = name
        self._model = model
        self._entry = entry

    @property
    def available(self) -> bool:
        """Return True if entity is available."""
        if not self.coordinator.last_update_success or self.coordinator.data is None:
            return False
        data = self._get_data()
        return data is not None and bool(data.get("available", True))

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return extra state attributes with the device AIN."""
        return {
            "ain": self._device_id,
            "integration": DOMAIN,
        }

    @property
    def device_info(self) -> DeviceInfo:
        """Return device info."""
        return DeviceInfo(
            identifiers={(DOMAIN, self._device_id)},
            name=self._device_name,
            manufacturer="AVM",
            model=self._model or None,
            via_device=(DOMAIN, self._entry.entry_id),
        )

    @callback
    def _handle_coordinator_update(self) -> None:
        """Handle updated data from the coordinator."""
        self.async_write_ha_state()


class FritzDectChannelEntity(FritzDectEntity):
    """Entity that acts as one channel of a button device.

    The entity registers with the device's channel table while it is added
    to HA; the button handler writes to it through that table.
    """

    _channel: str = ""

    def __init__(
        self,
        coordinator: FritzDectCoordinator,
        device_id: str,
        name: str,
        model: str,
        entry: ConfigEntry,
        group: str | None = None,
    ) -> None:
        """Initialize the channel entity."""
        super().__init__(coordinator, device_id, name, model, entry)
        self._group = group
        self._channel_id = build_channel_id(self._channel, group)

    @property
    def channel_id(self) -> str:
        """Return the channel ID this entity answers to."""
        return self._channel_id

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return extra state attributes with the channel ID."""
        attrs = super().extra_state_attributes
        attrs["channel"] = self._channel_id
        return attrs

    async def async_added_to_hass(self) -> None:
        """Register the channel when added to HA."""
        await super().async_added_to_hass()
        channels = self.coordinator.get_channels(self._device_id)
        if channels is not None:
            self.async_on_remove(self._register_channel(channels))

    @abstractmethod
    def _register_channel(self, channels: ThingChannels) -> Callable[[], None]:
        """Register this entity in the channel table, returning the unregister callback."""
