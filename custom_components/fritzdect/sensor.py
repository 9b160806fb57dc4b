"""Sensor platform for FRITZ!DECT Buttons integration."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from homeassistant.components.sensor import SensorDeviceClass, SensorEntity, SensorStateClass
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE, EntityCategory
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .base_entity import FritzDectChannelEntity, FritzDectEntity, entity_data
from .const import CHANNEL_LAST_CHANGE, DOMAIN, ENTITY_TYPE_BUTTONS
from .coordinator import FritzDectCoordinator
from .coordinator.channels import ThingChannels
from .coordinator.processors import channel_groups


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up FRITZ!DECT sensors from a config entry."""
    coordinator: FritzDectCoordinator = hass.data[DOMAIN][entry.entry_id]["coordinator"]

    entities: list[SensorEntity] = []

    if coordinator.data and ENTITY_TYPE_BUTTONS in coordinator.data:
        for button in coordinator.data[ENTITY_TYPE_BUTTONS]:
            for group in channel_groups(button):
                entities.append(
                    FritzButtonLastChangeSensor(
                        coordinator,
                        button["id"],
                        button["name"],
                        button.get("model", ""),
                        entry,
                        group=group,
                    )
                )
            # HAN-FUN buttons may not report a battery
            if button.get("battery") is not None:
                entities.append(
                    FritzBatterySensor(
                        coordinator,
                        button["id"],
                        button["name"],
                        button.get("model", ""),
                        entry,
                    )
                )

    if entities:
        async_add_entities(entities)


class FritzButtonLastChangeSensor(FritzDectChannelEntity, SensorEntity):
    """Time of the last press of a FRITZ! DECT button."""

    _attr_device_class = SensorDeviceClass.TIMESTAMP
    _attr_translation_key = "last_change"
    _entity_type = ENTITY_TYPE_BUTTONS
    _channel = CHANNEL_LAST_CHANGE

    def __init__(
        self,
        coordinator: FritzDectCoordinator,
        device_id: str,
        name: str,
        model: str,
        entry: ConfigEntry,
        group: str | None = None,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, device_id, name, model, entry, group)
        self._attr_unique_id = f"{DOMAIN}_{device_id}_{self._channel_id}"
        self._attr_name = "Last change" if group is None else f"{group.replace('-', ' ').capitalize()} last change"
        self._attr_native_value: datetime | None = None

    @property
    def unique_id(self) -> str:
        """Return unique ID."""
        return self._attr_unique_id

    @property
    def native_value(self) -> datetime | None:
        """Return the time of the last press, None if never pressed."""
        return self._attr_native_value

    def _register_channel(self, channels: ThingChannels) -> Callable[[], None]:
        return channels.register_state_channel(self._channel_id, self)

    @callback
    def set_channel_state(self, value: datetime | None) -> None:
        """Update the channel state."""
        if value == self._attr_native_value:
            return
        self._attr_native_value = value
        self.async_write_ha_state()


class FritzBatterySensor(FritzDectEntity, SensorEntity):
    """Battery level of a FRITZ! DECT button."""

    _attr_device_class = SensorDeviceClass.BATTERY
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = PERCENTAGE
    _attr_entity_category = EntityCategory.DIAGNOSTIC
    _attr_translation_key = "battery"
    _entity_type = ENTITY_TYPE_BUTTONS

    native_value = entity_data("battery")

    def __init__(
        self,
        coordinator: FritzDectCoordinator,
        device_id: str,
        name: str,
        model: str,
        entry: ConfigEntry,
    ) -> None:
        """Initialize the battery sensor."""
        super().__init__(coordinator, device_id, name, model, entry)
        self._attr_unique_id = f"{DOMAIN}_{device_id}_battery"
        self._attr_name = "Battery"

    @property
    def unique_id(self) -> str:
        """Return unique ID."""
        return self._attr_unique_id

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return extra state attributes including the low battery flag."""
        attrs = super().extra_state_attributes
        data = self._get_data()
        if data is not None:
            attrs["battery_low"] = data.get("battery_low", False)
        return attrs
