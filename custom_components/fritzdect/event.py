"""Event platform for FRITZ!DECT Buttons integration."""

from __future__ import annotations

from collections.abc import Callable

from homeassistant.components.event import EventDeviceClass, EventEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .base_entity import FritzDectChannelEntity
from .const import (
    CHANNEL_PRESS,
    DOMAIN,
    ENTITY_TYPE_BUTTONS,
    EVENT_LONG_PRESSED,
    EVENT_PRESSED,
    EVENT_SHORT_PRESSED,
)
from .coordinator import FritzDectCoordinator
from .coordinator.button_mapper import DeviceMode
from .coordinator.channels import ThingChannels
from .coordinator.processors import channel_groups


def event_types_for_mode(mode: DeviceMode) -> list[str]:
    """Return the events a press channel of the given mode can emit."""
    if mode is DeviceMode.SHORT_LONG_PRESS:
        return [EVENT_SHORT_PRESSED, EVENT_LONG_PRESSED]
    return [EVENT_PRESSED]


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up FRITZ!DECT button press events from a config entry."""
    coordinator: FritzDectCoordinator = hass.data[DOMAIN][entry.entry_id]["coordinator"]

    entities: list[EventEntity] = []

    if coordinator.data and ENTITY_TYPE_BUTTONS in coordinator.data:
        for button in coordinator.data[ENTITY_TYPE_BUTTONS]:
            for group in channel_groups(button):
                entities.append(
                    FritzButtonPressEvent(
                        coordinator,
                        button["id"],
                        button["name"],
                        button.get("model", ""),
                        entry,
                        mode=button["mode"],
                        group=group,
                    )
                )

    if entities:
        async_add_entities(entities)


class FritzButtonPressEvent(FritzDectChannelEntity, EventEntity):
    """Press trigger channel of a FRITZ! DECT button."""

    _attr_device_class = EventDeviceClass.BUTTON
    _attr_translation_key = "press"
    _entity_type = ENTITY_TYPE_BUTTONS
    _channel = CHANNEL_PRESS

    def __init__(
        self,
        coordinator: FritzDectCoordinator,
        device_id: str,
        name: str,
        model: str,
        entry: ConfigEntry,
        mode: DeviceMode,
        group: str | None = None,
    ) -> None:
        """Initialize the press event entity."""
        super().__init__(coordinator, device_id, name, model, entry, group)
        self._attr_unique_id = f"{DOMAIN}_{device_id}_{self._channel_id}"
        self._attr_name = "Press" if group is None else f"{group.replace('-', ' ').capitalize()} press"
        self._attr_event_types = event_types_for_mode(mode)

    @property
    def event_types(self) -> list[str]:
        """Return supported event types."""
        return self._attr_event_types

    @property
    def unique_id(self) -> str:
        """Return unique ID."""
        return self._attr_unique_id

    def _register_channel(self, channels: ThingChannels) -> Callable[[], None]:
        return channels.register_trigger_channel(self._channel_id, self)

    @callback
    def trigger_channel(self, event: str) -> None:
        """Emit a press event on this channel."""
        self._trigger_event(event)
        self.async_write_ha_state()
