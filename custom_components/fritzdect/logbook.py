"""Logbook support for FRITZ!DECT Buttons integration."""

from __future__ import annotations

from collections.abc import Callable

from homeassistant.components.logbook import LOGBOOK_ENTRY_MESSAGE, LOGBOOK_ENTRY_NAME
from homeassistant.core import Event, HomeAssistant, callback

from .const import (
    CHANNEL_GROUP_SEPARATOR,
    DOMAIN,
    EVENT_BUTTON_PRESS,
    EVENT_LONG_PRESSED,
    EVENT_PRESSED,
    EVENT_SHORT_PRESSED,
)

EVENT_TYPE_TO_MESSAGE = {
    EVENT_PRESSED: "was pressed",
    EVENT_SHORT_PRESSED: "was short-pressed",
    EVENT_LONG_PRESSED: "was long-pressed",
}


@callback
def async_describe_events(
    hass: HomeAssistant,
    async_describe_event: Callable[[str, str, Callable[[Event], dict[str, str]]], None],
) -> None:
    """Describe logbook events."""

    @callback
    def async_describe_button_event(event: Event) -> dict[str, str]:
        """Describe a FRITZ!DECT button press in the logbook."""
        data = event.data
        device_name = data.get("device_name", "Unknown device")
        event_type = data.get("event_type", "unknown")
        channel = data.get("channel", "")

        message = EVENT_TYPE_TO_MESSAGE.get(event_type, f"triggered {event_type}")
        if CHANNEL_GROUP_SEPARATOR in channel:
            group = channel.split(CHANNEL_GROUP_SEPARATOR, 1)[0]
            message = f"{group.replace('-', ' ')} {message}"

        return {
            LOGBOOK_ENTRY_NAME: device_name,
            LOGBOOK_ENTRY_MESSAGE: message,
        }

    async_describe_event(DOMAIN, EVENT_BUTTON_PRESS, async_describe_button_event)
