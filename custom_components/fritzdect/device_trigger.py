"""Device triggers for FRITZ!DECT Buttons integration."""

from __future__ import annotations

from typing import Any

from homeassistant.components.device_automation import DEVICE_TRIGGER_BASE_SCHEMA
from homeassistant.components.homeassistant.triggers import event as event_trigger
from homeassistant.const import CONF_DEVICE_ID, CONF_DOMAIN, CONF_PLATFORM, CONF_TYPE
from homeassistant.core import CALLBACK_TYPE, HomeAssistant
from homeassistant.helpers import device_registry as dr
from homeassistant.helpers.trigger import TriggerActionType, TriggerInfo
from homeassistant.helpers.typing import ConfigType
import voluptuous as vol

from .const import (
    BUTTON_QUADRANTS,
    CHANNEL_PRESS,
    DOMAIN,
    ENTITY_TYPE_BUTTONS,
    EVENT_BUTTON_PRESS,
    EVENT_LONG_PRESSED,
    EVENT_PRESSED,
    EVENT_SHORT_PRESSED,
)
from .coordinator.button_mapper import DeviceMode, build_channel_id
from .coordinator.processors import channel_groups

CONF_SUBTYPE = "subtype"

# Trigger types
TRIGGER_TYPE_PRESSED = "button_pressed"
TRIGGER_TYPE_SHORT_PRESS = "button_short_press"
TRIGGER_TYPE_LONG_PRESS = "button_long_press"

TRIGGER_TYPES = {
    TRIGGER_TYPE_PRESSED,
    TRIGGER_TYPE_SHORT_PRESS,
    TRIGGER_TYPE_LONG_PRESS,
}

# Map trigger types to bus event event_type values
_TRIGGER_TO_EVENT = {
    TRIGGER_TYPE_PRESSED: EVENT_PRESSED,
    TRIGGER_TYPE_SHORT_PRESS: EVENT_SHORT_PRESSED,
    TRIGGER_TYPE_LONG_PRESS: EVENT_LONG_PRESSED,
}

_MODE_TRIGGERS = {
    DeviceMode.HANFUN: (TRIGGER_TYPE_PRESSED,),
    DeviceMode.SHORT_LONG_PRESS: (TRIGGER_TYPE_SHORT_PRESS, TRIGGER_TYPE_LONG_PRESS),
    DeviceMode.MULTI_BUTTON: (TRIGGER_TYPE_PRESSED,),
}

TRIGGER_SCHEMA = DEVICE_TRIGGER_BASE_SCHEMA.extend(
    {
        vol.Required(CONF_TYPE): vol.In(TRIGGER_TYPES),
        vol.Optional(CONF_SUBTYPE): vol.In([group for _, group in BUTTON_QUADRANTS]),
    }
)


def _get_device_id(device: dr.DeviceEntry) -> str | None:
    """Return the AIN from a device's identifiers."""
    for identifier in device.identifiers:
        if identifier[0] == DOMAIN:
            return identifier[1]
    return None


def _find_button_data(hass: HomeAssistant, device: dr.DeviceEntry) -> dict[str, Any] | None:
    """Find coordinator data for a button device."""
    device_id = _get_device_id(device)
    if device_id is None:
        return None
    for entry_id in device.config_entries:
        entry_data = hass.data.get(DOMAIN, {}).get(entry_id, {})
        coordinator = entry_data.get("coordinator") if entry_data else None
        if coordinator and coordinator.data:
            data = coordinator.get_entity_data(ENTITY_TYPE_BUTTONS, device_id)
            if data is not None:
                return data
    return None


async def async_get_triggers(hass: HomeAssistant, device_id: str) -> list[dict[str, Any]]:
    """Return a list of triggers for a device."""
    device_registry = dr.async_get(hass)
    device = device_registry.async_get(device_id)

    if device is None:
        return []

    button = _find_button_data(hass, device)
    if button is None:
        return []

    triggers = []
    for group in channel_groups(button):
        for trigger_type in _MODE_TRIGGERS.get(button["mode"], ()):
            trigger = {
                CONF_PLATFORM: "device",
                CONF_DOMAIN: DOMAIN,
                CONF_DEVICE_ID: device_id,
                CONF_TYPE: trigger_type,
            }
            if group is not None:
                trigger[CONF_SUBTYPE] = group
            triggers.append(trigger)

    return triggers


async def async_attach_trigger(
    hass: HomeAssistant,
    config: ConfigType,
    action: TriggerActionType,
    trigger_info: TriggerInfo,
) -> CALLBACK_TYPE:
    """Attach a trigger."""
    device_registry = dr.async_get(hass)
    device = device_registry.async_get(config[CONF_DEVICE_ID])

    if device is None:
        return lambda: None

    ain = _get_device_id(device)
    if ain is None:
        return lambda: None

    trigger_type = config[CONF_TYPE]
    if trigger_type not in _TRIGGER_TO_EVENT:
        return lambda: None

    event_config = {
        event_trigger.CONF_PLATFORM: "event",
        event_trigger.CONF_EVENT_TYPE: EVENT_BUTTON_PRESS,
        event_trigger.CONF_EVENT_DATA: {
            "device_id": ain,
            "channel": build_channel_id(CHANNEL_PRESS, config.get(CONF_SUBTYPE)),
            "event_type": _TRIGGER_TO_EVENT[trigger_type],
        },
    }

    return await event_trigger.async_attach_trigger(hass, event_config, action, trigger_info, platform_type="device")


async def async_get_trigger_capabilities(hass: HomeAssistant, config: ConfigType) -> dict[str, vol.Schema]:
    """Return trigger capabilities."""
    return {}
