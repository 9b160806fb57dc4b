"""Button device processor for FRITZ!DECT coordinator."""

from __future__ import annotations

import logging
from typing import Any

from ...const import (
    BUTTON_QUADRANTS,
    FUNCTION_BUTTON,
    FUNCTION_HANFUN_BUTTON,
    PRODUCT_DECT400,
    PRODUCT_DECT440,
)
from ..button_mapper import ButtonObservation, DeviceMode, DeviceSnapshot

_LOGGER = logging.getLogger(__name__)

# AHA timestamps are 32-bit signed epoch seconds
MAX_TIMESTAMP = 2**31 - 1

_PRODUCT_MODES = {
    PRODUCT_DECT400: DeviceMode.SHORT_LONG_PRESS,
    PRODUCT_DECT440: DeviceMode.MULTI_BUTTON,
}


def _as_int(value: Any, default: int = 0) -> int:
    """Convert an AHA field to int, falling back to default."""
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def resolve_device_mode(device: dict[str, Any]) -> DeviceMode | None:
    """Determine how a device's buttons map onto channels.

    Args:
        device: Raw device dictionary from the snapshot source

    Returns:
        The device mode, or None if the device has no supported buttons
    """
    function_bitmask = _as_int(device.get("functionbitmask"))
    if function_bitmask & FUNCTION_HANFUN_BUTTON:
        return DeviceMode.HANFUN
    if function_bitmask & FUNCTION_BUTTON:
        return _PRODUCT_MODES.get((device.get("productname") or "").strip())
    return None


def _process_button(button: dict[str, Any]) -> dict[str, Any]:
    raw_timestamp = button.get("lastpressedtimestamp")
    last_pressed = _as_int(raw_timestamp, default=-1)
    if not 0 <= last_pressed <= MAX_TIMESTAMP:
        if raw_timestamp not in (None, ""):
            _LOGGER.debug(
                "Button %s reported unusable lastpressedtimestamp %r, treating as never pressed",
                button.get("identifier"),
                raw_timestamp,
            )
        last_pressed = 0

    return {
        "identifier": str(button.get("identifier") or ""),
        "name": button.get("name") or "",
        "last_pressed": last_pressed,
    }


def process_buttons(devices: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Process FRITZ! DECT devices that expose buttons.

    Args:
        devices: List of raw device dictionaries from the snapshot source

    Returns:
        List of button device data dictionaries
    """
    result = []
    for device in devices:
        ain = device.get("ain")
        if not ain:
            continue
        mode = resolve_device_mode(device)
        if mode is None:
            continue

        battery = device.get("battery")
        result.append(
            {
                "id": ain,
                "name": device.get("name") or ain,
                "model": device.get("productname") or "",
                "mode": mode,
                "available": bool(device.get("present", True)),
                "battery": _as_int(battery) if battery is not None else None,
                "battery_low": bool(device.get("batterylow", False)),
                "buttons": [_process_button(button) for button in device.get("buttons") or []],
            }
        )
    return result


def build_snapshot(entity_data: dict[str, Any]) -> DeviceSnapshot:
    """Build an immutable snapshot from processed button device data."""
    return DeviceSnapshot(
        device_id=entity_data["id"],
        buttons=tuple(
            ButtonObservation(identifier=button["identifier"], last_pressed=button["last_pressed"])
            for button in entity_data.get("buttons", [])
        ),
    )


def available_groups(entity_data: dict[str, Any]) -> list[str]:
    """Return the channel groups whose quadrant is present on a device."""
    identifiers = [button["identifier"] for button in entity_data.get("buttons", [])]
    return [
        group
        for suffix, group in BUTTON_QUADRANTS
        if any(identifier.endswith(suffix) for identifier in identifiers)
    ]


def channel_groups(entity_data: dict[str, Any]) -> list[str | None]:
    """Return the channel groups of a device; None stands for the ungrouped channels."""
    if entity_data.get("mode") is DeviceMode.MULTI_BUTTON:
        return list(available_groups(entity_data))
    return [None]
