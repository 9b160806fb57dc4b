"""Device snapshot source interface for the FRITZ!DECT Buttons integration.

The integration does not talk to the FRITZ!Box itself. Whatever polls the
box registers a source for a config entry with
``async_register_snapshot_source`` and the coordinator pulls device lists
from it.
"""

from __future__ import annotations

from typing import Any, Protocol

from homeassistant.exceptions import HomeAssistantError


class FritzDectSourceError(HomeAssistantError):
    """Exception for device snapshot source errors."""


class DeviceSnapshotSource(Protocol):
    """Protocol for a provider of polled FRITZ! DECT device data.

    Each device is a dictionary using the AHA field names: ``ain``,
    ``name``, ``productname``, ``functionbitmask``, ``present``,
    ``battery``, ``batterylow`` and ``buttons`` (a list of dictionaries
    with ``identifier``, ``name`` and ``lastpressedtimestamp``).
    """

    async def async_get_devices(self) -> list[dict[str, Any]]:
        """Return the current device list.

        Raises:
            FritzDectSourceError: If the device list could not be fetched.
        """
        ...
