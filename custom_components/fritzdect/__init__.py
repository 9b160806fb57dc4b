"""The FRITZ!DECT Buttons integration."""

from __future__ import annotations

import asyncio
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant, ServiceCall, callback
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.helpers import device_registry as dr, issue_registry as ir

from .const import (
    CONF_DEBUG_COORDINATOR,
    CONF_NAME,
    CONF_SCAN_INTERVAL,
    DATA_SOURCES,
    DEFAULT_DEBUG_COORDINATOR,
    DEFAULT_NAME,
    DEFAULT_SCAN_INTERVAL,
    DOMAIN,
    REPAIR_CONNECTION_FAILED,
    SERVICE_REFRESH,
)
from .coordinator import FritzDectCoordinator
from .source import DeviceSnapshotSource

_LOGGER = logging.getLogger(__name__)

PLATFORMS: list[Platform] = [Platform.EVENT, Platform.SENSOR]


@callback
def async_register_snapshot_source(hass: HomeAssistant, entry_id: str, source: DeviceSnapshotSource) -> None:
    """Register the device snapshot source for a config entry.

    Setting up an entry without a registered source raises
    ConfigEntryNotReady, so HA retries until the source shows up.
    """
    hass.data.setdefault(DATA_SOURCES, {})[entry_id] = source
    _LOGGER.debug("Registered device snapshot source for entry %s", entry_id)


@callback
def async_unregister_snapshot_source(hass: HomeAssistant, entry_id: str) -> None:
    """Forget the device snapshot source of a config entry."""
    hass.data.get(DATA_SOURCES, {}).pop(entry_id, None)


def _apply_debug_logging(entry: ConfigEntry) -> None:
    """Apply debug logging settings from config entry options."""
    debug_coord = entry.options.get(CONF_DEBUG_COORDINATOR, DEFAULT_DEBUG_COORDINATOR)

    # Coordinator logger (custom_components.fritzdect.coordinator)
    coord_logger = logging.getLogger(f"custom_components.{DOMAIN}.coordinator")
    coord_logger.setLevel(logging.DEBUG if debug_coord else logging.INFO)

    _LOGGER.info("Debug logging: Coordinator=%s", "DEBUG" if debug_coord else "INFO")


def _get_service_lock(hass: HomeAssistant) -> asyncio.Lock:
    """Get or create the service lock for this hass instance."""
    lock_key = f"{DOMAIN}_service_lock"
    return hass.data.setdefault(lock_key, asyncio.Lock())


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up FRITZ!DECT Buttons from a config entry."""
    hass.data.setdefault(DOMAIN, {})

    source = hass.data.get(DATA_SOURCES, {}).get(entry.entry_id)
    if source is None:
        raise ConfigEntryNotReady("No FRITZ!DECT device source registered yet")

    _apply_debug_logging(entry)

    scan_interval = entry.options.get(CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL)
    coordinator = FritzDectCoordinator(hass, source, scan_interval)

    # Fetch initial data, then start the button handlers so that presses
    # reported by the first poll are compared against the handler start time
    await coordinator.async_config_entry_first_refresh()
    coordinator.async_setup_handlers()

    hass.data[DOMAIN][entry.entry_id] = {
        "coordinator": coordinator,
    }

    # Create hub device that button devices reference via via_device
    device_registry = dr.async_get(hass)
    device_registry.async_get_or_create(
        config_entry_id=entry.entry_id,
        identifiers={(DOMAIN, entry.entry_id)},
        name=entry.data.get(CONF_NAME, DEFAULT_NAME),
        manufacturer="AVM",
        model="FRITZ!Box",
    )

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    # Channel entities are registered now, publish the first poll's timestamps
    coordinator.async_update_handlers()

    if not hass.services.has_service(DOMAIN, SERVICE_REFRESH):

        async def handle_refresh(call: ServiceCall) -> None:
            """Handle the refresh service call."""
            _LOGGER.info("Refresh service called - forcing data update")
            async with _get_service_lock(hass):
                for entry_data in list(hass.data.get(DOMAIN, {}).values()):
                    if not isinstance(entry_data, dict) or entry_data.get("unloading"):
                        continue
                    if "coordinator" in entry_data:
                        await entry_data["coordinator"].async_refresh()

        hass.services.async_register(DOMAIN, SERVICE_REFRESH, handle_refresh)

    entry.async_on_unload(entry.add_update_listener(_async_update_listener))

    return True


async def _async_update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle options update.

    Debug logging is applied instantly, the scan interval via a reload.
    """
    _apply_debug_logging(entry)
    await hass.config_entries.async_reload(entry.entry_id)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    if entry.entry_id in hass.data.get(DOMAIN, {}):
        entry_data = hass.data[DOMAIN][entry.entry_id]

        # Mark entry as unloading so services won't access partially-unloaded data
        entry_data["unloading"] = True

        coordinator: FritzDectCoordinator | None = entry_data.get("coordinator")
        if coordinator:
            coordinator.async_shutdown_handlers()

    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        hass.data[DOMAIN].pop(entry.entry_id, None)

        if not hass.data[DOMAIN]:
            hass.services.async_remove(DOMAIN, SERVICE_REFRESH)
            _LOGGER.debug("Unregistered FRITZ!DECT services (last entry removed)")

    return unload_ok


async def async_remove_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle removal of a config entry."""
    async_unregister_snapshot_source(hass, entry.entry_id)
    ir.async_delete_issue(hass, DOMAIN, REPAIR_CONNECTION_FAILED)
