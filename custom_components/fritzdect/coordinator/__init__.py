"""Data update coordinator for FRITZ!DECT Buttons."""

from __future__ import annotations

from datetime import timedelta
import logging
from typing import Any

from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers import issue_registry as ir
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from ..const import (
    CONNECTION_FAILURE_THRESHOLD,
    DEFAULT_SCAN_INTERVAL,
    DOMAIN,
    ENTITY_TYPE_BUTTONS,
    EVENT_BUTTON_PRESS,
    REPAIR_CONNECTION_FAILED,
)
from ..source import DeviceSnapshotSource, FritzDectSourceError
from .channels import ThingChannels
from .handler import FritzButtonHandler
from .processors import process_buttons

_LOGGER = logging.getLogger(__name__)


class FritzDectCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Class to manage fetching FRITZ! DECT button data."""

    def __init__(
        self,
        hass: HomeAssistant,
        source: DeviceSnapshotSource,
        scan_interval: int = DEFAULT_SCAN_INTERVAL,
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass,
            _LOGGER,
            name=DOMAIN,
            update_interval=timedelta(seconds=scan_interval),
        )
        self.source = source
        self._consecutive_failures = 0
        self._repair_created = False
        self._last_successful_data: dict[str, Any] | None = None
        self._handlers: dict[str, FritzButtonHandler] = {}

    def set_update_interval(self, scan_interval: int) -> None:
        """Update the polling interval."""
        self.update_interval = timedelta(seconds=scan_interval)

    async def _async_update_data(self) -> dict[str, Any]:
        """Fetch data from the snapshot source."""
        try:
            devices = await self.source.async_get_devices()
        except FritzDectSourceError as err:
            return self._handle_source_error(err)

        buttons = process_buttons(devices)
        _LOGGER.debug("Processed %d button devices out of %d devices", len(buttons), len(devices))

        # Success - reset failure counter and clear any connection repair
        self._consecutive_failures = 0
        if self._repair_created:
            ir.async_delete_issue(self.hass, DOMAIN, REPAIR_CONNECTION_FAILED)
            self._repair_created = False
            _LOGGER.info("Connection restored, cleared connection failure repair")

        result = {ENTITY_TYPE_BUTTONS: buttons}
        self._last_successful_data = result
        return result

    def _handle_source_error(self, err: FritzDectSourceError) -> dict[str, Any]:
        """Handle source errors with failure tracking and repair issue management."""
        self._consecutive_failures += 1
        _LOGGER.warning(
            "FRITZ!DECT source error (failure %d/%d): %s",
            self._consecutive_failures,
            CONNECTION_FAILURE_THRESHOLD,
            err,
        )

        if self._consecutive_failures >= CONNECTION_FAILURE_THRESHOLD and not self._repair_created:
            ir.async_create_issue(
                self.hass,
                DOMAIN,
                REPAIR_CONNECTION_FAILED,
                is_fixable=False,
                is_persistent=True,
                severity=ir.IssueSeverity.ERROR,
                translation_key="connection_failed",
                translation_placeholders={
                    "failures": str(self._consecutive_failures),
                    "error": str(err),
                },
            )
            self._repair_created = True
            _LOGGER.error(
                "Created repair issue: FRITZ!DECT source failed %d times",
                self._consecutive_failures,
            )

        # Cached data keeps entities available; the mapper ignores repeated presses
        if self._last_successful_data:
            if self._consecutive_failures < CONNECTION_FAILURE_THRESHOLD:
                _LOGGER.info(
                    "Returning cached data due to transient source failure (failure %d/%d)",
                    self._consecutive_failures,
                    CONNECTION_FAILURE_THRESHOLD,
                )
            else:
                _LOGGER.warning(
                    "Returning stale cached data after %d consecutive failures",
                    self._consecutive_failures,
                )
            return self._last_successful_data

        raise UpdateFailed(f"Error fetching FRITZ!DECT devices: {err}") from err

    def get_entity_data(self, entity_type: str, device_id: str) -> dict[str, Any] | None:
        """Get data for a specific device.

        Args:
            entity_type: The type of entity (buttons)
            device_id: The device AIN to look up

        Returns:
            The entity data dictionary or None if not found
        """
        if not self.data:
            return None
        entities = self.data.get(entity_type)
        if not entities or not isinstance(entities, list):
            return None
        for entity in entities:
            if entity and entity.get("id") == device_id:
                return entity
        return None

    @property
    def handlers(self) -> dict[str, FritzButtonHandler]:
        """Return the button handlers keyed by device AIN."""
        return self._handlers

    def get_channels(self, device_id: str) -> ThingChannels | None:
        """Return the channel table of a button device, if it is handled."""
        handler = self._handlers.get(device_id)
        return handler.channels if handler is not None else None

    @callback
    def async_setup_handlers(self) -> None:
        """Create a handler for every button device that has none yet."""
        if not self.data:
            return
        for button in self.data.get(ENTITY_TYPE_BUTTONS, []):
            device_id = button["id"]
            if device_id in self._handlers:
                continue
            handler = FritzButtonHandler(self, device_id, on_trigger=self._fire_button_event)
            handler.async_start()
            self._handlers[device_id] = handler
            _LOGGER.debug("Set up button handler for %s (%s)", device_id, button["mode"].value)

    @callback
    def async_update_handlers(self) -> None:
        """Feed the current data to every handler, e.g. once its channels exist."""
        for handler in self._handlers.values():
            handler.handle_update()

    @callback
    def async_shutdown_handlers(self) -> None:
        """Stop and forget all button handlers."""
        for handler in self._handlers.values():
            handler.async_shutdown()
        self._handlers.clear()

    @callback
    def _fire_button_event(self, thing_id: str, channel_id: str, event: str) -> None:
        """Fire a bus event for a dispatched button press."""
        data = self.get_entity_data(ENTITY_TYPE_BUTTONS, thing_id) or {}
        self.hass.bus.async_fire(
            EVENT_BUTTON_PRESS,
            {
                "device_id": thing_id,
                "device_name": data.get("name", thing_id),
                "channel": channel_id,
                "event_type": event,
            },
        )
        _LOGGER.info("Button event '%s' fired for %s (%s)", event, thing_id, channel_id)
