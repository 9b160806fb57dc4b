"""Per-device button handler for FRITZ!DECT coordinator."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
import logging
from typing import TYPE_CHECKING

from homeassistant.core import callback

from ..const import ENTITY_TYPE_BUTTONS
from .button_mapper import ButtonEventMapper, DeviceMode
from .channels import ThingChannels, TriggerCallback
from .processors import build_snapshot

if TYPE_CHECKING:
    from . import FritzDectCoordinator

_LOGGER = logging.getLogger(__name__)


class FritzButtonHandler:
    """Feeds coordinator updates for one button device into its mapper.

    The handler owns the device's channel table and its mapper. It is
    registered as a coordinator listener, so updates arrive one at a time
    on the event loop.
    """

    def __init__(
        self,
        coordinator: FritzDectCoordinator,
        device_id: str,
        on_trigger: TriggerCallback | None = None,
        now: datetime | None = None,
    ) -> None:
        """Initialize the handler."""
        self._coordinator = coordinator
        self._device_id = device_id
        self._channels = ThingChannels(device_id, on_trigger)
        self._mapper = ButtonEventMapper(self._channels, now)
        self._remove_listener: Callable[[], None] | None = None

    @property
    def device_id(self) -> str:
        """Return the AIN of the handled device."""
        return self._device_id

    @property
    def channels(self) -> ThingChannels:
        """Return the device's channel table."""
        return self._channels

    @property
    def mapper(self) -> ButtonEventMapper:
        """Return the device's button mapper."""
        return self._mapper

    @callback
    def async_start(self) -> None:
        """Start receiving coordinator updates."""
        if self._remove_listener is None:
            self._remove_listener = self._coordinator.async_add_listener(self.handle_update)

    @callback
    def async_shutdown(self) -> None:
        """Stop receiving coordinator updates."""
        if self._remove_listener is not None:
            self._remove_listener()
            self._remove_listener = None

    @callback
    def handle_update(self) -> None:
        """Handle updated data from the coordinator."""
        data = self._coordinator.get_entity_data(ENTITY_TYPE_BUTTONS, self._device_id)
        if data is None:
            _LOGGER.debug("No data for button device %s in this update", self._device_id)
            return

        mode = data.get("mode")
        if not isinstance(mode, DeviceMode):
            return

        self._mapper.on_snapshot(build_snapshot(data), mode)
