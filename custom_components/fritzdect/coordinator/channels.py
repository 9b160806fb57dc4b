"""Channel table for a single FRITZ! DECT device."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
import logging
from typing import Protocol

_LOGGER = logging.getLogger(__name__)


class TriggerChannel(Protocol):
    """A channel that emits discrete events."""

    def trigger_channel(self, event: str) -> None: ...


class StateChannel(Protocol):
    """A channel that holds a timestamp state (None = undefined)."""

    def set_channel_state(self, value: datetime | None) -> None: ...


class TriggerCallback(Protocol):
    """Protocol for the callback invoked after a channel was triggered."""

    def __call__(self, thing_id: str, channel_id: str, event: str) -> None: ...


class ThingChannels:
    """The channels that currently exist for one device (thing).

    Channels are entities; they register themselves when added to HA and
    unregister when removed, so a lookup can miss at any time.
    """

    def __init__(self, thing_id: str, on_trigger: TriggerCallback | None = None) -> None:
        self._thing_id = thing_id
        self._on_trigger = on_trigger
        self._trigger_channels: dict[str, TriggerChannel] = {}
        self._state_channels: dict[str, StateChannel] = {}

    @property
    def thing_id(self) -> str:
        """Return the device this table belongs to."""
        return self._thing_id

    def register_trigger_channel(self, channel_id: str, channel: TriggerChannel) -> Callable[[], None]:
        """Register a trigger channel, returning a callback that unregisters it."""
        self._trigger_channels[channel_id] = channel

        def _unregister() -> None:
            if self._trigger_channels.get(channel_id) is channel:
                del self._trigger_channels[channel_id]

        return _unregister

    def register_state_channel(self, channel_id: str, channel: StateChannel) -> Callable[[], None]:
        """Register a state channel, returning a callback that unregisters it."""
        self._state_channels[channel_id] = channel

        def _unregister() -> None:
            if self._state_channels.get(channel_id) is channel:
                del self._state_channels[channel_id]

        return _unregister

    def get_trigger_channel(self, channel_id: str) -> TriggerChannel | None:
        """Return the trigger channel with the given ID, if it exists."""
        return self._trigger_channels.get(channel_id)

    def get_state_channel(self, channel_id: str) -> StateChannel | None:
        """Return the state channel with the given ID, if it exists."""
        return self._state_channels.get(channel_id)

    def trigger_event(self, channel_id: str, event: str) -> None:
        """Emit an event on a trigger channel."""
        channel = self.get_trigger_channel(channel_id)
        if channel is None:
            _LOGGER.debug("Channel '%s' in thing '%s' does not exist.", channel_id, self._thing_id)
            return

        channel.trigger_channel(event)
        if self._on_trigger is not None:
            self._on_trigger(self._thing_id, channel_id, event)

    def set_state(self, channel_id: str, value: datetime | None) -> None:
        """Update a state channel; absent channels are skipped."""
        channel = self.get_state_channel(channel_id)
        if channel is not None:
            channel.set_channel_state(value)
