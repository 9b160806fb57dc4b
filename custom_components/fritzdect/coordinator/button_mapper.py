"""Button press mapping for FRITZ! DECT button devices.

Turns the last-pressed timestamps a FRITZ!Box reports for each button into
trigger events and "last changed" timestamps. Kept free of HA framework
dependencies so it can be tested on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import enum
import logging
from typing import Protocol

from ..const import (
    BUTTON_QUADRANTS,
    CHANNEL_GROUP_SEPARATOR,
    CHANNEL_LAST_CHANGE,
    CHANNEL_PRESS,
    EVENT_LONG_PRESSED,
    EVENT_PRESSED,
    EVENT_SHORT_PRESSED,
)

_LOGGER = logging.getLogger(__name__)


class DeviceMode(enum.Enum):
    """How the buttons of a device map onto channels."""

    HANFUN = "hanfun"
    SHORT_LONG_PRESS = "short_long_press"
    MULTI_BUTTON = "multi_button"


@dataclass(frozen=True)
class ButtonObservation:
    """One button as reported by a single poll."""

    identifier: str
    last_pressed: int  # epoch seconds, 0 = never pressed


@dataclass(frozen=True)
class DeviceSnapshot:
    """All buttons of one device as reported by a single poll."""

    device_id: str
    buttons: tuple[ButtonObservation, ...] = ()


class ChannelSink(Protocol):
    """Protocol for the channels a mapper writes to."""

    def set_state(self, channel_id: str, value: datetime | None) -> None: ...

    def trigger_event(self, channel_id: str, event: str) -> None: ...


def build_channel_id(channel: str, group: str | None = None) -> str:
    """Return the channel ID, qualified by its channel group if any."""
    if group is None:
        return channel
    return f"{group}{CHANNEL_GROUP_SEPARATOR}{channel}"


class ButtonEventMapper:
    """Decides which buttons were pressed since the last observation.

    A press is only dispatched when its timestamp is strictly after the
    newest press dispatched so far (initially the construction time). After
    a restart the FRITZ!Box still reports the last press from before, and
    that press must not fire again.
    """

    def __init__(self, sink: ChannelSink, now: datetime | None = None) -> None:
        """Initialize the mapper.

        Args:
            sink: Receiver of trigger events and timestamp states.
            now: Construction time; defaults to the current UTC time.
        """
        self._sink = sink
        self._last_dispatched = now if now is not None else datetime.now(timezone.utc)

    @property
    def last_dispatched(self) -> datetime:
        """Return the instant of the newest dispatched press."""
        return self._last_dispatched

    def on_snapshot(self, snapshot: DeviceSnapshot, mode: DeviceMode) -> None:
        """Process a freshly polled device snapshot."""
        if mode is DeviceMode.HANFUN:
            self._update_hanfun_button(snapshot.buttons)
        elif mode is DeviceMode.SHORT_LONG_PRESS:
            self._update_short_long_press_button(snapshot.buttons)
        elif mode is DeviceMode.MULTI_BUTTON:
            self._update_buttons(snapshot.buttons)

    def _update_hanfun_button(self, buttons: tuple[ButtonObservation, ...]) -> None:
        if buttons:
            self._update_button(buttons[0], EVENT_PRESSED)

    def _update_short_long_press_button(self, buttons: tuple[ButtonObservation, ...]) -> None:
        short_press = buttons[0] if len(buttons) > 0 else None
        long_press = buttons[1] if len(buttons) > 1 else None
        if short_press is None:
            return

        if long_press is not None and long_press.last_pressed > short_press.last_pressed:
            self._update_button(long_press, EVENT_LONG_PRESSED)
        else:
            self._update_button(short_press, EVENT_SHORT_PRESSED)

    def _update_buttons(self, buttons: tuple[ButtonObservation, ...]) -> None:
        for suffix, group in BUTTON_QUADRANTS:
            button = next((b for b in buttons if b.identifier.endswith(suffix)), None)
            if button is not None:
                self._update_button(button, EVENT_PRESSED, group)

    def _update_button(self, button: ButtonObservation, event: str, group: str | None = None) -> None:
        """Run the press decision for one button."""
        last_change_channel = build_channel_id(CHANNEL_LAST_CHANGE, group)

        if button.last_pressed == 0:
            # Never pressed since the device was paired
            self._sink.set_state(last_change_channel, None)
            return

        try:
            then = datetime.fromtimestamp(button.last_pressed, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            _LOGGER.debug("Button %s reported out of range timestamp %s", button.identifier, button.last_pressed)
            self._sink.set_state(last_change_channel, None)
            return

        if then > self._last_dispatched:
            self._last_dispatched = then
            _LOGGER.debug("Dispatching '%s' for button %s pressed at %s", event, button.identifier, then)
            self._sink.trigger_event(build_channel_id(CHANNEL_PRESS, group), event)

        self._sink.set_state(last_change_channel, then)
