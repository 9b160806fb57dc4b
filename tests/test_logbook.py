"""Tests for FRITZ!DECT logbook descriptions."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


def _describe(data):
    from custom_components.fritzdect.logbook import async_describe_events

    async_describe_event = MagicMock()
    async_describe_events(MagicMock(), async_describe_event)
    domain, event_type, describe = async_describe_event.call_args[0]
    assert (domain, event_type) == ("fritzdect", "fritzdect_button_press")

    event = MagicMock()
    event.data = data
    return describe(event)


@pytest.mark.parametrize(
    ("event_type", "message"),
    [
        ("pressed", "was pressed"),
        ("short pressed", "was short-pressed"),
        ("long pressed", "was long-pressed"),
        ("double pressed", "triggered double pressed"),
    ],
)
def test_messages(event_type, message):
    """Each event type has a readable message."""
    entry = _describe({"device_name": "Hallway Button", "event_type": event_type, "channel": "press"})

    assert entry == {"name": "Hallway Button", "message": message}


def test_quadrant_prefix():
    """Grouped channels prefix the message with the quadrant."""
    entry = _describe({"device_name": "Switch", "event_type": "pressed", "channel": "bottom-left.press"})

    assert entry["message"] == "bottom left was pressed"


def test_missing_fields():
    """Events without data still produce an entry."""
    entry = _describe({})

    assert entry == {"name": "Unknown device", "message": "triggered unknown"}
