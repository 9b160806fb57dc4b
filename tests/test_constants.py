"""Tests for constants (no HA framework required)."""

from __future__ import annotations


class TestDomainConstants:
    """Tests for domain and configuration constants."""

    def test_domain(self):
        """Test DOMAIN constant."""
        from custom_components.fritzdect.const import DOMAIN

        assert DOMAIN == "fritzdect"

    def test_poll_interval_range(self):
        """The default poll interval lies inside the allowed range."""
        from custom_components.fritzdect.const import DEFAULT_SCAN_INTERVAL, MAX_POLL_INTERVAL, MIN_POLL_INTERVAL

        assert MIN_POLL_INTERVAL <= DEFAULT_SCAN_INTERVAL <= MAX_POLL_INTERVAL


class TestButtonConstants:
    """Tests for button related constants."""

    def test_function_bits(self):
        """Button function bits match the AHA bitmask."""
        from custom_components.fritzdect.const import FUNCTION_BUTTON, FUNCTION_HANFUN_BUTTON

        assert FUNCTION_HANFUN_BUTTON == 8
        assert FUNCTION_BUTTON == 32

    def test_quadrant_dispatch_order(self):
        """Quadrants are handled top-left, bottom-left, top-right, bottom-right."""
        from custom_components.fritzdect.const import BUTTON_QUADRANTS

        assert BUTTON_QUADRANTS == (
            ("-7", "top-left"),
            ("-5", "bottom-left"),
            ("-1", "top-right"),
            ("-3", "bottom-right"),
        )

    def test_channel_ids(self):
        """Channel IDs and events use the expected names."""
        from custom_components.fritzdect.const import (
            CHANNEL_GROUP_SEPARATOR,
            CHANNEL_LAST_CHANGE,
            CHANNEL_PRESS,
            EVENT_LONG_PRESSED,
            EVENT_PRESSED,
            EVENT_SHORT_PRESSED,
        )

        assert CHANNEL_PRESS == "press"
        assert CHANNEL_LAST_CHANGE == "last-changed"
        assert CHANNEL_GROUP_SEPARATOR == "."
        assert (EVENT_PRESSED, EVENT_SHORT_PRESSED, EVENT_LONG_PRESSED) == ("pressed", "short pressed", "long pressed")

    def test_bus_event(self):
        """The bus event is namespaced by the domain."""
        from custom_components.fritzdect.const import EVENT_BUTTON_PRESS

        assert EVENT_BUTTON_PRESS == "fritzdect_button_press"
