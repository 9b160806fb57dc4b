"""Config flow for FRITZ!DECT Buttons integration."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant import config_entries
from homeassistant.config_entries import ConfigFlowResult
from homeassistant.core import callback
import voluptuous as vol

from .const import (
    CONF_DEBUG_COORDINATOR,
    CONF_NAME,
    CONF_SCAN_INTERVAL,
    DEFAULT_DEBUG_COORDINATOR,
    DEFAULT_NAME,
    DEFAULT_SCAN_INTERVAL,
    DOMAIN,
    MAX_POLL_INTERVAL,
    MIN_POLL_INTERVAL,
)

MAX_NAME_LENGTH = 64

_LOGGER = logging.getLogger(__name__)

STEP_USER_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
    }
)


def validate_name(name: str) -> str | None:
    """Validate the entry name.

    Returns:
        Error key if invalid, None if valid
    """
    name = name.strip()
    if not name:
        return "invalid_name"
    if len(name) > MAX_NAME_LENGTH:
        return "name_too_long"
    return None


class FritzDectConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for FRITZ!DECT Buttons."""

    VERSION = 1
    MINOR_VERSION = 0

    @staticmethod
    @callback
    def async_get_options_flow(
        config_entry: config_entries.ConfigEntry,
    ) -> FritzDectOptionsFlow:
        """Get the options flow for this handler."""
        return FritzDectOptionsFlow()

    async def async_step_user(self, user_input: dict[str, Any] | None = None) -> ConfigFlowResult:
        """Handle the initial step."""
        errors: dict[str, str] = {}

        if user_input is not None:
            name = user_input[CONF_NAME]
            error = validate_name(name)
            if error is None:
                name = name.strip()
                await self.async_set_unique_id(name.lower())
                self._abort_if_unique_id_configured()
                _LOGGER.debug("Creating FRITZ!DECT entry %s", name)
                return self.async_create_entry(title=name, data={CONF_NAME: name})
            errors[CONF_NAME] = error

        return self.async_show_form(
            step_id="user",
            data_schema=STEP_USER_SCHEMA,
            errors=errors,
        )


class FritzDectOptionsFlow(config_entries.OptionsFlow):
    """Handle options flow for FRITZ!DECT Buttons."""

    async def async_step_init(self, user_input: dict[str, Any] | None = None) -> ConfigFlowResult:
        """Manage the options."""
        if user_input is not None:
            return self.async_create_entry(title="", data=user_input)

        current_interval = self.config_entry.options.get(CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL)
        current_debug = self.config_entry.options.get(CONF_DEBUG_COORDINATOR, DEFAULT_DEBUG_COORDINATOR)

        schema = vol.Schema(
            {
                vol.Required(CONF_SCAN_INTERVAL, default=current_interval): vol.All(
                    vol.Coerce(int), vol.Range(min=MIN_POLL_INTERVAL, max=MAX_POLL_INTERVAL)
                ),
                vol.Required(CONF_DEBUG_COORDINATOR, default=current_debug): bool,
            }
        )

        return self.async_show_form(step_id="init", data_schema=schema)
