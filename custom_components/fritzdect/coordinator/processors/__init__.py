"""Device processors for FRITZ!DECT coordinator."""

from .buttons import available_groups, build_snapshot, channel_groups, process_buttons, resolve_device_mode

__all__ = [
    "process_buttons",
    "resolve_device_mode",
    "build_snapshot",
    "available_groups",
    "channel_groups",
]
