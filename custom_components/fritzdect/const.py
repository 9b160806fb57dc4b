"""Constants for the FRITZ!DECT Buttons integration."""

DOMAIN = "fritzdect"

# Configuration keys
CONF_NAME = "name"
CONF_SCAN_INTERVAL = "scan_interval"

# Default values
DEFAULT_NAME = "FRITZ!Box"
DEFAULT_SCAN_INTERVAL = 15  # seconds, matches the FRITZ!Box AHA polling default

# Poll interval range (seconds)
MIN_POLL_INTERVAL = 5
MAX_POLL_INTERVAL = 300

# Debug logging options
CONF_DEBUG_COORDINATOR = "debug_coordinator"
DEFAULT_DEBUG_COORDINATOR = False

# Device function bitmask bits (AHA "functionbitmask")
FUNCTION_HANFUN_BUTTON = 1 << 3
FUNCTION_BUTTON = 1 << 5

# Product names of AVM button devices
PRODUCT_DECT400 = "FRITZ!DECT 400"  # one rocker: short press / long press
PRODUCT_DECT440 = "FRITZ!DECT 440"  # four quadrants

# Button identifier suffixes of the FRITZ!DECT 440 quadrants
TOP_RIGHT_SUFFIX = "-1"
BOTTOM_RIGHT_SUFFIX = "-3"
BOTTOM_LEFT_SUFFIX = "-5"
TOP_LEFT_SUFFIX = "-7"

# Channel groups of the FRITZ!DECT 440 quadrants
CHANNEL_GROUP_TOP_LEFT = "top-left"
CHANNEL_GROUP_BOTTOM_LEFT = "bottom-left"
CHANNEL_GROUP_TOP_RIGHT = "top-right"
CHANNEL_GROUP_BOTTOM_RIGHT = "bottom-right"

# Quadrants in dispatch order
BUTTON_QUADRANTS: tuple[tuple[str, str], ...] = (
    (TOP_LEFT_SUFFIX, CHANNEL_GROUP_TOP_LEFT),
    (BOTTOM_LEFT_SUFFIX, CHANNEL_GROUP_BOTTOM_LEFT),
    (TOP_RIGHT_SUFFIX, CHANNEL_GROUP_TOP_RIGHT),
    (BOTTOM_RIGHT_SUFFIX, CHANNEL_GROUP_BOTTOM_RIGHT),
)

# Channels
CHANNEL_GROUP_SEPARATOR = "."
CHANNEL_PRESS = "press"  # trigger channel
CHANNEL_LAST_CHANGE = "last-changed"  # timestamp state channel

# Trigger events emitted on press channels
EVENT_PRESSED = "pressed"
EVENT_SHORT_PRESSED = "short pressed"
EVENT_LONG_PRESSED = "long pressed"

# Bus event fired for every dispatched press
EVENT_BUTTON_PRESS = f"{DOMAIN}_button_press"

# Entity type keys (used in coordinator.data dictionary)
ENTITY_TYPE_BUTTONS = "buttons"

# Repair issue IDs
REPAIR_CONNECTION_FAILED = "connection_failed"

# Source failure threshold before creating repair
CONNECTION_FAILURE_THRESHOLD = 3

# Service names
SERVICE_REFRESH = "refresh"

# hass.data key for registered device snapshot sources
DATA_SOURCES = f"{DOMAIN}_sources"
