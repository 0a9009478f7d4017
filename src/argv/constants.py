"""Literal constants used by argv."""

APP_NAME = "argv"
LOGGER_NAME = APP_NAME

OPTION_PREFIX = "-"
LONG_OPTION_PREFIX = "--"
VALUE_SEPARATOR = "="

# Tokens after this marker are passed through without classification.
END_OF_OPTIONS = "--"

# Value recorded for an option that was not followed by a value.
BARE_VALUE = ""

# Name produced when a short combo ends in a dash (e.g. -pqr-). The token
# after it is classified as positional rather than as its value.
DASH_COMBO_OPTION = OPTION_PREFIX + OPTION_PREFIX
