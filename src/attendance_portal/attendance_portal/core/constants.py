"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_QR_SIZE = 256
QR_BORDER_MODULES = 2
QR_FILL_COLOR = "#000000"
QR_BACK_COLOR = "#FFFFFF"

# Logged-in portal sessions kept in memory per process
DEFAULT_SESSION_LIMIT = 10000

MSG_FIELDS_REQUIRED = "All fields are required"
MSG_GENERIC_FAILURE = "Something went wrong. Please try again."

# Month abbreviations for the fixed en-US short date format (locale independent).
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
