"""Constants for rfc5545 recurrence rule parsing and encoding."""

# Property and rule part names
PROPERTY_NAME = "RRULE"
FREQ = "FREQ"
INTERVAL = "INTERVAL"
BYDAY = "BYDAY"
BYMONTH = "BYMONTH"
BYMONTHDAY = "BYMONTHDAY"
BYSETPOS = "BYSETPOS"

# Separators
PROPERTY_SEPARATOR = ":"
KEY_VALUE_SEPARATOR = "="
PARTS_SEPARATOR = ";"
LIST_SEPARATOR = ","

PROPERTY_PREFIX = f"{PROPERTY_NAME}{PROPERTY_SEPARATOR}"

DEFAULT_INTERVAL = 1

INTERVAL_ERROR = f"{INTERVAL} must be positive number"
BYMONTH_ERROR = f"{BYMONTH} must be number in range 1-12"
BYMONTHDAY_ERROR = f"{BYMONTHDAY} must be number in range (-31..-1, 1..31)"
BYSETPOS_ERROR = f"{BYSETPOS} must be number in range (-366..-1, 1..366)"
FREQUENCY_ERROR = f"{FREQ} must be in format DAILY,WEEKLY,MONTHLY,YEARLY"
BYDAY_ERROR = f"{BYDAY} must be in format MO,TU,WE,TH,FR,SA,SU"
