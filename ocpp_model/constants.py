"""Limits fixed by the OCPP specifications."""

# Case-insensitive string lengths (CiStringNType)
CI_STRING_20 = 20
CI_STRING_25 = 25
CI_STRING_36 = 36
CI_STRING_50 = 50
CI_STRING_255 = 255
CI_STRING_500 = 500
CI_STRING_1000 = 1000

MIN_NUMBER_PHASES = 1
MAX_NUMBER_PHASES = 3
