"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ACCOUNT_NUMBER_DELIMITER = "-"
ACCOUNT_NUMBER_SEGMENT_LENGTHS = (3, 10, 2)

NAME_MAX_LENGTH = 100
ACCOUNT_NUMBER_MAX_LENGTH = 32

# Form integers bind to a signed 32-bit INTEGER column
INT_MIN = -2**31
INT_MAX = 2**31 - 1
