"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NAME_MAX_LEN = 25
ADDRESS_MAX_LEN = 30
PHONE_MAX_LEN = 10
DESIGNATION_MAX_LEN = 15

MIN_JOIN_YEAR = 1950
MAX_JOIN_YEAR = 2004

# Largest value the signed 32-bit code/grade fields can hold.
MAX_INT_FIELD = 2**31 - 1

MAX_LOGIN_ATTEMPTS = 3

DEFAULT_EMPLOYEE_FILE = "EMPLOYEE.DAT"
DEFAULT_CREDENTIAL_FILE = "userData.txt"
