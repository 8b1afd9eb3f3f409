import os

DATA_DIR = os.getenv("PAYROLL_DATA_DIR", ".")
EMPLOYEE_FILE = "EMPLOYEE.DAT"
CREDENTIAL_FILE = "userData.txt"

# Empty LOG_FILE means no file handler is installed.
LOG_FILE = ""
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

INTRO_DELAY = 0.0

MAX_LOGIN_ATTEMPTS = 3
