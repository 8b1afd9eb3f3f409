import os

DATA_DIR = os.getenv("PAYROLL_DATA_DIR", ".")
EMPLOYEE_FILE = os.getenv("EMPLOYEE_FILE", "EMPLOYEE.DAT")
CREDENTIAL_FILE = os.getenv("CREDENTIAL_FILE", "userData.txt")

LOG_FILE = os.getenv("LOG_FILE", "payroll.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# Seconds per character when typing out the intro banner
INTRO_DELAY = float(os.getenv("INTRO_DELAY", "0.05"))

MAX_LOGIN_ATTEMPTS = int(os.getenv("MAX_LOGIN_ATTEMPTS", "3"))
