import os

DATA_DIR = os.getenv("PAYROLL_DATA_DIR", os.path.join(os.path.expanduser("~"), ".payroll_system"))
EMPLOYEE_FILE = os.getenv("EMPLOYEE_FILE", "EMPLOYEE.DAT")
CREDENTIAL_FILE = os.getenv("CREDENTIAL_FILE", "userData.txt")

LOG_FILE = os.getenv("LOG_FILE", os.path.join(DATA_DIR, "payroll.log"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False

INTRO_DELAY = float(os.getenv("INTRO_DELAY", "0.05"))

MAX_LOGIN_ATTEMPTS = int(os.getenv("MAX_LOGIN_ATTEMPTS", "3"))
