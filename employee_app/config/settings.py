"""
Application configuration and settings.
Centralized environment variables and constants.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------
# ENV controls environment-specific behavior:
# - dev  : local development (employees table auto-created, optional CSV seed)
# - uat  : staging / UAT (pre-provisioned employee DB)
# - prod : production     (pre-provisioned employee DB)
ENV = os.getenv("ENV", "dev").lower()

# -----------------------------------------------------------------------------
# Employee Data Configuration
# -----------------------------------------------------------------------------
# DEV  : SQLite DB and employees table are created if missing, seeded from CSV.
# UAT/PROD: Expect a pre-provisioned SQLite DB; schema is never touched.

EMPLOYEE_CSV_PATH = os.getenv("CSV_PATH")  # optional CSV used in dev to seed DB

if ENV == "dev":
    EMPLOYEE_DB_PATH = os.getenv("DB_PATH", "employee_data.db")
else:
    EMPLOYEE_DB_PATH = os.getenv("DB_PATH", "employee_data_prod.db")

# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
