"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "salary_calculation")
DB_USER: str = os.getenv("DB_USER", "salary_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = os.getenv(
    "DATABASE_URL",
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "5"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Payroll rules ─────────────────────────────────────────
# Hours a full-time employee works in a month; divides the base salary
# into the hourly wage used for overtime pay.
STANDARD_MONTHLY_HOURS: int = int(os.getenv("STANDARD_MONTHLY_HOURS", "160"))

OVERTIME_PREMIUM: str = os.getenv("OVERTIME_PREMIUM", "1.25")
LATE_NIGHT_PREMIUM: str = os.getenv("LATE_NIGHT_PREMIUM", "1.5")
HOLIDAY_PREMIUM: str = os.getenv("HOLIDAY_PREMIUM", "1.35")

MONTHS_PER_YEAR: int = 12
