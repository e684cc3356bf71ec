import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-shift-tracker-secret")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_tracker"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

SESSION_HOURS = int(os.getenv("SESSION_HOURS", "12"))
DEFAULT_HOURLY_RATE = float(os.getenv("DEFAULT_HOURLY_RATE", "16"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Also create the demo manager account on startup (skipped if it exists)
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
DEMO_MANAGER_EMAIL = os.getenv("DEMO_MANAGER_EMAIL", "manager@shiftora.test")
DEMO_MANAGER_PASSWORD = os.getenv("DEMO_MANAGER_PASSWORD", "password123")
