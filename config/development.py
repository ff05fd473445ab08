import os

from config import build_db_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = build_db_config(default_password="")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Pixel size of the employee QR code
QR_SIZE = int(os.getenv("QR_SIZE", "256"))

# Upper bound on logged-in sessions kept in memory
SESSION_LIMIT = int(os.getenv("SESSION_LIMIT", "10000"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
