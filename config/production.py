import os

from config import build_db_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = build_db_config()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

QR_SIZE = int(os.getenv("QR_SIZE", "256"))

# Upper bound on logged-in sessions kept in memory
SESSION_LIMIT = int(os.getenv("SESSION_LIMIT", "10000"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
