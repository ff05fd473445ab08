import os

from config import build_db_config

SECRET_KEY = "test-secret"

DB_CONFIG = build_db_config(default_password="12345")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

QR_SIZE = 256
SESSION_LIMIT = 100

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
