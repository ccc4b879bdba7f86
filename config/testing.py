import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test_db"),
    "connect_timeout": 2,
}

ATTENDANCE_API_TOKEN = "test-token"
DEVICE_KEYS = ""
PUBLIC_BASE_URL = "http://testserver"

REQUIRE_AUTH_FOR_SNAPSHOT = False
EMBED_TOKEN_IN_SNAPSHOT = True

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
