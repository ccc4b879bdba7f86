import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "5")),
}

ATTENDANCE_API_TOKEN = os.getenv("ATTENDANCE_API_TOKEN", "dmhca_attendance_token_2025")
DEVICE_KEYS = os.getenv("DEVICE_KEYS", "")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "https://dmhcahrms.xyz")

REQUIRE_AUTH_FOR_SNAPSHOT = bool(int(os.getenv("REQUIRE_AUTH_FOR_SNAPSHOT", "0")))
EMBED_TOKEN_IN_SNAPSHOT = bool(int(os.getenv("EMBED_TOKEN_IN_SNAPSHOT", "1")))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
