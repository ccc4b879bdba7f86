import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
}

# Bearer token every provisioned terminal presents
ATTENDANCE_API_TOKEN = os.getenv("ATTENDANCE_API_TOKEN", "dmhca_attendance_token_2025")

# Optional per-device keys: "RS9W-001:key1,RS9W-002:key2"
DEVICE_KEYS = os.getenv("DEVICE_KEYS", "")

# Base URL advertised to terminals in the snapshot's machine instructions
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:5000")

REQUIRE_AUTH_FOR_SNAPSHOT = bool(int(os.getenv("REQUIRE_AUTH_FOR_SNAPSHOT", "0")))
EMBED_TOKEN_IN_SNAPSHOT = bool(int(os.getenv("EMBED_TOKEN_IN_SNAPSHOT", "1")))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
