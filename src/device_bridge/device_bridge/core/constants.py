"""Constants and defaults.

Note: Keep device-protocol constants here to avoid magic strings spread across code.
"""

LOG_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_TIME_FORMAT = "%H:%M:%S"
HIRE_DATE_FORMAT = "%Y-%m-%d"

BEARER_PREFIX = "Bearer "

# Simulation defaults for the diagnostic endpoint
PLACEHOLDER_EMPLOYEE_CODE = "TEST001"
TEST_DEVICE_SN = "RS9W-TEST"

SYNC_PATH = "/api/sync-employees"
ATTENDANCE_PATH = "/api/attendance"
TEST_ATTENDANCE_PATH = "/api/test-attendance"
HEALTH_PATH = "/api/health"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

# Every route is bound to all of these so the front door, not Flask, answers 405
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
