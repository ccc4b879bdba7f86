"""Push a sample punch to a running bridge, the way a terminal would.

Usage:
    python scripts/send_test_punch.py --base-url http://localhost:5000 --employee E001
"""

from __future__ import annotations

import argparse
import os
from datetime import datetime

import requests


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--base-url", default=os.getenv("PUBLIC_BASE_URL", "http://localhost:5000"))
    parser.add_argument("--token", default=os.getenv("ATTENDANCE_API_TOKEN", "dmhca_attendance_token_2025"))
    parser.add_argument("--employee", default="E001")
    parser.add_argument("--device", default="RS9W-001")
    parser.add_argument("--dry-run", action="store_true", help="post to the diagnostic endpoint instead")
    args = parser.parse_args()

    base = args.base_url.rstrip("/")

    health = requests.get(f"{base}/api/health", timeout=10)
    print(f"health: {health.status_code} {health.json().get('timestamp')}")

    snapshot = requests.get(
        f"{base}/api/sync-employees",
        headers={"Authorization": f"Bearer {args.token}"},
        timeout=10,
    )
    print(f"snapshot: {snapshot.status_code} {snapshot.json().get('message')}")

    now = datetime.now()
    payload = {
        "employee_code": args.employee,
        "log_datetime": now.strftime("%Y-%m-%d %H:%M:%S"),
        "log_time": now.strftime("%H:%M:%S"),
        "device_sn": args.device,
    }
    path = "/api/test-attendance" if args.dry_run else "/api/attendance"
    r = requests.post(
        f"{base}{path}",
        headers={"Authorization": f"Bearer {args.token}"},
        json=payload,
        timeout=10,
    )
    print(f"punch: {r.status_code} {r.json()}")


if __name__ == "__main__":
    main()
