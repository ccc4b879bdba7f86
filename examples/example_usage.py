"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the snapshot and ingestion logic live in services.
"""

import importlib

from config import get_settings_module

from src.device_bridge.device_bridge.container import build_container
from src.device_bridge.device_bridge.core.settings import BridgeSettings


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=BridgeSettings.from_module(settings))

    snapshot = container.snapshot_provider.get_active_employees()
    print(snapshot.message)
    for emp in snapshot.employees:
        print(f"  {emp.employee_code}  {emp.employee_name}")

    print(container.ingestion_service.simulate({}).to_dict())


if __name__ == "__main__":
    main()
