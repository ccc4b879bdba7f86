from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.settings import BridgeSettings
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .employees.controller import register as register_employees
from .web.front_door import register as register_front_door

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def build_app(container: Container) -> Flask:
    """Flask app exposing the device endpoints over an already-wired container."""
    app = Flask(__name__)
    app.config["DEBUG"] = container.settings.debug
    app.logger.setLevel(getattr(logging, container.settings.log_level, logging.INFO))

    register_front_door(app, container)
    register_employees(app, container)
    register_attendance(app, container)

    return app


def create_app() -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    bridge_settings = BridgeSettings.from_module(settings)
    db_config = dict(getattr(settings, "DB_CONFIG"))

    container = build_container(db_config=db_config, settings=bridge_settings)
    app = build_app(container)
    app.secret_key = getattr(settings, "SECRET_KEY")

    if bridge_settings.debug:
        print("[device-bridge] settings=", settings_module, " db=", container.conn.config.describe())

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=DATABASE_DIR / "schema.sql")
        if bridge_settings.debug:
            print(f"[device-bridge] schema ready (tables={len(list_tables(container.conn))})")
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(container.conn, seed_path=DATABASE_DIR / "seed.sql")
        if bridge_settings.debug:
            print("[device-bridge] demo seed ready")

    return app
