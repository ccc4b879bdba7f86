from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..core.constants import ROUTED_METHODS, SYNC_PATH
from ..core.exceptions import AuthenticationError, StoreReadFailure
from ..container import Container
from ..web.front_door import device_endpoint, envelope, error_response


def register(app: Flask, container: Container) -> None:
    @app.route(SYNC_PATH, methods=ROUTED_METHODS, endpoint="sync_employees")
    @device_endpoint("GET")
    def sync_employees():
        """Full snapshot of active employees for the terminal's local directory."""
        try:
            container.guard.require(
                request.headers.get("Authorization"),
                required=container.settings.require_auth_for_snapshot,
            )
            snapshot = container.snapshot_provider.get_active_employees()
        except AuthenticationError as e:
            return error_response(e)
        except StoreReadFailure as e:
            app.logger.error("Error fetching employees: %s", e.detail)
            return error_response(e)
        except Exception as e:
            app.logger.exception("Unexpected error building employee snapshot")
            return envelope(False, "Failed to fetch employee data", status=500, error=str(e))

        return jsonify(asdict(snapshot)), 200
