from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from flask import Flask, request

from ..common.datetime_utils import utc_timestamp
from ..core.constants import ATTENDANCE_PATH, ROUTED_METHODS, TEST_ATTENDANCE_PATH
from ..core.exceptions import AuthenticationError, StoreWriteFailure, ValidationError
from ..container import Container
from ..web.front_door import device_endpoint, envelope, error_response
from .normalizer import pick_field


def _device_sns_of(body: Any) -> list[Optional[str]]:
    """Serial numbers the request speaks for, one per entry of a batch."""
    if isinstance(body, Mapping):
        return [pick_field(body, "device_sn")]
    if isinstance(body, list):
        return [pick_field(p, "device_sn") for p in body if isinstance(p, Mapping)]
    return []


def register(app: Flask, container: Container) -> None:
    settings = container.settings

    @app.route(TEST_ATTENDANCE_PATH, methods=ROUTED_METHODS, endpoint="test_attendance")
    @device_endpoint("GET", "POST")
    def test_attendance():
        if request.method == "GET":
            token = settings.api_token if settings.embed_token_in_snapshot else "<token>"
            return envelope(
                True,
                "Attendance API is working correctly",
                timestamp=utc_timestamp(),
                endpoints={
                    "attendance": {
                        "url": settings.attendance_url,
                        "method": "POST",
                        "auth": f"Bearer {token}",
                        "contentType": "application/json",
                    },
                    "sync": {
                        "url": settings.sync_url,
                        "method": "GET",
                    },
                },
                samplePayload={
                    "employee_code": "E001",
                    "log_datetime": "2025-11-01 09:00:00",
                    "log_time": "09:00:00",
                    "device_sn": "RS9W-001",
                    "downloaded_at": "2025-11-01 09:01:00",
                },
                testInstructions=[
                    "1. Configure your RS9W machine with the endpoint URL above",
                    f"2. Set Authorization header: Bearer {token}",
                    "3. Set Content-Type: application/json",
                    "4. Map your employee IDs to employee_code field",
                    "5. Test with a sample punch to verify connection",
                ],
            )

        punch = container.ingestion_service.simulate(request.get_json(force=True, silent=True))
        return envelope(
            True,
            "Test attendance data received successfully",
            receivedData=punch.to_dict(),
            note=f"This is a test endpoint. Use {ATTENDANCE_PATH} for actual data submission.",
        )

    @app.route(ATTENDANCE_PATH, methods=ROUTED_METHODS, endpoint="attendance")
    @device_endpoint("POST")
    def attendance():
        body = request.get_json(force=True, silent=True)
        try:
            container.guard.require(
                request.headers.get("Authorization"),
                required=True,
                device_sns=_device_sns_of(body),
            )
            if isinstance(body, list):
                batch = container.ingestion_service.record_batch(body)
                app.logger.info("Attendance batch processed: %s", batch.message)
                return envelope(
                    True,
                    batch.message,
                    total=batch.total,
                    recorded=batch.recorded,
                    duplicates=batch.duplicates,
                    results=[r.to_dict() for r in batch.results],
                )

            result = container.ingestion_service.record(body)
        except AuthenticationError as e:
            app.logger.warning("Rejected attendance push from %s: %s", request.remote_addr, e)
            return error_response(e)
        except ValidationError as e:
            return error_response(e)
        except StoreWriteFailure as e:
            app.logger.error("API Error processing attendance data: %s", e.detail)
            return error_response(e)
        except Exception as e:
            app.logger.exception("Unexpected error processing attendance data")
            return envelope(False, "Internal server error processing attendance data", status=500, error=str(e))

        app.logger.info(
            "Attendance punch %s: employee=%s device=%s at %s",
            "duplicate" if result.duplicate else "recorded",
            result.punch.employee_code,
            result.punch.device_sn,
            result.punch.log_datetime,
        )
        return envelope(True, result.message, data=result.to_dict())
