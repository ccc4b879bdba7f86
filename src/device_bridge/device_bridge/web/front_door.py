"""HTTP front door shared by every device endpoint.

Method gating, CORS preflight and the `{success, message, ...}` envelope live
here so the controllers only deal with their own use case.
"""
from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request

from ..common.datetime_utils import utc_timestamp
from ..core.constants import CORS_HEADERS, HEALTH_PATH, ROUTED_METHODS
from ..core.exceptions import (
    AuthenticationError,
    DomainError,
    MethodNotAllowed,
    StoreError,
    ValidationError,
)
from ..container import Container

ERROR_STATUS: tuple[tuple[type[DomainError], int], ...] = (
    (AuthenticationError, 401),
    (MethodNotAllowed, 405),
    (ValidationError, 400),
    (StoreError, 500),
)


def envelope(success: bool, message: str, *, status: int = 200, **fields):
    body = {"success": success, "message": message}
    body.update(fields)
    return jsonify(body), status


def error_response(exc: DomainError):
    status = next((code for kind, code in ERROR_STATUS if isinstance(exc, kind)), 500)
    if isinstance(exc, StoreError):
        return envelope(False, str(exc), status=status, error=exc.detail)
    return envelope(False, str(exc), status=status)


def device_endpoint(*allowed: str):
    """Answer preflight with an empty 200 and reject methods outside `allowed`.

    Routes using this must be registered with ROUTED_METHODS so that Flask
    hands every method to the view instead of answering on its own.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if request.method == "OPTIONS":
                return "", 200
            if request.method not in allowed:
                return error_response(MethodNotAllowed(request.method, allowed))
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register(app: Flask, container: Container) -> None:
    @app.after_request
    def add_cors_headers(response):
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response

    @app.errorhandler(404)
    def not_found(_e):
        return envelope(False, "Not found", status=404)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return envelope(False, f"Method {request.method} not allowed", status=405)

    @app.errorhandler(500)
    def internal_error(_e):
        return envelope(False, "Internal server error", status=500)

    @app.route(HEALTH_PATH, methods=ROUTED_METHODS, endpoint="health")
    @device_endpoint("GET")
    def health():
        return envelope(True, "Device bridge is running", timestamp=utc_timestamp())
