from __future__ import annotations

import hmac
from typing import Iterable, Mapping, Optional

from ..core.constants import BEARER_PREFIX
from ..core.enums import AuthOutcome
from ..core.exceptions import InvalidAuthFormat, InvalidToken


class CredentialGuard:
    """Decide whether a device request is authorized.

    The shared secret applies to every terminal unless `device_keys` registers
    a dedicated key for the serial number the request names. A request that
    speaks for several serials (a batch) must satisfy every one of them.
    """

    def __init__(self, api_token: str, device_keys: Optional[Mapping[str, str]] = None):
        self._api_token = api_token
        self._device_keys = dict(device_keys or {})

    def authorize(
        self,
        header: Optional[str],
        *,
        required: bool,
        device_sn: Optional[str] = None,
        device_sns: Iterable[Optional[str]] = (),
    ) -> AuthOutcome:
        # An empty header counts as no header at all.
        if not header:
            return AuthOutcome.INVALID_AUTH_FORMAT if required else AuthOutcome.ANONYMOUS

        if not header.startswith(BEARER_PREFIX):
            return AuthOutcome.INVALID_AUTH_FORMAT

        token = header[len(BEARER_PREFIX):].encode("utf-8")
        serials = {device_sn, *device_sns}
        for expected in {self._expected_token(sn) for sn in serials}:
            if not hmac.compare_digest(token, expected.encode("utf-8")):
                return AuthOutcome.INVALID_TOKEN

        return AuthOutcome.AUTHORIZED

    def require(
        self,
        header: Optional[str],
        *,
        required: bool,
        device_sn: Optional[str] = None,
        device_sns: Iterable[Optional[str]] = (),
    ) -> AuthOutcome:
        """Same as authorize(), but raise for failures."""

        outcome = self.authorize(header, required=required, device_sn=device_sn, device_sns=device_sns)
        if outcome == AuthOutcome.INVALID_AUTH_FORMAT:
            if not header:
                raise InvalidAuthFormat("Missing or invalid authorization header. Use: Bearer <token>")
            raise InvalidAuthFormat("Invalid authorization header format")
        if outcome == AuthOutcome.INVALID_TOKEN:
            raise InvalidToken("Invalid API token")
        return outcome

    def _expected_token(self, device_sn: Optional[str]) -> str:
        if device_sn and device_sn in self._device_keys:
            return self._device_keys[device_sn]
        return self._api_token
