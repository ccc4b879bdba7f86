class DomainError(Exception):
    """Base exception for every failure the bridge reports to a device."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedPayload(ValidationError):
    """Raised when a punch body is not a JSON object (or array of objects)."""


class AuthenticationError(DomainError):
    """Raised when a device presents unusable credentials."""


class InvalidAuthFormat(AuthenticationError):
    """Authorization header missing where required, or not `Bearer <token>`."""


class InvalidToken(AuthenticationError):
    """Bearer token does not match the configured secret."""


class MethodNotAllowed(DomainError):
    """HTTP method outside the endpoint's declared set."""

    def __init__(self, method: str, allowed: tuple[str, ...]):
        self.method = method
        self.allowed = allowed
        super().__init__(f"Method {method} not allowed. Use {' or '.join(allowed)}.")


class StoreError(DomainError):
    """Underlying data-store error. The original exception is kept as __cause__."""

    @property
    def detail(self) -> str:
        cause = self.__cause__
        return str(cause) if cause is not None else str(self)


class StoreReadFailure(StoreError):
    pass


class StoreWriteFailure(StoreError):
    pass
