"""Luna exception hierarchy.

This module defines the base exception class and specialized exceptions
for transport, JSON-RPC and transaction confirmation failures.
"""

from typing import Any


class LunaError(Exception):
    """Base exception for all Luna errors.

    All custom exceptions in Luna inherit from this class so callers can
    catch every client failure with a single except clause.
    """

    pass


class ConfigurationError(LunaError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("HELIUS_API_KEY is not set")
    """

    pass


class ExternalServiceError(LunaError):
    """Raised when an external service call fails.

    Use this for HTTP errors from Helius, the Sender service or Jito, and
    for response bodies that cannot be decoded.

    Attributes:
        service: Name of the external service that failed.
        status_code: HTTP status code if available, None otherwise.

    Example:
        raise ExternalServiceError(service="Helius", message="Rate limited", status_code=429)
    """

    def __init__(
        self,
        service: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service}: {message}")


class CircuitBreakerOpenError(LunaError):
    """Raised when circuit breaker is open.

    Example:
        raise CircuitBreakerOpenError("Circuit is open for Helius RPC")
    """

    pass


class RpcError(LunaError):
    """Raised when a JSON-RPC response carries an error object.

    Attributes:
        code: JSON-RPC error code.
        message: Error message reported by the node.
        data: Optional structured error payload.
    """

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"Helius RPC error {code}: {message}")


class SenderError(ExternalServiceError):
    """Raised when the Helius Sender service rejects or garbles a submission."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(service="Helius Sender", message=message, status_code=status_code)


class TransactionTimeoutError(LunaError):
    """Raised when a transaction is not confirmed before the deadline.

    Attributes:
        signature: The transaction signature that was polled.
        elapsed_ms: Milliseconds spent polling before giving up.
    """

    def __init__(self, signature: str, elapsed_ms: int) -> None:
        self.signature = signature
        self.elapsed_ms = elapsed_ms
        super().__init__(
            f"Transaction confirmation timed out for signature: {signature} "
            f"after {elapsed_ms}ms"
        )
