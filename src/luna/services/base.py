"""Base API client with circuit breaker and retry logic.

Every Luna HTTP client (Helius RPC, Helius Sender, Jito) extends
BaseAPIClient, which provides:
- CircuitState enum for circuit breaker states
- CircuitBreaker dataclass for tracking consecutive failures
- Lazy httpx.AsyncClient creation and retrying request helpers
"""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

import httpx
import structlog

from luna.core.exceptions import CircuitBreakerOpenError, ExternalServiceError

log = structlog.get_logger(__name__)


class CircuitState(Enum):
    """Circuit breaker states."""

    CLOSED = "closed"  # Normal operation, requests allowed
    OPEN = "open"  # Circuit tripped, requests blocked
    HALF_OPEN = "half_open"  # Testing if service recovered


@dataclass
class CircuitBreaker:
    """Circuit breaker for protecting an upstream from repeated failing calls.

    Opens after `failure_threshold` consecutive failures. Once
    `cooldown_seconds` have passed since the last failure a single probe
    request is let through (half-open); its outcome closes or reopens the
    circuit.
    """

    failure_threshold: int = 5
    cooldown_seconds: int = 30
    failure_count: int = field(default=0, init=False)
    last_failure_time: datetime | None = field(default=None, init=False)
    state: CircuitState = field(default=CircuitState.CLOSED, init=False)

    def record_success(self) -> None:
        """Reset failure count and close the circuit."""
        self.failure_count = 0
        self.state = CircuitState.CLOSED

    def record_failure(self) -> None:
        """Count a failure, opening the circuit at the threshold.

        In HALF_OPEN state, a single failure reopens the circuit.
        """
        self.failure_count += 1
        self.last_failure_time = datetime.now(UTC)

        if self.state == CircuitState.HALF_OPEN:
            self.state = CircuitState.OPEN
            log.warning(
                "circuit_breaker_reopened",
                failure_count=self.failure_count,
            )
        elif self.failure_count >= self.failure_threshold:
            self.state = CircuitState.OPEN
            log.warning(
                "circuit_breaker_opened",
                failure_count=self.failure_count,
                threshold=self.failure_threshold,
            )

    def can_execute(self) -> bool:
        """Check if a request can be executed.

        State transitions:
            - CLOSED: Always returns True
            - OPEN: False until cooldown elapsed, then moves to HALF_OPEN
            - HALF_OPEN: Returns True (allows probe request)
        """
        if self.state == CircuitState.CLOSED:
            return True

        if self.state == CircuitState.OPEN:
            if self.last_failure_time is None:
                return False

            elapsed = datetime.now(UTC) - self.last_failure_time
            if elapsed > timedelta(seconds=self.cooldown_seconds):
                self.state = CircuitState.HALF_OPEN
                log.info(
                    "circuit_breaker_half_open",
                    cooldown_elapsed=elapsed.total_seconds(),
                )
                return True
            return False

        return True

    def raise_if_open(self, service: str) -> None:
        """Raise CircuitBreakerOpenError if requests to `service` are blocked."""
        if not self.can_execute():
            raise CircuitBreakerOpenError(
                f"Circuit breaker is open for {service}. Next retry in "
                f"{self._time_until_half_open():.1f} seconds."
            )

    def _time_until_half_open(self) -> float:
        if self.last_failure_time is None:
            return 0.0

        elapsed = datetime.now(UTC) - self.last_failure_time
        return max(0.0, self.cooldown_seconds - elapsed.total_seconds())


class BaseAPIClient:
    """Base API client with retry and circuit breaker support.

    Attributes:
        base_url: Base URL for all requests.
        timeout: Request timeout in seconds.
        headers: Default headers for all requests.
        max_retries: Default attempts per request; callers may override per call.
        service_name: Label used in errors and logs.

    Example:
        client = BaseAPIClient(base_url="https://mainnet.helius-rpc.com")
        response = await client.post("", json=payload)
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        circuit_breaker_threshold: int = 5,
        circuit_breaker_cooldown: int = 30,
        max_retries: int = 3,
        service_name: str | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self.max_retries = max_retries
        self.service_name = service_name or base_url
        self._client: httpx.AsyncClient | None = None
        self._circuit_breaker = CircuitBreaker(
            failure_threshold=circuit_breaker_threshold,
            cooldown_seconds=circuit_breaker_cooldown,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
            )
            log.debug("httpx_client_created", base_url=self.base_url)
        return self._client

    async def close(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            log.debug("httpx_client_closed", base_url=self.base_url)

    async def _request(
        self,
        method: str,
        path: str,
        max_retries: int | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make an HTTP request with retry and circuit breaker.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            path: Request path (appended to base_url).
            max_retries: Attempts for this call; defaults to `self.max_retries`.
            **kwargs: Additional arguments passed to httpx.request.

        Returns:
            httpx.Response on success.

        Raises:
            CircuitBreakerOpenError: If circuit breaker is open.
            ExternalServiceError: On a non-retryable 4xx, or once retries are exhausted.
        """
        self._circuit_breaker.raise_if_open(self.service_name)

        attempts = max_retries if max_retries is not None else self.max_retries
        client = await self._get_client()
        last_error: Exception | None = None

        for attempt in range(attempts):
            try:
                response = await client.request(method, path, **kwargs)
                response.raise_for_status()

                self._circuit_breaker.record_success()
                return response

            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code

                # 4xx errors (except 429) - no retry, fail immediately
                if 400 <= status_code < 500 and status_code != 429:
                    log.warning(
                        "request_client_error",
                        service=self.service_name,
                        method=method,
                        path=path,
                        status_code=status_code,
                    )
                    raise ExternalServiceError(
                        service=self.service_name,
                        message=str(e),
                        status_code=status_code,
                    ) from e

                self._circuit_breaker.record_failure()
                last_error = e
                log.warning(
                    "request_server_error",
                    service=self.service_name,
                    method=method,
                    path=path,
                    status_code=status_code,
                    attempt=attempt + 1,
                    max_retries=attempts,
                )

            except httpx.RequestError as e:
                self._circuit_breaker.record_failure()
                last_error = e
                log.warning(
                    "request_connection_error",
                    service=self.service_name,
                    method=method,
                    path=path,
                    error=str(e),
                    attempt=attempt + 1,
                    max_retries=attempts,
                )

            # Exponential backoff: 1s, 2s, 4s (capped)
            if attempt < attempts - 1:
                await asyncio.sleep(min(2**attempt, 4))

        log.error(
            "request_max_retries_exceeded",
            service=self.service_name,
            method=method,
            path=path,
            max_retries=attempts,
        )
        status_code = (
            last_error.response.status_code
            if isinstance(last_error, httpx.HTTPStatusError)
            else None
        )
        raise ExternalServiceError(
            service=self.service_name,
            message=f"Max retries ({attempts}) exceeded: {last_error}",
            status_code=status_code,
        ) from last_error

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self._request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return await self._request("POST", path, **kwargs)
