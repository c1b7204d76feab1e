"""Helius API client for Solana.

This module provides the async JSON-RPC transport for Helius and groups
the supported methods into namespaces:

- `client.solana`: standard Solana RPC (signature status lookup)
- `client.tx`: confirmation polling and Sender submission helpers
- `client.sender`: raw Sender submission and tip floor
- `client.laser`: LaserStream endpoint configuration
"""

from typing import Any

import structlog
from pydantic import ValidationError

from luna.config.settings import get_settings
from luna.constants.helius import DEFAULT_REQUEST_ID
from luna.core.exceptions import ConfigurationError, ExternalServiceError, RpcError
from luna.services.base import BaseAPIClient
from luna.services.helius.laserstream import LaserStreamApi
from luna.services.helius.models import Cluster, RpcRequest, RpcResponse
from luna.services.helius.sender import SenderApi
from luna.services.helius.solana import SolanaApi
from luna.services.helius.transactions import TransactionApi
from luna.services.jito.client import JitoClient

log = structlog.get_logger(__name__)


class HeliusClient(BaseAPIClient):
    """Async client for the Helius JSON-RPC API.

    Extends BaseAPIClient with the JSON-RPC envelope handling shared by
    every method: the request is posted to the cluster URL with the API key
    as the `api-key` query parameter, and an error envelope is raised as
    RpcError.

    Attributes:
        api_key: Helius API key.
        cluster: Solana cluster the client talks to.

    Example:
        client = HeliusClient(api_key="my-key")
        statuses = await client.solana.get_signature_statuses([signature])
        await client.tx.poll_transaction_confirmation(signature)
        await client.close()
    """

    def __init__(
        self,
        api_key: str | None = None,
        cluster: Cluster | str | None = None,
    ) -> None:
        """Initialize HeliusClient.

        Args:
            api_key: Helius API key. Defaults to the HELIUS_API_KEY setting.
            cluster: Target cluster. Defaults to the HELIUS_CLUSTER setting.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        settings = get_settings()

        api_key = api_key if api_key is not None else settings.helius_api_key.get_secret_value()
        if not api_key:
            msg = "HELIUS_API_KEY is not set"
            raise ConfigurationError(msg)

        self.api_key = api_key
        self.cluster = Cluster(cluster or settings.helius_cluster)
        self.confirmation_timeout_ms = settings.confirmation_timeout_ms
        self.confirmation_interval_ms = settings.confirmation_interval_ms

        super().__init__(
            base_url=self.cluster.rpc_url,
            timeout=settings.rpc_timeout,
            headers={"Content-Type": "application/json"},
            circuit_breaker_threshold=settings.circuit_breaker_threshold,
            circuit_breaker_cooldown=settings.circuit_breaker_cooldown,
            max_retries=settings.rpc_max_retries,
            service_name="Helius RPC",
        )

        self.jito = JitoClient(settings.jito_tip_floor_url)
        self.solana = SolanaApi(self)
        self.tx = TransactionApi(self)
        self.sender = SenderApi(self)
        self.laser = LaserStreamApi(self)

        log.info("helius_client_initialized", cluster=self.cluster.value)

    async def rpc_call(
        self,
        method: str,
        params: Any,
        query_params: dict[str, str] | None = None,
        max_retries: int | None = None,
    ) -> RpcResponse:
        """Execute a JSON-RPC call against Helius.

        Args:
            method: The RPC method name (e.g. "getSignatureStatuses").
            params: JSON-serializable method parameters (list or dict).
            query_params: Extra query parameters appended to the URL.
            max_retries: HTTP attempts for this call; defaults to RPC_MAX_RETRIES.

        Returns:
            The decoded response envelope.

        Raises:
            RpcError: If Helius answers with a JSON-RPC error.
            ExternalServiceError: If the HTTP call fails or the body is not
                a JSON-RPC envelope.
            CircuitBreakerOpenError: If the circuit breaker is open.
        """
        request = RpcRequest(id=DEFAULT_REQUEST_ID, method=method, params=params)
        url_params = {"api-key": self.api_key, **(query_params or {})}

        log.debug("helius_rpc_call", method=method)

        response = await self.post(
            "", json=request.model_dump(), params=url_params, max_retries=max_retries
        )

        try:
            rpc_response = RpcResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            log.error("helius_rpc_invalid_response", method=method, error=str(e))
            raise ExternalServiceError(
                service=self.service_name,
                message=f"Invalid JSON-RPC response for {method}: {e}",
                status_code=response.status_code,
            ) from e

        if rpc_response.error is not None:
            err = rpc_response.error
            log.warning(
                "helius_rpc_error",
                method=method,
                code=err.code,
                message=err.message,
            )
            raise RpcError(code=err.code, message=err.message, data=err.data)

        return rpc_response

    async def close(self) -> None:
        """Close the RPC, Sender and Jito HTTP clients."""
        await self.sender.close()
        await self.jito.close()
        await super().close()


# Global client instance (lazy initialization)
_helius_client: HeliusClient | None = None


async def get_helius_client() -> HeliusClient:
    """Get or create the global HeliusClient instance.

    Example:
        client = await get_helius_client()
        await client.tx.poll_transaction_confirmation(signature)
    """
    global _helius_client
    if _helius_client is None:
        _helius_client = HeliusClient()
        log.debug("global_helius_client_created")
    return _helius_client


async def close_helius_client() -> None:
    """Close the global HeliusClient instance."""
    global _helius_client
    if _helius_client is not None:
        await _helius_client.close()
        _helius_client = None
        log.debug("global_helius_client_closed")
