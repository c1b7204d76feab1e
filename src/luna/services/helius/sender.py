"""Helius Sender client.

Sender is Helius' low-latency submission service: a fully signed
transaction is forwarded to validators and Jito at the same time. Tips
must already be part of the signed transaction (a transfer to one of
SENDER_TIP_ACCOUNTS).
"""

import json
import time
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from luna.constants.helius import (
    JSONRPC_VERSION,
    SENDER_FAST_PATH,
    SENDER_RESPONSE_PREVIEW_CHARS,
    SENDER_TIP_ACCOUNTS,
)
from luna.core.exceptions import ExternalServiceError, LunaError, SenderError
from luna.services.base import BaseAPIClient
from luna.services.helius.models import RpcErrorDetail, RpcResponse, SenderRegion

if TYPE_CHECKING:
    from luna.services.helius.client import HeliusClient

log = structlog.get_logger(__name__)

__all__ = ["SENDER_TIP_ACCOUNTS", "SenderApi", "SenderClient"]


class SenderClient(BaseAPIClient):
    """HTTP client bound to one Sender region.

    Submissions are made exactly once: Sender requests go out with
    `maxRetries: 0` and this client does not retry at the HTTP layer either.
    """

    def __init__(self, region: SenderRegion = SenderRegion.DEFAULT, timeout: float = 30.0) -> None:
        self.region = region
        super().__init__(
            base_url=region.url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            max_retries=1,
            service_name="Helius Sender",
        )

    async def send(self, transaction: str, swqos_only: bool = False) -> str:
        """Submit a signed, base64-encoded transaction.

        Args:
            transaction: Base64 encoded, fully signed transaction.
            swqos_only: Route only through staked (SWQoS) connections.

        Returns:
            The transaction signature reported by Sender.

        Raises:
            SenderError: On HTTP failure, a Sender error body, or an
                unrecognised response.
        """
        payload = {
            "jsonrpc": JSONRPC_VERSION,
            "id": str(int(time.time() * 1000)),
            "method": "sendTransaction",
            "params": [
                transaction,
                {"encoding": "base64", "skipPreflight": True, "maxRetries": 0},
            ],
        }
        params = {"swqos_only": "true"} if swqos_only else None

        log.debug("sender_submit", region=self.region.name, swqos_only=swqos_only)

        try:
            response = await self.post(SENDER_FAST_PATH, json=payload, params=params)
        except ExternalServiceError as e:
            cause = e.__cause__
            if isinstance(cause, httpx.HTTPStatusError):
                preview = cause.response.text[:SENDER_RESPONSE_PREVIEW_CHARS]
                message = f"Sender HTTP {cause.response.status_code}: {preview}"
            else:
                message = str(e)
            raise SenderError(message, status_code=e.status_code) from e

        signature = _parse_sender_body(response.text)
        log.info(
            "sender_transaction_submitted",
            region=self.region.name,
            signature=signature[:8] + "...",
        )
        return signature


def _parse_sender_body(body: str) -> str:
    """Extract the signature from a Sender response body.

    Sender answers either with a bare JSON string or a JSON-RPC envelope.
    """
    preview = body[:SENDER_RESPONSE_PREVIEW_CHARS]
    if not body:
        raise SenderError("Empty response from Sender")

    try:
        element: Any = json.loads(body)
    except ValueError as e:
        raise SenderError(f"Unexpected Sender response: {preview}") from e

    if isinstance(element, str):
        return element
    if isinstance(element, dict):
        if element.get("error") is not None:
            raise SenderError(f"Sender error: {json.dumps(element['error'])}")
        result = element.get("result")
        if isinstance(result, str):
            return result

    raise SenderError(f"Unexpected Sender response: {preview}")


class SenderApi:
    """Sender namespace (`client.sender`).

    Wraps failures in RpcResponse error envelopes instead of raising, so
    callers can treat Sender like any other RPC method.
    """

    def __init__(self, client: "HeliusClient") -> None:
        self._client = client
        self._region_clients: dict[SenderRegion, SenderClient] = {}

    def client_for(self, region: SenderRegion) -> SenderClient:
        """Get or create the SenderClient for `region`."""
        sender = self._region_clients.get(region)
        if sender is None:
            sender = SenderClient(region=region, timeout=self._client.timeout)
            self._region_clients[region] = sender
        return sender

    async def get_sender_tip_floor(self) -> RpcResponse:
        """Fetch the current Jito tip floor (75th percentile landed tip)."""
        tip = await self._client.jito.fetch_tip_floor()
        if tip is None:
            return RpcResponse(error=RpcErrorDetail(code=500, message="Failed to fetch tip floor"))
        return RpcResponse(result=tip)

    async def send_transaction(
        self,
        transaction: str,
        region: SenderRegion = SenderRegion.DEFAULT,
        swqos_only: bool = False,
    ) -> RpcResponse:
        """Submit a transaction via Sender without waiting for confirmation.

        Returns:
            RpcResponse with the signature as result, or an error envelope
            (code 500) describing the failure.
        """
        try:
            signature = await self.client_for(region).send(transaction, swqos_only=swqos_only)
        except LunaError as e:
            log.warning("sender_send_failed", region=region.name, error=str(e))
            return RpcResponse(error=RpcErrorDetail(code=500, message=str(e) or "Unknown error"))
        return RpcResponse(result=signature)

    async def close(self) -> None:
        """Close every regional client opened so far."""
        for sender in self._region_clients.values():
            await sender.close()
        self._region_clients.clear()
