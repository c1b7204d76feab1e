"""Standard Solana RPC methods served by Helius.

Only the status lookup used for transaction confirmation lives here.
"""

from typing import TYPE_CHECKING, Any

import structlog

from luna.services.helius.models import RpcResponse

if TYPE_CHECKING:
    from luna.services.helius.client import HeliusClient

log = structlog.get_logger(__name__)


class SolanaApi:
    """Standard Solana JSON-RPC namespace (`client.solana`)."""

    def __init__(self, client: "HeliusClient") -> None:
        self._client = client

    async def get_signature_statuses(
        self,
        signatures: list[str],
        search_transaction_history: bool | None = None,
        max_retries: int | None = None,
    ) -> RpcResponse:
        """Look up the processing status of one or more transaction signatures.

        Args:
            signatures: Transaction signatures (base58).
            search_transaction_history: Also search the ledger beyond the
                recent status cache. Omitted from the request when None.
            max_retries: HTTP attempts for this lookup; defaults to RPC_MAX_RETRIES.

        Returns:
            RpcResponse whose result is `{"context": ..., "value": [status | null, ...]}`.

        Raises:
            ValueError: If no signatures are given.
            RpcError: If the node answers with a JSON-RPC error.
            ExternalServiceError: If the HTTP call fails after retries.
        """
        if not signatures:
            msg = "At least one signature is required"
            raise ValueError(msg)

        params: list[Any] = [list(signatures)]
        if search_transaction_history is not None:
            params.append({"searchTransactionHistory": search_transaction_history})

        log.debug("get_signature_statuses", count=len(signatures))
        return await self._client.rpc_call("getSignatureStatuses", params, max_retries=max_retries)
