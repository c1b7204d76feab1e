"""Transaction helpers (`client.tx`).

Confirmation polling, Sender submission with confirmation, and the Jito
tip floor wrapped as an RPC response.
"""

from typing import TYPE_CHECKING

import structlog

from luna.constants.helius import DEFAULT_REQUEST_ID, STATUS_LOOKUP_ATTEMPTS
from luna.services.helius.confirmation import ConfirmationPoller
from luna.services.helius.models import RpcResponse, SenderRegion

if TYPE_CHECKING:
    from luna.services.helius.client import HeliusClient

log = structlog.get_logger(__name__)


class TransactionApi:
    """Transaction namespace of HeliusClient."""

    def __init__(self, client: "HeliusClient") -> None:
        self._client = client

    def confirmation_poller(self) -> ConfirmationPoller:
        """Build a poller over `getSignatureStatuses` with the client's defaults.

        Each lookup is a single HTTP attempt; the poll interval takes the
        place of transport retries so attempts stay within the deadline.
        """

        async def lookup(signatures: list[str]) -> RpcResponse:
            return await self._client.solana.get_signature_statuses(
                signatures, max_retries=STATUS_LOOKUP_ATTEMPTS
            )

        return ConfirmationPoller(
            lookup=lookup,
            timeout_ms=self._client.confirmation_timeout_ms,
            interval_ms=self._client.confirmation_interval_ms,
        )

    async def poll_transaction_confirmation(
        self,
        signature: str,
        timeout_ms: int | None = None,
        interval_ms: int | None = None,
    ) -> RpcResponse:
        """Poll a transaction until it is confirmed or finalized.

        Args:
            signature: The transaction signature to poll.
            timeout_ms: Max time to wait in milliseconds (default 60000).
            interval_ms: Polling interval in milliseconds (default 2000).

        Returns:
            The getSignatureStatuses response carrying the terminal status.

        Raises:
            TransactionTimeoutError: If the transaction is not confirmed in time.
        """
        poller = self.confirmation_poller()
        return await poller.poll(signature, timeout_ms=timeout_ms, interval_ms=interval_ms)

    async def send_transaction_with_sender(
        self,
        transaction: str,
        region: SenderRegion = SenderRegion.DEFAULT,
        swqos_only: bool = False,
    ) -> RpcResponse:
        """Submit via Helius Sender, then wait for confirmation.

        The transaction must be fully signed. To include a Jito tip, add a
        transfer to one of SENDER_TIP_ACCOUNTS before signing.

        Raises:
            SenderError: If Sender rejects the submission.
            TransactionTimeoutError: If the transaction is not confirmed in time.
        """
        signature = await self._client.sender.client_for(region).send(
            transaction, swqos_only=swqos_only
        )
        return await self.poll_transaction_confirmation(signature)

    async def get_sender_tip_floor(self) -> RpcResponse:
        """Get the current Jito tip floor; result is None if unavailable."""
        floor = await self._client.jito.fetch_tip_floor()
        return RpcResponse(id=DEFAULT_REQUEST_ID, result=floor)
