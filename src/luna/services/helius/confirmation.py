"""Transaction confirmation poller.

Repeatedly looks up the status of a single transaction signature until the
network reports it as confirmed or finalized, or until a deadline passes.

Each lookup is classified into a tagged AttemptResult so that the retry
decision is an explicit branch in the loop:

- CONFIRMED: status is "confirmed" or "finalized", polling stops
- PENDING: status known but not terminal yet (e.g. "processed")
- EMPTY: the node does not know the signature yet
- ERROR: the lookup raised; the failure is logged and polling continues

The deadline is checked before every lookup, so a zero timeout fails
without querying the node at all.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

import structlog

from luna.constants.helius import (
    DEFAULT_CONFIRMATION_INTERVAL_MS,
    DEFAULT_CONFIRMATION_TIMEOUT_MS,
)
from luna.core.exceptions import TransactionTimeoutError
from luna.services.helius.models import RpcResponse, SignatureStatus, first_signature_status

log = structlog.get_logger(__name__)

StatusLookup = Callable[[list[str]], Awaitable[RpcResponse]]


class AttemptOutcome(Enum):
    """Classification of a single status lookup."""

    CONFIRMED = "confirmed"
    PENDING = "pending"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class AttemptResult:
    """Result of one status lookup.

    Attributes:
        outcome: How the loop should treat this attempt.
        response: Raw lookup response, set for CONFIRMED and PENDING.
        status: Parsed status record, set for CONFIRMED and PENDING.
        error: The exception raised by the lookup, set for ERROR.
    """

    outcome: AttemptOutcome
    response: RpcResponse | None = None
    status: SignatureStatus | None = None
    error: Exception | None = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome is AttemptOutcome.CONFIRMED


class ConfirmationPoller:
    """Polls a status lookup until a transaction is confirmed.

    The poller keeps no per-session state on the instance: start time and
    deadline live in `poll()`'s frame, so one poller can serve any number of
    concurrent sessions.

    Attributes:
        timeout_ms: Default deadline for a poll session in milliseconds.
        interval_ms: Default wait between lookups in milliseconds.

    Example:
        poller = ConfirmationPoller(client.solana.get_signature_statuses)
        response = await poller.poll(signature, timeout_ms=30_000)
    """

    def __init__(
        self,
        lookup: StatusLookup,
        timeout_ms: int = DEFAULT_CONFIRMATION_TIMEOUT_MS,
        interval_ms: int = DEFAULT_CONFIRMATION_INTERVAL_MS,
    ) -> None:
        self._lookup = lookup
        self.timeout_ms = timeout_ms
        self.interval_ms = interval_ms

    async def attempt(self, signature: str) -> AttemptResult:
        """Run one status lookup and classify it.

        Never raises for lookup failures; they are returned as ERROR results.
        """
        try:
            response = await self._lookup([signature])
            status = first_signature_status(response)
        except Exception as e:
            return AttemptResult(outcome=AttemptOutcome.ERROR, error=e)

        if status is None or status.confirmation_status is None:
            return AttemptResult(outcome=AttemptOutcome.EMPTY, response=response)

        outcome = AttemptOutcome.CONFIRMED if status.is_confirmed else AttemptOutcome.PENDING
        return AttemptResult(outcome=outcome, response=response, status=status)

    async def poll(
        self,
        signature: str,
        timeout_ms: int | None = None,
        interval_ms: int | None = None,
    ) -> RpcResponse:
        """Wait until `signature` reaches confirmed or finalized.

        Args:
            signature: Transaction signature to watch.
            timeout_ms: Deadline in milliseconds, measured from the call.
            interval_ms: Wait between lookups in milliseconds.

        Returns:
            The lookup response that carried the terminal status.

        Raises:
            ValueError: If the signature is empty or the timing arguments are invalid.
            TransactionTimeoutError: If the deadline passes without confirmation.
        """
        timeout_ms = self.timeout_ms if timeout_ms is None else timeout_ms
        interval_ms = self.interval_ms if interval_ms is None else interval_ms

        if not signature:
            msg = "Transaction signature must be a non-empty string"
            raise ValueError(msg)
        if timeout_ms < 0:
            msg = f"timeout_ms must be >= 0, got {timeout_ms}"
            raise ValueError(msg)
        if interval_ms <= 0:
            msg = f"interval_ms must be > 0, got {interval_ms}"
            raise ValueError(msg)

        short_sig = signature[:8] + "..."
        start = time.monotonic()
        attempts = 0

        log.debug(
            "confirmation_poll_started",
            signature=short_sig,
            timeout_ms=timeout_ms,
            interval_ms=interval_ms,
        )

        while _elapsed_ms(start) < timeout_ms:
            result = await self.attempt(signature)
            attempts += 1

            if result.is_terminal and result.response is not None:
                log.info(
                    "transaction_confirmed",
                    signature=short_sig,
                    confirmation_status=result.status.confirmation_status if result.status else None,
                    attempts=attempts,
                    elapsed_ms=_elapsed_ms(start),
                )
                return result.response

            if result.outcome is AttemptOutcome.ERROR:
                log.warning(
                    "confirmation_lookup_failed",
                    signature=short_sig,
                    attempt=attempts,
                    error=str(result.error),
                )
            else:
                log.debug(
                    "confirmation_pending",
                    signature=short_sig,
                    attempt=attempts,
                    outcome=result.outcome.value,
                    confirmation_status=result.status.confirmation_status if result.status else None,
                )

            await asyncio.sleep(interval_ms / 1000)

        elapsed_ms = _elapsed_ms(start)
        log.warning(
            "confirmation_timed_out",
            signature=short_sig,
            attempts=attempts,
            elapsed_ms=elapsed_ms,
        )
        raise TransactionTimeoutError(signature=signature, elapsed_ms=elapsed_ms)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
