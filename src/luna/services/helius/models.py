"""Pydantic models for Helius JSON-RPC traffic.

Covers the request/response envelopes shared by every RPC method, the
signature status records consumed by the confirmation poller, and the
cluster and Sender region enumerations.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from luna.constants.helius import (
    CLUSTER_RPC_URLS,
    JSONRPC_VERSION,
    TERMINAL_CONFIRMATION_STATUSES,
)


class Cluster(str, Enum):
    """Solana clusters served by Helius. Mainnet is the default."""

    MAINNET = "mainnet"
    DEVNET = "devnet"
    TESTNET = "testnet"

    @property
    def rpc_url(self) -> str:
        """HTTPS JSON-RPC base URL for this cluster."""
        return CLUSTER_RPC_URLS[self.value]


class SenderRegion(str, Enum):
    """Regional endpoints of the Helius Sender service."""

    DEFAULT = "https://sender.helius-rpc.com"
    US_SLC = "http://slc-sender.helius-rpc.com"
    US_EAST = "http://ewr-sender.helius-rpc.com"
    EU_WEST = "http://lon-sender.helius-rpc.com"
    EU_CENTRAL = "http://fra-sender.helius-rpc.com"
    EU_NORTH = "http://ams-sender.helius-rpc.com"
    AP_SINGAPORE = "http://sg-sender.helius-rpc.com"
    AP_TOKYO = "http://tyo-sender.helius-rpc.com"

    @property
    def url(self) -> str:
        return self.value


class ConfirmationStatus(str, Enum):
    """Commitment level reported for a transaction (processed < confirmed < finalized)."""

    PROCESSED = "processed"
    CONFIRMED = "confirmed"
    FINALIZED = "finalized"


class RpcRequest(BaseModel):
    """JSON-RPC request envelope."""

    jsonrpc: str = JSONRPC_VERSION
    id: str
    method: str
    params: Any


class RpcErrorDetail(BaseModel):
    """JSON-RPC error object returned when a call fails."""

    model_config = ConfigDict(extra="ignore")

    code: int
    message: str
    data: Any = None


class RpcResponse(BaseModel):
    """JSON-RPC response envelope.

    When `error` is set, `result` is None. Otherwise `result` holds the
    method-specific payload as plain JSON (dicts, lists, scalars).
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = JSONRPC_VERSION
    id: str | int | None = None
    result: Any = None
    error: RpcErrorDetail | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class SignatureStatus(BaseModel):
    """One entry of a getSignatureStatuses result.

    Attributes:
        slot: Slot the transaction was processed in.
        confirmations: Blocks since confirmation, None once rooted.
        err: Transaction error, None if the transaction succeeded.
        confirmation_status: Commitment level as reported by the node.
            Kept as a raw string so unknown levels never fail parsing.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    slot: int | None = None
    confirmations: int | None = None
    err: Any = None
    confirmation_status: str | None = Field(default=None, alias="confirmationStatus")

    @property
    def level(self) -> ConfirmationStatus | None:
        """Commitment level as an enum, None if absent or unrecognised."""
        try:
            return ConfirmationStatus(self.confirmation_status)
        except ValueError:
            return None

    @property
    def is_confirmed(self) -> bool:
        """True once the status reached confirmed or finalized."""
        return self.confirmation_status in TERMINAL_CONFIRMATION_STATUSES

    @property
    def failed(self) -> bool:
        return self.err is not None


def first_signature_status(response: RpcResponse) -> SignatureStatus | None:
    """Parse the first status record out of a getSignatureStatuses response.

    The node answers `{"context": {...}, "value": [status | null, ...]}`; a
    bare list under `result` is accepted as well. Returns None when the
    result is missing, empty, or the first entry is null.
    """
    result = response.result
    if isinstance(result, dict):
        result = result.get("value")
    if not isinstance(result, list) or not result:
        return None

    entry = result[0]
    if not isinstance(entry, dict):
        return None
    return SignatureStatus.model_validate(entry)
