"""Helius JSON-RPC client, Sender submission and confirmation polling."""

from luna.services.helius.client import HeliusClient, close_helius_client, get_helius_client
from luna.services.helius.confirmation import AttemptOutcome, AttemptResult, ConfirmationPoller
from luna.services.helius.models import (
    Cluster,
    ConfirmationStatus,
    RpcErrorDetail,
    RpcRequest,
    RpcResponse,
    SenderRegion,
    SignatureStatus,
)
from luna.services.helius.sender import SENDER_TIP_ACCOUNTS, SenderClient

__all__ = [
    "SENDER_TIP_ACCOUNTS",
    "AttemptOutcome",
    "AttemptResult",
    "Cluster",
    "ConfirmationPoller",
    "ConfirmationStatus",
    "HeliusClient",
    "RpcErrorDetail",
    "RpcRequest",
    "RpcResponse",
    "SenderClient",
    "SenderRegion",
    "SignatureStatus",
    "close_helius_client",
    "get_helius_client",
]
