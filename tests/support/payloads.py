"""Canned Helius JSON-RPC payloads for tests."""

from typing import Any

TEST_API_KEY = "test-api-key-12345"
TEST_SIGNATURE = (
    "5VERv8NMvzbJMEkV8xnrLkEaWRtSz9CosKDYjCJjBRnbJLgp8uirBgmQpjKhoR4tjF3ZpRzrFmBV6UjKdiSZkQUW"
)

HELIUS_MAINNET_URL = "https://mainnet.helius-rpc.com"
HELIUS_DEVNET_URL = "https://devnet.helius-rpc.com"
SENDER_DEFAULT_URL = "https://sender.helius-rpc.com"
JITO_TIP_FLOOR_URL = "https://bundles.jito.wtf/api/v1/bundles/tip_floor"


def status_payload(confirmation_status: str | None, err: Any = None) -> dict[str, Any]:
    """Build a getSignatureStatuses JSON-RPC response with one status record."""
    return {
        "jsonrpc": "2.0",
        "id": "1",
        "result": {
            "context": {"slot": 312_456_789},
            "value": [
                {
                    "slot": 312_456_700,
                    "confirmations": None if confirmation_status == "finalized" else 3,
                    "err": err,
                    "status": {"Ok": None} if err is None else {"Err": err},
                    "confirmationStatus": confirmation_status,
                }
            ],
        },
    }


def empty_status_payload() -> dict[str, Any]:
    """getSignatureStatuses response for a signature the node has not seen."""
    return {
        "jsonrpc": "2.0",
        "id": "1",
        "result": {"context": {"slot": 312_456_789}, "value": [None]},
    }


def tip_floor_payload(p75: float = 0.000012) -> list[dict[str, Any]]:
    """Jito tip floor response."""
    return [
        {
            "time": "2026-10-18T09:30:00Z",
            "landed_tips_25th_percentile": 0.000001,
            "landed_tips_50th_percentile": 0.000005,
            "landed_tips_75th_percentile": p75,
            "landed_tips_95th_percentile": 0.0001,
            "landed_tips_99th_percentile": 0.0012,
            "ema_landed_tips_50th_percentile": 0.000006,
        }
    ]
