"""Helius endpoint constants.

Cluster RPC hosts, Sender regional endpoints, Sender tip accounts and
LaserStream gRPC endpoints.
"""

from typing import Final

# JSON-RPC
JSONRPC_VERSION: Final[str] = "2.0"
DEFAULT_REQUEST_ID: Final[str] = "1"

CLUSTER_RPC_URLS: Final[dict[str, str]] = {
    "mainnet": "https://mainnet.helius-rpc.com",
    "devnet": "https://devnet.helius-rpc.com",
    "testnet": "https://testnet.helius-rpc.com",
}

# Sender
SENDER_FAST_PATH: Final[str] = "/fast"
SENDER_RESPONSE_PREVIEW_CHARS: Final[int] = 200

SENDER_TIP_ACCOUNTS: Final[tuple[str, ...]] = (
    "4ACfpUFoaSD9bfPdeu6DBt89gB6ENTeHBXCAi87NhDEE",
    "D2L6yPZ2FmmmTKPgzaMKdhu6EWZcTpLy1Vhx8uvZe7NZ",
    "9bnz4RShgq1hAnLnZbP8kbgBg1kEmcJBYQq3gQbmnSta",
    "5VY91ws6B2hMmBFRsXkoAAdsPHBJwRfBht4DXox3xkwn",
    "2nyhqdwKcJZR2vcqCyrYsaPVdAnFoJjiksCXJ7hfEYgD",
    "2q5pghRs6arqVjRvT5gfgWfWcHWmw1ZuCzphgd5KfWGJ",
    "wyvPkWjVZz1M8fHQnMMCDTQDbkManefNNhweYk5WkcF",
    "3KCKozbAaF75qEU33jtzozcJ29yJuaLJTy2jFdzUY8bT",
    "4vieeGHPYPG2MmyPRcYjdiDmmhN3ww7hsFNap8pVN3Ey",
    "4TQLFNWK8AovT1gFvda5jfw2oJeRMKEmw7aH6MGBJ3or",
)

# LaserStream (gRPC, region specific)
LASERSTREAM_MAINNET_ENDPOINTS: Final[dict[str, str]] = {
    "ewr": "https://laserstream-mainnet-ewr.helius-rpc.com",
    "pitt": "https://laserstream-mainnet-pitt.helius-rpc.com",
    "slc": "https://laserstream-mainnet-slc.helius-rpc.com",
    "lax": "https://laserstream-mainnet-lax.helius-rpc.com",
    "lon": "https://laserstream-mainnet-lon.helius-rpc.com",
    "ams": "https://laserstream-mainnet-ams.helius-rpc.com",
    "fra": "https://laserstream-mainnet-fra.helius-rpc.com",
    "tyo": "https://laserstream-mainnet-tyo.helius-rpc.com",
    "sgp": "https://laserstream-mainnet-sgp.helius-rpc.com",
}
LASERSTREAM_DEVNET_ENDPOINT: Final[str] = "https://laserstream-devnet-ewr.helius-rpc.com"

# Jito
JITO_TIP_FLOOR_FIELD: Final[str] = "landed_tips_75th_percentile"

# Confirmation polling
DEFAULT_CONFIRMATION_TIMEOUT_MS: Final[int] = 60_000
DEFAULT_CONFIRMATION_INTERVAL_MS: Final[int] = 2_000
STATUS_LOOKUP_ATTEMPTS: Final[int] = 1  # the poll loop is the retry
TERMINAL_CONFIRMATION_STATUSES: Final[frozenset[str]] = frozenset({"confirmed", "finalized"})
