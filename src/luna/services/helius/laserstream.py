"""LaserStream connection helpers.

LaserStream is Helius' gRPC streaming service. No gRPC client ships with
Luna; this namespace only hands out the endpoint and credentials a gRPC
client needs.
"""

from typing import TYPE_CHECKING

from luna.constants.helius import LASERSTREAM_DEVNET_ENDPOINT, LASERSTREAM_MAINNET_ENDPOINTS
from luna.services.helius.models import Cluster

if TYPE_CHECKING:
    from luna.services.helius.client import HeliusClient


class LaserStreamApi:
    """LaserStream namespace (`client.laser`)."""

    mainnet_endpoints = LASERSTREAM_MAINNET_ENDPOINTS
    devnet_endpoint = LASERSTREAM_DEVNET_ENDPOINT

    def __init__(self, client: "HeliusClient") -> None:
        self._client = client

    def default_endpoint(self) -> str:
        """Recommended endpoint for the client's cluster.

        Endpoints are regional; pick one close to the application server
        from `mainnet_endpoints` when latency matters. Testnet has no
        LaserStream deployment and falls back to devnet.
        """
        if self._client.cluster is Cluster.MAINNET:
            return self.mainnet_endpoints["ewr"]
        return self.devnet_endpoint

    def endpoint_for(self, region: str) -> str:
        """Mainnet endpoint for a region code such as "fra" or "tyo"."""
        try:
            return self.mainnet_endpoints[region.lower()]
        except KeyError:
            msg = f"Unknown LaserStream region: {region}"
            raise ValueError(msg) from None

    def auth_token(self) -> str:
        """Token for the gRPC `x-token` header, which is the Helius API key."""
        return self._client.api_key
