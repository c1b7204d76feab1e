"""Jito block engine client.

Fetches the landed-tip floor used to size Sender tips.
"""

from urllib.parse import parse_qsl, urlsplit

import structlog

from luna.config.settings import get_settings
from luna.constants.helius import JITO_TIP_FLOOR_FIELD
from luna.services.base import BaseAPIClient

log = structlog.get_logger(__name__)


class JitoClient(BaseAPIClient):
    """Client for the public Jito bundles API.

    Example:
        client = JitoClient()
        floor = await client.fetch_tip_floor()  # e.g. 0.000012 (SOL) or None
        await client.close()
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(self, tip_floor_url: str | None = None) -> None:
        url = tip_floor_url or get_settings().jito_tip_floor_url
        parts = urlsplit(url)
        self.tip_floor_path = parts.path or "/"
        self.tip_floor_params = parse_qsl(parts.query, keep_blank_values=True)

        super().__init__(
            base_url=f"{parts.scheme}://{parts.netloc}",
            timeout=self.DEFAULT_TIMEOUT,
            max_retries=1,
            service_name="Jito",
        )
        log.debug("jito_client_initialized", base_url=self.base_url)

    async def fetch_tip_floor(self) -> float | None:
        """Fetch the 75th percentile landed tip.

        The endpoint returns a JSON array; the first element carries
        `landed_tips_75th_percentile`.

        Returns:
            The tip floor in SOL, or None if the fetch or parsing fails.
        """
        try:
            response = await self.get(
                self.tip_floor_path,
                params=self.tip_floor_params or None,
                headers={"Cache-Control": "no-store"},
            )
            data = response.json()
            value = data[0][JITO_TIP_FLOOR_FIELD]
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise TypeError(f"unexpected tip floor value: {value!r}")
            floor = float(value)
        except Exception as e:
            log.warning("jito_tip_floor_unavailable", error=str(e))
            return None

        log.debug("jito_tip_floor_fetched", tip_floor=floor)
        return floor
