"""
Info endpoint client for asset metadata.
"""

from typing import Dict

import structlog

from orderwire.clients.base import ApiClient

logger = structlog.get_logger()


class InfoClient(ApiClient):
    """Client for the /info endpoint."""

    async def get_meta(self) -> Dict:
        """Fetch perpetuals metadata ({"universe": [{"name": ..}, ..]})."""
        return await self.post("/info", {"type": "meta"})

    async def get_asset_index_map(self) -> Dict[str, int]:
        """
        Map coin symbols to asset indexes.

        Returns:
            {"BTC": 0, "ETH": 1, ...} in universe order
        """
        meta = await self.get_meta()
        universe = meta.get("universe", [])

        asset_map = {asset["name"]: index for index, asset in enumerate(universe)}

        logger.debug("asset_map_fetched", count=len(asset_map))

        return asset_map


__all__ = ["InfoClient"]
