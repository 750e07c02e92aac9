"""
Exchange endpoint client.

Submits signed actions. Responses are returned as decoded JSON without
interpretation.
"""

from typing import Any, Dict, Optional

import structlog

from orderwire.clients.base import ApiClient

logger = structlog.get_logger()


class ExchangeClient(ApiClient):
    """Client for the /exchange endpoint."""

    async def post_action(
        self,
        action: Dict[str, Any],
        nonce: int,
        signature: Dict[str, Any],
        vault_address: Optional[str] = None,
    ) -> Any:
        """
        Submit a signed action.

        Args:
            action: Action dict, identical to the one that was signed
            nonce: Nonce used when signing
            signature: {"r", "s", "v"} signature
            vault_address: Vault or subaccount address, if any

        Returns:
            Decoded exchange response
        """
        payload = {
            "action": action,
            "nonce": nonce,
            "signature": signature,
            "vaultAddress": vault_address,
        }

        response = await self.post("/exchange", payload)

        logger.info(
            "action_posted",
            action_type=action.get("type"),
            nonce=nonce,
            status=response.get("status") if isinstance(response, dict) else None,
        )

        return response


__all__ = ["ExchangeClient"]
