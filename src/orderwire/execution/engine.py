"""
Order submission engine.

Encodes every order, assembles one action, signs it once and posts it once.
Nothing is signed unless every order in the batch encodes cleanly.
"""

import time
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from eth_account.signers.local import LocalAccount
import structlog

from orderwire.clients.exchange_client import ExchangeClient
from orderwire.clients.info_client import InfoClient
from orderwire.config import config
from orderwire.encoding import (
    Cloid,
    Grouping,
    OrderAction,
    OrderRequest,
    OrderType,
    order_request_to_order_wire,
    order_wires_to_order_action,
)
from orderwire.errors import OrderWireError, UnknownAsset
from orderwire.execution.models import OrderSubmission
from orderwire.monitoring import metrics
from orderwire.signing.l1 import sign_l1_action

logger = structlog.get_logger()


def get_timestamp_ms() -> int:
    return int(time.time() * 1000)


def build_order_action(
    order_requests: Iterable[OrderRequest],
    asset_map: Mapping[str, int],
    grouping: Union[Grouping, str] = Grouping.NA,
) -> OrderAction:
    """
    Encode order requests and assemble them into one action.

    Args:
        order_requests: Orders in submission order
        asset_map: Coin symbol to asset index
        grouping: Grouping mode for the batch

    Returns:
        Assembled order action

    Raises:
        UnknownAsset: If a coin has no asset index
        PrecisionLoss, InvalidCloidFormat, InvalidOrderType: On invalid orders
    """
    order_wires = []

    for order in order_requests:
        try:
            if order.coin not in asset_map:
                raise UnknownAsset(f"Unknown coin: {order.coin}", value=order.coin)

            wire = order_request_to_order_wire(order, asset_map[order.coin])

        except OrderWireError as e:
            metrics.record_encoding_failure(e)
            logger.error(
                "order_encoding_failed",
                coin=order.coin,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        metrics.record_order_encoded(next(iter(wire.order_type)))
        order_wires.append(wire)

    action = order_wires_to_order_action(order_wires, grouping)
    metrics.record_action_built(action.grouping.value, len(action.orders))

    return action


class OrderSubmitter:
    """
    Places orders on the exchange.

    Features:
    - Coin symbol to asset index resolution
    - Canonical encoding of the whole batch before signing
    - Single signature and single POST per action
    """

    def __init__(
        self,
        wallet: LocalAccount,
        exchange_client: Optional[ExchangeClient] = None,
        info_client: Optional[InfoClient] = None,
        asset_map: Optional[Dict[str, int]] = None,
        vault_address: Optional[str] = None,
        is_mainnet: Optional[bool] = None,
        signer: Callable[..., Dict[str, Any]] = sign_l1_action,
        nonce_factory: Callable[[], int] = get_timestamp_ms,
    ):
        self.wallet = wallet
        self.exchange_client = exchange_client or ExchangeClient()
        self.info_client = info_client or InfoClient()
        self.vault_address = vault_address or config.signing.vault_address
        self.is_mainnet = (
            config.exchange.is_mainnet if is_mainnet is None else is_mainnet
        )
        self.signer = signer
        self.nonce_factory = nonce_factory

        # Asset map cache
        self._asset_map: Optional[Dict[str, int]] = asset_map

    async def get_asset_map(self) -> Dict[str, int]:
        """Get or fetch the coin to asset index map."""
        if self._asset_map is None:
            self._asset_map = await self.info_client.get_asset_index_map()
        return self._asset_map

    async def build_action(
        self,
        order_requests: List[OrderRequest],
        grouping: Union[Grouping, str] = Grouping.NA,
    ) -> OrderAction:
        """Resolve assets and assemble an action without signing it."""
        asset_map = await self.get_asset_map()
        return build_order_action(order_requests, asset_map, grouping)

    async def bulk_orders(
        self,
        order_requests: List[OrderRequest],
        grouping: Union[Grouping, str] = Grouping.NA,
    ) -> OrderSubmission:
        """
        Sign and submit a batch of orders as one action.

        Args:
            order_requests: Orders in submission order
            grouping: Grouping mode for the batch

        Returns:
            Submission with the signed action and exchange response
        """
        action = (await self.build_action(order_requests, grouping)).to_dict()
        nonce = self.nonce_factory()

        signature = self.signer(
            self.wallet,
            action,
            self.vault_address,
            nonce,
            self.is_mainnet,
        )

        logger.info(
            "order_action_signed",
            orders=len(action["orders"]),
            grouping=action["grouping"],
            nonce=nonce,
        )

        try:
            response = await self.exchange_client.post_action(
                action,
                nonce,
                signature,
                self.vault_address,
            )

        except Exception as e:
            metrics.record_submission_failure(e)
            logger.error(
                "order_action_submission_failed",
                nonce=nonce,
                error=str(e),
            )
            raise

        metrics.record_action_submitted(action["grouping"])

        return OrderSubmission(
            action=action,
            nonce=nonce,
            signature=signature,
            response=response,
        )

    async def order(
        self,
        coin: str,
        is_buy: bool,
        sz: float,
        limit_px: float,
        order_type: Union[OrderType, Dict[str, Any]],
        reduce_only: bool = False,
        cloid: Optional[Cloid] = None,
    ) -> OrderSubmission:
        """Place a single order."""
        request = OrderRequest(
            coin=coin,
            is_buy=is_buy,
            sz=sz,
            limit_px=limit_px,
            order_type=order_type,
            reduce_only=reduce_only,
            cloid=cloid,
        )
        return await self.bulk_orders([request])

    async def close(self) -> None:
        await self.exchange_client.close()
        await self.info_client.close()


__all__ = [
    "OrderSubmitter",
    "build_order_action",
    "get_timestamp_ms",
]
