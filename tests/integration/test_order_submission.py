"""
Test order submission end to end against a mocked exchange.
"""

import json
import httpx
import pytest
from dataclasses import replace
from unittest.mock import MagicMock

from orderwire.clients import ExchangeClient, InfoClient
from orderwire.encoding import Grouping
from orderwire.errors import InvalidOrderType, PrecisionLoss, UnknownAsset
from orderwire.execution import OrderSubmitter, build_order_action
from orderwire.signing import recover_l1_action_signer, sign_l1_action


BASE_URL = "https://exchange.test"
NONCE = 1700000000000


class FakeExchange:
    """Records requests and answers /info and /exchange."""

    def __init__(self, exchange_status: int = 200):
        self.requests = []
        self.exchange_status = exchange_status

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append((request.url.path, body))

        if request.url.path == "/info":
            return httpx.Response(
                200,
                json={"universe": [{"name": "BTC"}, {"name": "ETH"}, {"name": "SOL"}]},
            )
        if request.url.path == "/exchange":
            return httpx.Response(
                self.exchange_status,
                json={"status": "ok", "response": {"type": "order"}},
            )
        return httpx.Response(404)

    def paths(self):
        return [path for path, _ in self.requests]


@pytest.fixture
def exchange():
    return FakeExchange()


@pytest.fixture
def submitter(wallet, exchange):
    transport = httpx.MockTransport(exchange.handler)
    return OrderSubmitter(
        wallet,
        exchange_client=ExchangeClient(base_url=BASE_URL, transport=transport),
        info_client=InfoClient(base_url=BASE_URL, transport=transport),
        is_mainnet=False,
        nonce_factory=lambda: NONCE,
    )


@pytest.mark.asyncio
class TestOrderSubmitter:
    """Test OrderSubmitter."""

    async def test_bulk_orders_posts_signed_action(self, submitter, exchange, wallet, btc_order, eth_order):
        submission = await submitter.bulk_orders([btc_order, eth_order])
        await submitter.close()

        assert exchange.paths() == ["/info", "/exchange"]
        _, body = exchange.requests[1]

        assert body["nonce"] == NONCE
        assert body["vaultAddress"] is None
        assert body["action"] == submission.action
        assert body["action"]["orders"][0] == {
            "a": 0,
            "b": True,
            "p": "90000",
            "s": "0.001",
            "r": False,
            "t": {"limit": {"tif": "Gtc"}},
        }
        assert body["action"]["orders"][1]["a"] == 1
        assert submission.order_count == 2
        assert submission.response == {"status": "ok", "response": {"type": "order"}}

        signer = recover_l1_action_signer(body["action"], None, NONCE, body["signature"], False)
        assert signer == wallet.address

    async def test_posted_json_keeps_wire_field_order(self, submitter, exchange, btc_order):
        await submitter.bulk_orders([btc_order])
        await submitter.close()

        _, body = exchange.requests[-1]
        assert list(body["action"]) == ["type", "orders", "grouping"]
        assert list(body["action"]["orders"][0]) == ["a", "b", "p", "s", "r", "t"]

    async def test_asset_map_fetched_once(self, submitter, exchange, btc_order):
        await submitter.bulk_orders([btc_order])
        await submitter.bulk_orders([btc_order])
        await submitter.close()

        assert exchange.paths() == ["/info", "/exchange", "/exchange"]

    async def test_single_order(self, submitter, exchange):
        submission = await submitter.order(
            "SOL", False, 2.5, 150.25, {"limit": {"tif": "Ioc"}}, reduce_only=True
        )
        await submitter.close()

        assert submission.action["orders"] == [
            {"a": 2, "b": False, "p": "150.25", "s": "2.5", "r": True, "t": {"limit": {"tif": "Ioc"}}}
        ]

    async def test_vault_address_signed_and_sent(self, wallet, exchange, vault_address, btc_order):
        transport = httpx.MockTransport(exchange.handler)
        submitter = OrderSubmitter(
            wallet,
            exchange_client=ExchangeClient(base_url=BASE_URL, transport=transport),
            asset_map={"BTC": 0},
            vault_address=vault_address,
            is_mainnet=True,
            nonce_factory=lambda: NONCE,
        )

        await submitter.bulk_orders([btc_order], Grouping.POSITION_TPSL)
        await submitter.close()

        _, body = exchange.requests[-1]
        assert exchange.paths() == ["/exchange"]
        assert body["vaultAddress"] == vault_address
        assert body["action"]["grouping"] == "positionTpsl"
        signer = recover_l1_action_signer(body["action"], vault_address, NONCE, body["signature"], True)
        assert signer == wallet.address

    @pytest.mark.parametrize(
        "change,error",
        [
            ({"sz": 0.0000000001}, PrecisionLoss),
            ({"limit_px": 1 / 3}, PrecisionLoss),
            ({"order_type": {}}, InvalidOrderType),
            ({"coin": "DOGE"}, UnknownAsset),
        ],
    )
    async def test_invalid_order_never_signed(self, wallet, exchange, btc_order, eth_order, change, error):
        signer = MagicMock(wraps=sign_l1_action)
        transport = httpx.MockTransport(exchange.handler)
        submitter = OrderSubmitter(
            wallet,
            exchange_client=ExchangeClient(base_url=BASE_URL, transport=transport),
            info_client=InfoClient(base_url=BASE_URL, transport=transport),
            signer=signer,
            nonce_factory=lambda: NONCE,
        )

        with pytest.raises(error):
            await submitter.bulk_orders([eth_order, replace(btc_order, **change)])
        await submitter.close()

        signer.assert_not_called()
        assert "/exchange" not in exchange.paths()

    async def test_signer_called_once_per_action(self, wallet, exchange, btc_order, eth_order):
        signer = MagicMock(wraps=sign_l1_action)
        transport = httpx.MockTransport(exchange.handler)
        submitter = OrderSubmitter(
            wallet,
            exchange_client=ExchangeClient(base_url=BASE_URL, transport=transport),
            asset_map={"BTC": 0, "ETH": 1},
            signer=signer,
            nonce_factory=lambda: NONCE,
        )

        await submitter.bulk_orders([btc_order, eth_order, btc_order])
        await submitter.close()

        assert signer.call_count == 1
        assert len(signer.call_args.args[1]["orders"]) == 3

    async def test_http_error_propagates(self, wallet, btc_order):
        exchange = FakeExchange(exchange_status=500)
        transport = httpx.MockTransport(exchange.handler)
        submitter = OrderSubmitter(
            wallet,
            exchange_client=ExchangeClient(base_url=BASE_URL, transport=transport),
            asset_map={"BTC": 0},
            nonce_factory=lambda: NONCE,
        )

        with pytest.raises(httpx.HTTPStatusError):
            await submitter.bulk_orders([btc_order])
        await submitter.close()

        assert exchange.paths() == ["/exchange"]


class TestBuildOrderAction:
    """Test the offline half of submission."""

    def test_unknown_coin(self, btc_order):
        with pytest.raises(UnknownAsset) as exc_info:
            build_order_action([btc_order], {"ETH": 1})

        assert exc_info.value.value == "BTC"

    def test_resolves_assets_in_order(self, btc_order, eth_order, asset_map):
        action = build_order_action([eth_order, btc_order], asset_map, "normalTpsl")

        assert [o.asset for o in action.orders] == [1, 0]
        assert action.grouping is Grouping.NORMAL_TPSL


@pytest.mark.asyncio
class TestInfoClient:
    """Test InfoClient."""

    async def test_asset_index_map(self, exchange):
        client = InfoClient(base_url=BASE_URL, transport=httpx.MockTransport(exchange.handler))

        async with client:
            asset_map = await client.get_asset_index_map()

        assert asset_map == {"BTC": 0, "ETH": 1, "SOL": 2}
        assert exchange.requests == [("/info", {"type": "meta"})]
