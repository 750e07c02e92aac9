"""
Test configuration and fixtures.
"""

import pytest
from pathlib import Path
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import structlog
from eth_account import Account

from orderwire.encoding import Cloid, LimitOrderType, OrderRequest, Tif


# Throwaway key, never funded
TEST_PRIVATE_KEY = "0x0123456789012345678901234567890123456789012345678901234567890123"


# ============== FIXTURES ==============

@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def private_key():
    """Hex-encoded test key."""
    return TEST_PRIVATE_KEY


@pytest.fixture
def wallet(private_key):
    """Local signing wallet."""
    return Account.from_key(private_key)


@pytest.fixture
def vault_address():
    """Vault the wallet trades on behalf of."""
    return "0x" + "1" * 40


@pytest.fixture
def btc_order():
    """Buy 0.001 BTC at 90000, good-til-cancelled."""
    return OrderRequest(
        coin="BTC",
        is_buy=True,
        sz=0.001,
        limit_px=90000,
        order_type={"limit": {"tif": "Gtc"}},
        reduce_only=False,
    )


@pytest.fixture
def eth_order():
    """Sell 0.5 ETH at 3500.5, add-liquidity-only, with a client id."""
    return OrderRequest(
        coin="ETH",
        is_buy=False,
        sz=0.5,
        limit_px=3500.5,
        order_type=LimitOrderType(tif=Tif.ALO),
        reduce_only=True,
        cloid=Cloid.from_int(7),
    )


@pytest.fixture
def asset_map():
    """Coin to asset index, as returned by the info endpoint."""
    return {"BTC": 0, "ETH": 1, "SOL": 5}
