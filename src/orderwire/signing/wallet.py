"""
Wallet loading for order signing.
"""

from typing import Optional

import structlog
from eth_account import Account
from eth_account.signers.local import LocalAccount

from orderwire.config import config

logger = structlog.get_logger()


def load_wallet(private_key: Optional[str] = None) -> LocalAccount:
    """
    Load a local signing wallet.

    Args:
        private_key: Hex-encoded key; defaults to SIGNING_PRIVATE_KEY

    Returns:
        eth-account local account
    """
    key = private_key or config.signing.private_key.get_secret_value()
    if not key:
        raise ValueError("No signing key configured (set SIGNING_PRIVATE_KEY)")

    try:
        wallet = Account.from_key(key)
    except Exception as e:
        logger.error("wallet_load_failed", error=str(e))
        raise

    logger.info("wallet_loaded", address=wallet.address)
    return wallet


__all__ = ["load_wallet"]
