"""
Exchange API clients.
"""

from orderwire.clients.base import ApiClient
from orderwire.clients.exchange_client import ExchangeClient
from orderwire.clients.info_client import InfoClient

__all__ = [
    "ApiClient",
    "ExchangeClient",
    "InfoClient",
]
