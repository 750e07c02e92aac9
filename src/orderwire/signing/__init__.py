"""
Signing of assembled order actions.
"""

from orderwire.signing.l1 import (
    action_hash,
    construct_phantom_agent,
    sign_l1_action,
    recover_l1_action_signer,
)
from orderwire.signing.wallet import load_wallet

__all__ = [
    "action_hash",
    "construct_phantom_agent",
    "sign_l1_action",
    "recover_l1_action_signer",
    "load_wallet",
]
