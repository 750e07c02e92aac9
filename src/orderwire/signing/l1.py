"""
L1 action signing.

Hashes an order action with msgpack + keccak and signs the resulting
"phantom agent" as EIP-712 typed data with an eth-account wallet.
"""

from typing import Any, Dict, Optional

import msgpack
import structlog
from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_account.signers.local import LocalAccount
from web3 import Web3

logger = structlog.get_logger()

# EIP-712 domain used for every L1 action
L1_DOMAIN = {
    "chainId": 1337,
    "name": "Exchange",
    "verifyingContract": "0x0000000000000000000000000000000000000000",
    "version": "1",
}

AGENT_TYPES = {
    "Agent": [
        {"name": "source", "type": "string"},
        {"name": "connectionId", "type": "bytes32"},
    ],
    "EIP712Domain": [
        {"name": "name", "type": "string"},
        {"name": "version", "type": "string"},
        {"name": "chainId", "type": "uint256"},
        {"name": "verifyingContract", "type": "address"},
    ],
}


def address_to_bytes(address: str) -> bytes:
    """Convert a 0x-prefixed address into its 20 raw bytes."""
    if not Web3.is_address(address):
        raise ValueError(f"Invalid address: {address!r}")
    return bytes.fromhex(address[2:] if address.startswith("0x") else address)


def action_hash(
    action: Dict[str, Any],
    vault_address: Optional[str],
    nonce: int,
) -> bytes:
    """
    Hash an action for signing.

    Args:
        action: Action dict, exactly as it will be submitted
        vault_address: Vault or subaccount traded on behalf of, if any
        nonce: Millisecond timestamp nonce

    Returns:
        32-byte keccak hash
    """
    data = msgpack.packb(action)
    data += nonce.to_bytes(8, "big")
    if vault_address is None:
        data += b"\x00"
    else:
        data += b"\x01"
        data += address_to_bytes(vault_address)
    return bytes(Web3.keccak(data))


def construct_phantom_agent(connection_id: bytes, is_mainnet: bool) -> Dict[str, Any]:
    return {"source": "a" if is_mainnet else "b", "connectionId": connection_id}


def l1_payload(phantom_agent: Dict[str, Any]) -> Dict[str, Any]:
    """Full EIP-712 message for a phantom agent."""
    return {
        "domain": L1_DOMAIN,
        "types": AGENT_TYPES,
        "primaryType": "Agent",
        "message": phantom_agent,
    }


def sign_l1_action(
    wallet: LocalAccount,
    action: Dict[str, Any],
    vault_address: Optional[str],
    nonce: int,
    is_mainnet: bool,
) -> Dict[str, Any]:
    """
    Sign an L1 action.

    Args:
        wallet: Local eth-account wallet
        action: Fully assembled action dict
        vault_address: Vault or subaccount address, if any
        nonce: Millisecond timestamp nonce
        is_mainnet: Selects the phantom agent source

    Returns:
        Signature as {"r": hex, "s": hex, "v": int}
    """
    try:
        hashed_action = action_hash(action, vault_address, nonce)
        phantom_agent = construct_phantom_agent(hashed_action, is_mainnet)
        structured = encode_typed_data(full_message=l1_payload(phantom_agent))
        signed = wallet.sign_message(structured)

        logger.debug(
            "l1_action_signed",
            signer=wallet.address,
            action_type=action.get("type"),
            nonce=nonce,
            vault_address=vault_address,
        )

        return {
            "r": Web3.to_hex(signed.r),
            "s": Web3.to_hex(signed.s),
            "v": signed.v,
        }

    except Exception as e:
        logger.error("l1_action_sign_failed", nonce=nonce, error=str(e))
        raise


def recover_l1_action_signer(
    action: Dict[str, Any],
    vault_address: Optional[str],
    nonce: int,
    signature: Dict[str, Any],
    is_mainnet: bool,
) -> str:
    """Recover the address that produced a signature over an action."""
    hashed_action = action_hash(action, vault_address, nonce)
    structured = encode_typed_data(
        full_message=l1_payload(construct_phantom_agent(hashed_action, is_mainnet))
    )
    return Account.recover_message(
        structured,
        vrs=(signature["v"], signature["r"], signature["s"]),
    )


__all__ = [
    "action_hash",
    "address_to_bytes",
    "construct_phantom_agent",
    "l1_payload",
    "sign_l1_action",
    "recover_l1_action_signer",
]
