"""
Networks supported by the Tenderly simulation action.

The host framework uses `supports_network` to decide whether the action
is offered for the wallet's current chain. The simulation flow itself
never consults it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

ChainId = Union[int, str]

# chain id -> display name; mainnets with their canonical testnets
SUPPORTED_NETWORKS: dict[int, str] = {
    1: "Ethereum Mainnet",
    5: "Ethereum Goerli",
    11155111: "Ethereum Sepolia",
    137: "Polygon",
    80001: "Polygon Mumbai",
    56: "BNB Smart Chain",
    97: "BNB Smart Chain Testnet",
    43114: "Avalanche C-Chain",
    43113: "Avalanche Fuji",
    10: "Optimism",
    420: "Optimism Goerli",
    42161: "Arbitrum One",
    421613: "Arbitrum Goerli",
}

SUPPORTED_CHAIN_IDS = frozenset(SUPPORTED_NETWORKS)


@dataclass(frozen=True)
class Network:
    chain_id: ChainId
    network_id: Optional[str] = None
    protocol_family: str = "evm"


def parse_chain_id(chain_id: ChainId) -> int:
    """
    Normalize a chain id to an int.

    Accepts ints, decimal strings and 0x-prefixed hex strings
    (as returned by eth_chainId).

    Raises:
        ValueError: If the value cannot be read as a chain id
    """
    if isinstance(chain_id, bool):
        raise ValueError(f"Invalid chain id: {chain_id!r}")
    if isinstance(chain_id, int):
        return chain_id
    text = str(chain_id).strip()
    if text.lower().startswith("0x"):
        return int(text, 16)
    return int(text, 10)


def supports_network(network: Network) -> bool:
    try:
        return parse_chain_id(network.chain_id) in SUPPORTED_CHAIN_IDS
    except (TypeError, ValueError):
        return False


def network_name(chain_id: ChainId) -> str:
    try:
        return SUPPORTED_NETWORKS.get(parse_chain_id(chain_id), "Unknown")
    except (TypeError, ValueError):
        return "Unknown"
