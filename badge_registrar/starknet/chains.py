"""
Chain Selection
===============

Maps the configured chain name to a network profile.

Version: 0.1.0
"""

from dataclasses import dataclass, replace
from enum import Enum

from badge_registrar.errors import UnrecognizedChainError


class StarkNetChain(str, Enum):
    """Supported StarkNet networks."""

    TESTNET = "TESTNET"
    MAINNET = "MAINNET"


# StarkNet chain ids are the ASCII network names encoded as integers
SN_SEPOLIA = int.from_bytes(b"SN_SEPOLIA", "big")
SN_MAIN = int.from_bytes(b"SN_MAIN", "big")


@dataclass(frozen=True)
class NetworkProfile:
    """
    Endpoints and chain id of one StarkNet network.

    Attributes:
        chain: Network this profile belongs to
        query_url: JSON-RPC endpoint for status queries
        submit_url: JSON-RPC endpoint for account-bound submissions
        chain_id: Chain id used when signing transactions
    """

    chain: StarkNetChain
    query_url: str
    submit_url: str
    chain_id: int

    def with_rpc_url(self, rpc_url: str) -> "NetworkProfile":
        """Point both endpoints at the same custom node."""
        return replace(self, query_url=rpc_url, submit_url=rpc_url)


NETWORK_PROFILES: dict[StarkNetChain, NetworkProfile] = {
    StarkNetChain.TESTNET: NetworkProfile(
        chain=StarkNetChain.TESTNET,
        query_url="https://free-rpc.nethermind.io/sepolia-juno/",
        submit_url="https://free-rpc.nethermind.io/sepolia-juno/",
        chain_id=SN_SEPOLIA,
    ),
    StarkNetChain.MAINNET: NetworkProfile(
        chain=StarkNetChain.MAINNET,
        query_url="https://free-rpc.nethermind.io/mainnet-juno/",
        submit_url="https://free-rpc.nethermind.io/mainnet-juno/",
        chain_id=SN_MAIN,
    ),
}


def select_chain(value: str) -> NetworkProfile:
    """
    Resolve a chain name to its network profile.

    Only the exact, upper-case names are accepted.

    Args:
        value: "TESTNET" or "MAINNET"

    Returns:
        The matching NetworkProfile

    Raises:
        UnrecognizedChainError: For any other input
    """
    for chain, profile in NETWORK_PROFILES.items():
        if value == chain.value:
            return profile
    raise UnrecognizedChainError(value)
