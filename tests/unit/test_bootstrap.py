"""
Unit tests for building the StarkNet client from settings.
"""

import pytest

from badge_registrar.errors import (
    InvalidAccountAddressError,
    InvalidPrivateKeyError,
    InvalidRegistryAddressError,
    UnrecognizedChainError,
)
from badge_registrar.models import GitHubIdentityClaim, TransactionStatus
from badge_registrar.starknet import (
    FullNodeGateway,
    MockStarkNetGateway,
    StarkNetChain,
    build_starknet_client,
    select_chain,
)

from tests.helpers import TEST_ACCOUNT, TEST_REGISTRY, load_settings


class TestBuildStarkNetClient:
    """Tests for build_starknet_client."""

    def test_builds_full_node_client(self, starknet_env: dict[str, str]) -> None:
        client = build_starknet_client(load_settings())

        assert client.profile.chain == StarkNetChain.TESTNET
        assert client.account_address == int(TEST_ACCOUNT, 16)
        assert client.badge_registry_address == int(TEST_REGISTRY, 16)
        assert isinstance(client._gateway, FullNodeGateway)

    def test_rpc_override(
        self,
        starknet_env: dict[str, str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("STARKNET_RPC_URL", "http://localhost:5050/rpc")

        client = build_starknet_client(load_settings())

        assert client.profile.query_url == "http://localhost:5050/rpc"
        assert client.profile.submit_url == "http://localhost:5050/rpc"

    def test_poller_settings(
        self,
        starknet_env: dict[str, str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("STARKNET_POLL_INTERVAL_SECONDS", "0.5")

        client = build_starknet_client(load_settings())

        assert client._poller.interval == 0.5

    @pytest.mark.parametrize("variable,value,error", [
        ("STARKNET_CHAIN", "testnet", UnrecognizedChainError),
        ("STARKNET_CHAIN", "GOERLI", UnrecognizedChainError),
        ("STARKNET_PRIVATE_KEY", "0xnothex", InvalidPrivateKeyError),
        ("STARKNET_PRIVATE_KEY", "0x0", InvalidPrivateKeyError),
        ("STARKNET_ACCOUNT", "0x" + "f" * 64, InvalidAccountAddressError),
        ("STARKNET_BADGE_REGISTRY_ADDRESS", "registry", InvalidRegistryAddressError),
    ])
    def test_fails_fast(
        self,
        starknet_env: dict[str, str],
        monkeypatch: pytest.MonkeyPatch,
        variable: str,
        value: str,
        error: type[Exception],
    ) -> None:
        monkeypatch.setenv(variable, value)

        with pytest.raises(error):
            build_starknet_client(load_settings())

    @pytest.mark.asyncio
    async def test_with_mock_gateway(
        self,
        starknet_env: dict[str, str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A mock gateway replaces the network end to end."""
        monkeypatch.setenv("STARKNET_POLL_INTERVAL_SECONDS", "0.01")
        monkeypatch.setenv("STARKNET_REGISTRATION_ENTRYPOINT", "register_badge")
        gateway = MockStarkNetGateway(
            select_chain("TESTNET"),
            default_script=[TransactionStatus.RECEIVED, TransactionStatus.ACCEPTED_ON_L1],
        )

        client = build_starknet_client(load_settings(), gateway=gateway)
        outcome = await client.register(GitHubIdentityClaim(github_user_id=1, user_address="0x2"))

        assert outcome.status == TransactionStatus.ACCEPTED_ON_L1
        assert outcome.attempts == 2
        assert gateway.invocations[0].entrypoint == "register_badge"
