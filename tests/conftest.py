"""
Test Configuration
==================

Pytest fixtures for badge registrar tests.
"""

import os

import pytest

from badge_registrar.starknet import (
    ConfirmationPoller,
    MockStarkNetGateway,
    NetworkProfile,
    SigningIdentity,
    StarkNetClient,
    select_chain,
)

from tests.helpers import (
    TEST_ACCOUNT,
    TEST_PRIVATE_KEY,
    TEST_REGISTRY,
    RecordingSleep,
)

# Set test environment
os.environ["ENVIRONMENT"] = "testing"


@pytest.fixture
def testnet_profile() -> NetworkProfile:
    """Testnet network profile."""
    return select_chain("TESTNET")


@pytest.fixture
def identity() -> SigningIdentity:
    """Signing identity built from test keys."""
    return SigningIdentity.from_hex(TEST_ACCOUNT, TEST_PRIVATE_KEY)


@pytest.fixture
def gateway(testnet_profile: NetworkProfile) -> MockStarkNetGateway:
    """Fresh mock gateway accepting every transaction on first query."""
    return MockStarkNetGateway(testnet_profile)


@pytest.fixture
def sleep() -> RecordingSleep:
    """Sleep that returns immediately."""
    return RecordingSleep()


@pytest.fixture
def poller(gateway: MockStarkNetGateway, sleep: RecordingSleep) -> ConfirmationPoller:
    """Unbounded poller over the mock gateway."""
    return ConfirmationPoller(gateway, interval=3.0, sleep=sleep)


@pytest.fixture
def client(
    testnet_profile: NetworkProfile,
    identity: SigningIdentity,
    gateway: MockStarkNetGateway,
    poller: ConfirmationPoller,
) -> StarkNetClient:
    """Transaction client wired to the mock gateway."""
    return StarkNetClient(
        testnet_profile,
        identity,
        int(TEST_REGISTRY, 16),
        gateway=gateway,
        poller=poller,
    )


@pytest.fixture
def starknet_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Complete, valid STARKNET_* environment."""
    env = {
        "STARKNET_CHAIN": "TESTNET",
        "STARKNET_ACCOUNT": TEST_ACCOUNT,
        "STARKNET_PRIVATE_KEY": TEST_PRIVATE_KEY,
        "STARKNET_BADGE_REGISTRY_ADDRESS": TEST_REGISTRY,
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env
