"""
Unit tests for the StarkNet transaction client.
"""

import asyncio

import pytest

from badge_registrar.errors import (
    ConfirmationTimeoutError,
    SubmissionError,
    TransactionRejectedError,
)
from badge_registrar.models import GitHubIdentityClaim, TransactionStatus
from badge_registrar.starknet import (
    ConfirmationPoller,
    MockStarkNetGateway,
    NetworkProfile,
    SigningIdentity,
    StarkNetClient,
    select_chain,
)
from badge_registrar.starknet.client import DEFAULT_REGISTRATION_ENTRYPOINT
from badge_registrar.starknet.poller import DEFAULT_CONFIRMATION_TIMEOUT

from tests.helpers import TEST_REGISTRY, RecordingSleep

USER_ADDRESS = "0x04a3b2c1d0e9f8a7b6c5d4e3f2a1b0c9d8e7f6a5b4c3d2e1f0a9b8c7d6e5f4a3"


@pytest.fixture
def claim() -> GitHubIdentityClaim:
    return GitHubIdentityClaim(github_user_id=4242, user_address=USER_ADDRESS)


class TestStarkNetClient:
    """Tests for StarkNetClient."""

    @pytest.mark.asyncio
    async def test_submit_badge_registration(
        self,
        client: StarkNetClient,
        gateway: MockStarkNetGateway,
        claim: GitHubIdentityClaim,
    ) -> None:
        """Submission invokes the registry with the claim's calldata."""
        handle = await client.submit_badge_registration(claim)

        assert len(gateway.invocations) == 1
        invocation = gateway.invocations[0]
        assert invocation.handle == handle
        assert invocation.contract_address == int(TEST_REGISTRY, 16)
        assert invocation.entrypoint == DEFAULT_REGISTRATION_ENTRYPOINT
        assert invocation.calldata == [int(USER_ADDRESS, 16), 4242]

    @pytest.mark.asyncio
    async def test_submission_error_wraps_cause(
        self,
        client: StarkNetClient,
        gateway: MockStarkNetGateway,
        claim: GitHubIdentityClaim,
    ) -> None:
        """Provider failures surface as SubmissionError and are not retried."""
        cause = ConnectionError("node unreachable")
        gateway.submission_error = cause

        with pytest.raises(SubmissionError) as exc_info:
            await client.submit_badge_registration(claim)

        assert exc_info.value.__cause__ is cause
        assert gateway.invocations == []

    @pytest.mark.asyncio
    async def test_await_finality(
        self,
        client: StarkNetClient,
        gateway: MockStarkNetGateway,
        claim: GitHubIdentityClaim,
        sleep: RecordingSleep,
    ) -> None:
        handle = await client.submit_badge_registration(claim)
        gateway.script(handle, [TransactionStatus.RECEIVED, TransactionStatus.ACCEPTED_ON_L2])

        outcome = await client.await_finality(handle)

        assert outcome.handle == handle
        assert outcome.status == TransactionStatus.ACCEPTED_ON_L2
        assert outcome.attempts == 2
        assert sleep.delays == [3.0]

    @pytest.mark.asyncio
    async def test_register_accepted(
        self,
        client: StarkNetClient,
        claim: GitHubIdentityClaim,
    ) -> None:
        """The default mock script accepts on the first query."""
        outcome = await client.register(claim)

        assert outcome.status.is_accepted
        assert outcome.attempts == 1

    @pytest.mark.asyncio
    async def test_register_rejected(
        self,
        testnet_profile: NetworkProfile,
        identity: SigningIdentity,
        sleep: RecordingSleep,
        claim: GitHubIdentityClaim,
    ) -> None:
        gateway = MockStarkNetGateway(
            testnet_profile,
            default_script=[TransactionStatus.PENDING, TransactionStatus.REJECTED],
        )
        client = StarkNetClient(
            testnet_profile,
            identity,
            int(TEST_REGISTRY, 16),
            gateway=gateway,
            poller=ConfirmationPoller(gateway, sleep=sleep),
        )

        with pytest.raises(TransactionRejectedError) as exc_info:
            await client.register(claim)

        assert exc_info.value.handle == gateway.invocations[0].handle

    @pytest.mark.asyncio
    async def test_register_timeout(
        self,
        testnet_profile: NetworkProfile,
        identity: SigningIdentity,
        sleep: RecordingSleep,
        claim: GitHubIdentityClaim,
    ) -> None:
        gateway = MockStarkNetGateway(testnet_profile, default_script=[TransactionStatus.RECEIVED])
        client = StarkNetClient(
            testnet_profile,
            identity,
            int(TEST_REGISTRY, 16),
            gateway=gateway,
            poller=ConfirmationPoller(gateway, max_attempts=5, sleep=sleep),
        )

        with pytest.raises(ConfirmationTimeoutError) as exc_info:
            await client.register(claim)

        assert exc_info.value.attempts == 5
        assert exc_info.value.last_status == TransactionStatus.RECEIVED

    @pytest.mark.asyncio
    async def test_concurrent_registrations(
        self,
        client: StarkNetClient,
        gateway: MockStarkNetGateway,
    ) -> None:
        """One shared client serves concurrent registrations."""
        claims = [
            GitHubIdentityClaim(github_user_id=i, user_address=hex(1000 + i))
            for i in range(1, 6)
        ]

        outcomes = await asyncio.gather(*(client.register(c) for c in claims))

        assert len({o.handle for o in outcomes}) == 5
        assert len(gateway.invocations) == 5

    def test_rejects_gateway_of_other_network(
        self,
        testnet_profile: NetworkProfile,
        identity: SigningIdentity,
    ) -> None:
        """Query and submission endpoints cannot come from different profiles."""
        mainnet_gateway = MockStarkNetGateway(select_chain("MAINNET"))

        with pytest.raises(ValueError):
            StarkNetClient(
                testnet_profile,
                identity,
                int(TEST_REGISTRY, 16),
                gateway=mainnet_gateway,
            )

    def test_rejects_poller_of_other_gateway(
        self,
        testnet_profile: NetworkProfile,
        identity: SigningIdentity,
        gateway: MockStarkNetGateway,
    ) -> None:
        other = MockStarkNetGateway(testnet_profile)

        with pytest.raises(ValueError):
            StarkNetClient(
                testnet_profile,
                identity,
                int(TEST_REGISTRY, 16),
                gateway=gateway,
                poller=ConfirmationPoller(other),
            )

    def test_default_gateway_uses_profile(
        self,
        testnet_profile: NetworkProfile,
        identity: SigningIdentity,
    ) -> None:
        client = StarkNetClient(testnet_profile, identity, int(TEST_REGISTRY, 16))

        assert client.profile == testnet_profile
        assert client.account_address == identity.address

    def test_default_poller_has_deadline(
        self,
        testnet_profile: NetworkProfile,
        identity: SigningIdentity,
    ) -> None:
        """A client built without a poller still gives up eventually."""
        client = StarkNetClient(
            testnet_profile,
            identity,
            int(TEST_REGISTRY, 16),
            gateway=MockStarkNetGateway(testnet_profile),
        )

        assert client._poller._timeout == DEFAULT_CONFIRMATION_TIMEOUT
        assert client._poller._max_attempts is None

    @pytest.mark.asyncio
    async def test_health_check(self, client: StarkNetClient) -> None:
        health = await client.health_check()

        assert health["status"] == "healthy"
        assert health["chain"] == "TESTNET"
        assert health["block_number"] == 1000
        assert health["badge_registry"] == TEST_REGISTRY.replace("0x0", "0x", 1)
