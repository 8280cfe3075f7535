"""
StarkNet Transaction Client
===========================

Account-bound client submitting badge registrations to the registry
contract and waiting for them to finalize.

Version: 0.1.0
"""

from typing import Any

from badge_registrar.errors import SubmissionError
from badge_registrar.logging import get_logger
from badge_registrar.models import (
    GitHubIdentityClaim,
    TerminalOutcome,
    TransactionHandle,
    format_field_element,
)
from badge_registrar.starknet.chains import NetworkProfile
from badge_registrar.starknet.gateway import FullNodeGateway, StarkNetGateway
from badge_registrar.starknet.identity import SigningIdentity
from badge_registrar.starknet.poller import ConfirmationPoller

logger = get_logger(__name__)

DEFAULT_REGISTRATION_ENTRYPOINT = "register_github_identity"


class StarkNetClient:
    """
    Transaction client for the badge registry.

    Built once at startup and shared by every registration. The client
    holds no mutable state after construction; its query and submission
    endpoints both come from the single NetworkProfile it was built with.
    """

    def __init__(
        self,
        profile: NetworkProfile,
        identity: SigningIdentity,
        badge_registry_address: int,
        *,
        gateway: StarkNetGateway | None = None,
        poller: ConfirmationPoller | None = None,
        entrypoint: str = DEFAULT_REGISTRATION_ENTRYPOINT,
        request_timeout: float = 30.0,
    ) -> None:
        """
        Initialize the client.

        Args:
            profile: Network selected at startup
            identity: Account signing the registrations
            badge_registry_address: Registry contract address
            gateway: Gateway to use instead of a FullNodeGateway
            poller: Poller to use instead of the default one
            entrypoint: Registry function registering an identity
            request_timeout: Per-request timeout of the default gateway

        Raises:
            ValueError: If the gateway or poller belong to another network
        """
        if gateway is None:
            gateway = FullNodeGateway(profile, identity, request_timeout=request_timeout)
        if gateway.profile != profile:
            raise ValueError(
                f"Gateway is bound to {gateway.profile.chain.value}, "
                f"client to {profile.chain.value}"
            )
        if poller is None:
            poller = ConfirmationPoller(gateway)
        if poller.gateway is not gateway:
            raise ValueError("Poller must query the client's own gateway")

        self._profile = profile
        self._identity = identity
        self._badge_registry_address = badge_registry_address
        self._gateway = gateway
        self._poller = poller
        self._entrypoint = entrypoint

        logger.info(
            "starknet_client_initialized",
            chain=profile.chain.value,
            account=format_field_element(identity.address),
            badge_registry=format_field_element(badge_registry_address),
        )

    @property
    def profile(self) -> NetworkProfile:
        return self._profile

    @property
    def account_address(self) -> int:
        return self._identity.address

    @property
    def badge_registry_address(self) -> int:
        return self._badge_registry_address

    async def submit_badge_registration(self, claim: GitHubIdentityClaim) -> TransactionHandle:
        """
        Submit a badge registration for a verified GitHub identity.

        Submissions are not retried here; retry policy belongs to the caller.

        Args:
            claim: Verified identity claim

        Returns:
            Handle of the submitted transaction

        Raises:
            SubmissionError: If the provider failed to accept the invocation
        """
        try:
            handle = await self._gateway.invoke(
                self._badge_registry_address,
                self._entrypoint,
                claim.to_calldata(),
            )
        except Exception as e:
            logger.error(
                "badge_registration_submission_failed",
                github_user_id=claim.github_user_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise SubmissionError(f"Failed to submit registration for {claim}: {e}") from e

        logger.info(
            "badge_registration_submitted",
            github_user_id=claim.github_user_id,
            user_address=format_field_element(claim.user_address),
            tx_hash=handle.hex,
        )
        return handle

    async def await_finality(self, handle: TransactionHandle) -> TerminalOutcome:
        """
        Wait until a submitted transaction is accepted.

        Raises:
            TransactionRejectedError: If the chain rejected the transaction
            ConfirmationTimeoutError: If polling gave up
        """
        return await self._poller.wait_for_acceptance(handle)

    async def register(self, claim: GitHubIdentityClaim) -> TerminalOutcome:
        """
        Submit a registration and wait for it to be accepted.

        Args:
            claim: Verified identity claim

        Returns:
            TerminalOutcome of the registration transaction
        """
        handle = await self.submit_badge_registration(claim)
        return await self.await_finality(handle)

    async def health_check(self) -> dict[str, Any]:
        """Check connectivity to the query endpoint."""
        health: dict[str, Any] = {
            "chain": self._profile.chain.value,
            "account": format_field_element(self._identity.address),
            "badge_registry": format_field_element(self._badge_registry_address),
        }
        try:
            health["block_number"] = await self._gateway.get_block_number()
            health["status"] = "healthy"
        except Exception as e:
            logger.warning("starknet_health_check_failed", error=str(e))
            health["status"] = "unhealthy"
            health["error"] = str(e)
        return health
