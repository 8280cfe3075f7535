"""
StarkNet Module
===============

Badge registry access on StarkNet.

Supports:
- Testnet (Sepolia)
- Mainnet
- Mock gateway (development/testing)

Usage:
    from badge_registrar.config import get_settings
    from badge_registrar.models import GitHubIdentityClaim
    from badge_registrar.starknet import build_starknet_client

    client = build_starknet_client(get_settings())

    handle = await client.submit_badge_registration(
        GitHubIdentityClaim(github_user_id=42, user_address="0x1234"),
    )
    outcome = await client.await_finality(handle)
"""

from badge_registrar.config import Settings
from badge_registrar.errors import InvalidRegistryAddressError
from badge_registrar.logging import get_logger
from badge_registrar.models import parse_field_element
from badge_registrar.starknet.chains import (
    NETWORK_PROFILES,
    NetworkProfile,
    StarkNetChain,
    select_chain,
)
from badge_registrar.starknet.client import StarkNetClient
from badge_registrar.starknet.gateway import (
    FullNodeGateway,
    StarkNetGateway,
    classify_status,
)
from badge_registrar.starknet.identity import SigningIdentity
from badge_registrar.starknet.mock import MockStarkNetGateway
from badge_registrar.starknet.poller import ConfirmationPoller

logger = get_logger(__name__)


def build_starknet_client(
    settings: Settings,
    gateway: StarkNetGateway | None = None,
) -> StarkNetClient:
    """
    Build the process-wide StarkNet client from settings.

    Every configuration value is validated here, so a bad deployment
    fails before anything is served.

    Args:
        settings: Application settings
        gateway: Optional gateway replacing the JSON-RPC one (e.g. a mock)

    Returns:
        StarkNetClient ready to be shared by request handlers

    Raises:
        UnrecognizedChainError: Unknown STARKNET_CHAIN
        InvalidPrivateKeyError: Malformed STARKNET_PRIVATE_KEY
        InvalidAccountAddressError: Malformed STARKNET_ACCOUNT
        InvalidRegistryAddressError: Malformed STARKNET_BADGE_REGISTRY_ADDRESS
    """
    config = settings.starknet
    logger.info("loading_starknet_configuration")

    profile = select_chain(config.chain)
    if config.rpc_url:
        profile = profile.with_rpc_url(config.rpc_url)

    identity = SigningIdentity.from_hex(
        config.account,
        config.private_key.get_secret_value(),
    )

    try:
        badge_registry_address = parse_field_element(config.badge_registry_address)
    except ValueError as e:
        raise InvalidRegistryAddressError(f"Invalid address for badge registry: {e}") from None

    if gateway is None:
        gateway = FullNodeGateway(
            profile,
            identity,
            request_timeout=config.request_timeout_seconds,
        )

    poller = ConfirmationPoller(
        gateway,
        interval=config.poll_interval_seconds,
        timeout=config.confirmation_timeout_seconds,
        max_attempts=config.max_poll_attempts,
    )

    logger.info("starknet_configuration_loaded", chain=profile.chain.value)

    return StarkNetClient(
        profile,
        identity,
        badge_registry_address,
        gateway=gateway,
        poller=poller,
        entrypoint=config.registration_entrypoint,
    )


__all__ = [
    # Factory
    "build_starknet_client",
    # Chains
    "StarkNetChain",
    "NetworkProfile",
    "NETWORK_PROFILES",
    "select_chain",
    # Signing
    "SigningIdentity",
    # Client
    "StarkNetClient",
    "ConfirmationPoller",
    # Gateways
    "StarkNetGateway",
    "FullNodeGateway",
    "MockStarkNetGateway",
    "classify_status",
]
