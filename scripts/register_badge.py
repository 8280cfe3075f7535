#!/usr/bin/env python3
"""
Badge Registration Script
=========================

Register a GitHub identity in the badge registry from the command line,
or check connectivity to the configured StarkNet network.

Configuration comes from the same STARKNET_* environment variables as
the service.

Usage:
    python scripts/register_badge.py --health
    python scripts/register_badge.py --github-id 123456 --user-address 0x04a3...

Version: 0.1.0
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from badge_registrar.config import get_settings
from badge_registrar.errors import ConfigurationError, ConfirmationError, SubmissionError
from badge_registrar.logging import bind_context, get_logger, setup_logging
from badge_registrar.models import GitHubIdentityClaim
from badge_registrar.starknet import StarkNetClient, build_starknet_client

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2

logger = get_logger(__name__)


async def check_health(client: StarkNetClient) -> int:
    """Print the client's health report."""
    health = await client.health_check()
    print(json.dumps(health, indent=2))
    return EXIT_OK if health["status"] == "healthy" else EXIT_FAILED


async def register(client: StarkNetClient, claim: GitHubIdentityClaim) -> int:
    """Register one identity and wait for the transaction to finalize."""
    bind_context(github_user_id=claim.github_user_id)

    try:
        outcome = await client.register(claim)
    except SubmissionError as e:
        logger.error("registration_failed", reason="submission", error=str(e))
        return EXIT_FAILED
    except ConfirmationError as e:
        logger.error(
            "registration_failed",
            reason=type(e).__name__,
            tx_hash=e.handle.hex,
            attempts=e.attempts,
        )
        return EXIT_FAILED

    print(json.dumps({
        "transaction_hash": outcome.handle.hex,
        "status": outcome.status.value,
        "attempts": outcome.attempts,
    }, indent=2))
    return EXIT_OK


async def main(args: argparse.Namespace) -> int:
    """Main entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_CONFIG

    setup_logging(
        log_level=settings.log_level.value,
        json_logs=settings.is_production,
        service_name=settings.service_name,
    )

    try:
        client = build_starknet_client(settings)
    except ConfigurationError as e:
        logger.error("configuration_error", error=str(e))
        return EXIT_CONFIG

    if args.health:
        return await check_health(client)

    try:
        claim = GitHubIdentityClaim(
            github_user_id=args.github_id,
            user_address=args.user_address,
        )
    except ValidationError as e:
        print(f"Invalid identity claim:\n{e}", file=sys.stderr)
        return EXIT_CONFIG

    return await register(client, claim)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Register a GitHub identity in the StarkNet badge registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--health",
        action="store_true",
        help="Only check connectivity to the configured network",
    )
    parser.add_argument(
        "--github-id",
        type=int,
        help="Numeric GitHub user ID",
    )
    parser.add_argument(
        "--user-address",
        type=str,
        help="StarkNet account address receiving the badge (hex)",
    )

    args = parser.parse_args(argv)
    if not args.health and (args.github_id is None or args.user_address is None):
        parser.error("--github-id and --user-address are required unless --health is given")
    return args


if __name__ == "__main__":
    args = parse_args()
    exit_code = asyncio.run(main(args))
    sys.exit(exit_code)
