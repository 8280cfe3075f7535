"""
StarkNet Gateway
================

Provider boundary of the transaction client.

A gateway bundles the two network endpoints of one NetworkProfile: the
query side used for status lookups and the account side used to sign and
submit invocations. `FullNodeGateway` talks JSON-RPC through starknet-py;
`MockStarkNetGateway` (see mock.py) replays scripted statuses.

Version: 0.1.0
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from marshmallow import ValidationError as SchemaValidationError
from starknet_py.hash.selector import get_selector_from_name
from starknet_py.net.account.account import Account
from starknet_py.net.client_errors import ClientError
from starknet_py.net.client_models import Call
from starknet_py.net.full_node_client import FullNodeClient

from badge_registrar.errors import StatusQueryError
from badge_registrar.logging import get_logger
from badge_registrar.models import TransactionHandle, TransactionStatus
from badge_registrar.starknet.chains import NetworkProfile
from badge_registrar.starknet.identity import SigningIdentity

logger = get_logger(__name__)

# JSON-RPC error returned while the node has not seen the transaction
TRANSACTION_HASH_NOT_FOUND = 29

_FINALITY_STATUSES = {
    "NOT_RECEIVED": TransactionStatus.NOT_RECEIVED,
    "RECEIVED": TransactionStatus.RECEIVED,
    "PENDING": TransactionStatus.PENDING,
    "CANDIDATE": TransactionStatus.PENDING,
    "PRE_CONFIRMED": TransactionStatus.PENDING,
    "ACCEPTED_ON_L2": TransactionStatus.ACCEPTED_ON_L2,
    "ACCEPTED_ON_L1": TransactionStatus.ACCEPTED_ON_L1,
    "REJECTED": TransactionStatus.REJECTED,
}


def classify_status(finality_status: Any, execution_status: Any = None) -> TransactionStatus:
    """
    Map a node's status response onto TransactionStatus.

    A reverted execution counts as a rejection: the registry call did not
    take effect even though the block containing it was accepted.

    Args:
        finality_status: Finality status enum or string from the node
        execution_status: Execution status enum or string, if known

    Returns:
        TransactionStatus
    """
    if _enum_value(execution_status) == "REVERTED":
        return TransactionStatus.REJECTED

    finality = _enum_value(finality_status)
    status = _FINALITY_STATUSES.get(finality)
    if status is None:
        logger.warning("unknown_finality_status", finality_status=finality)
        return TransactionStatus.PENDING
    return status


def _enum_value(value: Any) -> str | None:
    if value is None:
        return None
    return str(getattr(value, "value", value)).upper()


class StarkNetGateway(ABC):
    """
    Abstract base class for StarkNet gateways.

    Implements the Strategy pattern for live and scripted networks.
    """

    @property
    @abstractmethod
    def profile(self) -> NetworkProfile:
        """Network both endpoints belong to."""
        ...

    @abstractmethod
    async def invoke(
        self,
        contract_address: int,
        entrypoint: str,
        calldata: list[int],
    ) -> TransactionHandle:
        """
        Sign and submit a contract invocation.

        Args:
            contract_address: Target contract
            entrypoint: External function name
            calldata: Function arguments as field elements

        Returns:
            Handle of the submitted transaction
        """
        ...

    @abstractmethod
    async def get_transaction_status(self, handle: TransactionHandle) -> TransactionStatus:
        """
        Query the status of a transaction.

        Raises:
            StatusQueryError: On transient provider or transport failures
        """
        ...

    @abstractmethod
    async def get_block_number(self) -> int:
        """Get the latest block number seen by the query endpoint."""
        ...


class FullNodeGateway(StarkNetGateway):
    """Gateway backed by StarkNet JSON-RPC nodes."""

    def __init__(
        self,
        profile: NetworkProfile,
        identity: SigningIdentity,
        request_timeout: float = 30.0,
    ) -> None:
        """
        Initialize the gateway.

        Args:
            profile: Network to talk to; both endpoints come from it
            identity: Account signing the invocations
            request_timeout: Per-request timeout in seconds
        """
        self._profile = profile
        self._request_timeout = request_timeout
        self._query_client = FullNodeClient(node_url=profile.query_url)
        self._account = Account(
            address=identity.address,
            client=FullNodeClient(node_url=profile.submit_url),
            key_pair=identity.key_pair,
            chain=profile.chain_id,
        )

        logger.debug(
            "full_node_gateway_initialized",
            chain=profile.chain.value,
            query_url=profile.query_url,
            submit_url=profile.submit_url,
        )

    @property
    def profile(self) -> NetworkProfile:
        return self._profile

    async def invoke(
        self,
        contract_address: int,
        entrypoint: str,
        calldata: list[int],
    ) -> TransactionHandle:
        call = Call(
            to_addr=contract_address,
            selector=get_selector_from_name(entrypoint),
            calldata=calldata,
        )
        response = await asyncio.wait_for(
            self._account.execute_v3(calls=call, auto_estimate=True),
            timeout=self._request_timeout,
        )
        return TransactionHandle(transaction_hash=response.transaction_hash)

    async def get_transaction_status(self, handle: TransactionHandle) -> TransactionStatus:
        try:
            response = await asyncio.wait_for(
                self._query_client.get_transaction_status(handle.transaction_hash),
                timeout=self._request_timeout,
            )
        except ClientError as e:
            if str(e.code) == str(TRANSACTION_HASH_NOT_FOUND):
                return TransactionStatus.NOT_RECEIVED
            raise StatusQueryError(f"Status query for {handle} failed: {e.message}") from e
        except SchemaValidationError as e:
            logger.warning(
                "unknown_finality_status",
                tx_hash=handle.hex,
                error=str(e.messages),
            )
            return TransactionStatus.PENDING
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise StatusQueryError(
                f"Status query for {handle} failed: {type(e).__name__}: {e}"
            ) from e

        return classify_status(response.finality_status, response.execution_status)

    async def get_block_number(self) -> int:
        return await asyncio.wait_for(
            self._query_client.get_block_number(),
            timeout=self._request_timeout,
        )
