"""
Mock StarkNet Gateway
=====================

In-memory gateway for development and testing.

Status queries replay a per-transaction script. Each script item is
either a TransactionStatus or an exception instance to raise. Once a
script runs out, its last status is repeated, so a terminal status
stays terminal.

Version: 0.1.0
"""

import hashlib
import uuid
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from badge_registrar.logging import get_logger
from badge_registrar.models import TransactionHandle, TransactionStatus
from badge_registrar.starknet.chains import NetworkProfile
from badge_registrar.starknet.gateway import StarkNetGateway

logger = get_logger(__name__)

ScriptItem = TransactionStatus | Exception


@dataclass(frozen=True)
class RecordedInvocation:
    """An invocation accepted by the mock gateway."""

    handle: TransactionHandle
    contract_address: int
    entrypoint: str
    calldata: list[int] = field(default_factory=list)


class MockStarkNetGateway(StarkNetGateway):
    """
    Scripted in-memory gateway.

    Data is stored in memory and lost on restart.
    """

    def __init__(
        self,
        profile: NetworkProfile,
        default_script: Iterable[ScriptItem] = (TransactionStatus.ACCEPTED_ON_L2,),
        submission_error: Exception | None = None,
    ) -> None:
        """
        Initialize the mock gateway.

        Args:
            profile: Network profile the gateway reports
            default_script: Status script given to every new submission
            submission_error: Raised by invoke() when set
        """
        self._profile = profile
        self._default_script = list(default_script)
        self.submission_error = submission_error
        self._block_number = 1000

        self._scripts: dict[int, deque[ScriptItem]] = {}
        self._last_status: dict[int, TransactionStatus] = {}
        self.invocations: list[RecordedInvocation] = []
        self.status_queries: list[TransactionHandle] = []

        logger.debug("mock_gateway_initialized", chain=profile.chain.value)

    @property
    def profile(self) -> NetworkProfile:
        return self._profile

    def _generate_tx_hash(self) -> int:
        """Generate a mock transaction hash that fits in a field element."""
        return int(hashlib.sha256(uuid.uuid4().bytes).hexdigest()[:62], 16)

    def script(self, handle: TransactionHandle, items: Iterable[ScriptItem]) -> None:
        """Replace the status script of a transaction."""
        self._scripts[handle.transaction_hash] = deque(items)
        self._last_status.pop(handle.transaction_hash, None)

    async def invoke(
        self,
        contract_address: int,
        entrypoint: str,
        calldata: list[int],
    ) -> TransactionHandle:
        if self.submission_error is not None:
            raise self.submission_error

        handle = TransactionHandle(transaction_hash=self._generate_tx_hash())
        self._block_number += 1
        self.invocations.append(
            RecordedInvocation(
                handle=handle,
                contract_address=contract_address,
                entrypoint=entrypoint,
                calldata=list(calldata),
            )
        )
        self.script(handle, self._default_script)

        logger.debug("mock_invocation_recorded", tx_hash=handle.hex, entrypoint=entrypoint)

        return handle

    async def get_transaction_status(self, handle: TransactionHandle) -> TransactionStatus:
        self.status_queries.append(handle)

        script = self._scripts.get(handle.transaction_hash)
        if not script:
            return self._last_status.get(handle.transaction_hash, TransactionStatus.NOT_RECEIVED)

        item = script.popleft()
        if isinstance(item, Exception):
            raise item

        self._last_status[handle.transaction_hash] = item
        return item

    async def get_block_number(self) -> int:
        return self._block_number

    # =========================================================================
    # Test Utilities
    # =========================================================================

    def queries_for(self, handle: TransactionHandle) -> int:
        """Number of status queries made for a transaction."""
        return sum(1 for h in self.status_queries if h == handle)

    def clear_all(self) -> None:
        """Clear all mock data (for testing)."""
        self._scripts.clear()
        self._last_status.clear()
        self.invocations.clear()
        self.status_queries.clear()
        self._block_number = 1000
        logger.debug("mock_gateway_cleared")
