"""
Confirmation Poller
===================

Waits for a submitted transaction to reach a terminal status.

The poller queries the gateway, and on a non-terminal status or a
transient query error waits a fixed interval before querying again:

    Querying --(NOT_RECEIVED | RECEIVED | PENDING)--> Waiting
    Querying --(ACCEPTED_ON_L2 | ACCEPTED_ON_L1)----> Accepted
    Querying --(REJECTED)---------------------------> Rejected
    Querying --(StatusQueryError)-------------------> Waiting
    Waiting  --(interval elapses)-------------------> Querying

The wait is an asyncio suspension, so other registrations keep running
while one is pending. Polling stops at the first terminal status, when
an optional attempt cap or deadline is reached, or when the awaiting
task is cancelled.

Version: 0.1.0
"""

import asyncio
from collections.abc import Awaitable, Callable

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    stop_after_delay,
    stop_never,
    wait_fixed,
)
from tenacity.stop import stop_base

from badge_registrar.errors import (
    ConfirmationTimeoutError,
    StatusQueryError,
    TransactionRejectedError,
)
from badge_registrar.logging import get_logger
from badge_registrar.models import TerminalOutcome, TransactionHandle, TransactionStatus
from badge_registrar.starknet.gateway import StarkNetGateway

logger = get_logger(__name__)

DEFAULT_POLL_INTERVAL = 3.0
DEFAULT_CONFIRMATION_TIMEOUT = 600.0

Sleep = Callable[[float], Awaitable[None]]


class ConfirmationPoller:
    """
    Polls a gateway until a transaction is accepted or rejected.

    Example:
        >>> poller = ConfirmationPoller(gateway, interval=3.0, timeout=600)
        >>> outcome = await poller.wait_for_acceptance(handle)
        >>> outcome.status
        <TransactionStatus.ACCEPTED_ON_L2: 'ACCEPTED_ON_L2'>
    """

    def __init__(
        self,
        gateway: StarkNetGateway,
        interval: float = DEFAULT_POLL_INTERVAL,
        timeout: float | None = DEFAULT_CONFIRMATION_TIMEOUT,
        max_attempts: int | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """
        Initialize the poller.

        Args:
            gateway: Gateway to query
            interval: Fixed delay between queries, in seconds
            timeout: Give up after this many seconds (None disables the deadline)
            max_attempts: Give up after this many queries (None for no cap)
            sleep: Coroutine used to wait between queries
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive")

        self._gateway = gateway
        self._interval = interval
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._sleep = sleep

    @property
    def gateway(self) -> StarkNetGateway:
        return self._gateway

    @property
    def interval(self) -> float:
        return self._interval

    def _stop_condition(self) -> stop_base:
        stop: stop_base = stop_never
        if self._max_attempts is not None:
            stop = stop | stop_after_attempt(self._max_attempts)
        if self._timeout is not None:
            stop = stop | stop_after_delay(self._timeout)
        return stop

    async def wait_for_acceptance(self, handle: TransactionHandle) -> TerminalOutcome:
        """
        Wait for a transaction to be accepted.

        Args:
            handle: Transaction to watch

        Returns:
            TerminalOutcome with the accepting status

        Raises:
            TransactionRejectedError: If the chain rejected the transaction
            ConfirmationTimeoutError: If the attempt cap or deadline was reached
        """
        attempts = 0
        last_status: TransactionStatus | None = None

        async def query() -> TransactionStatus:
            nonlocal attempts, last_status
            attempts += 1
            logger.debug("transaction_status_query", tx_hash=handle.hex, attempt=attempts)

            status = await self._gateway.get_transaction_status(handle)
            if status != last_status:
                logger.info(
                    "transaction_status_changed",
                    tx_hash=handle.hex,
                    status=status.value,
                    previous=last_status.value if last_status else None,
                )
            last_status = status
            return status

        def log_retry(retry_state: RetryCallState) -> None:
            outcome = retry_state.outcome
            if outcome is not None and outcome.failed:
                logger.warning(
                    "transaction_status_query_failed",
                    tx_hash=handle.hex,
                    attempt=retry_state.attempt_number,
                    error=str(outcome.exception()),
                    retry_in=self._interval,
                )
            else:
                logger.debug(
                    "transaction_not_final",
                    tx_hash=handle.hex,
                    attempt=retry_state.attempt_number,
                    retry_in=self._interval,
                )

        retrying = AsyncRetrying(
            retry=(
                retry_if_exception_type(StatusQueryError)
                | retry_if_result(lambda status: not status.is_terminal)
            ),
            wait=wait_fixed(self._interval),
            stop=self._stop_condition(),
            sleep=self._sleep,
            before_sleep=log_retry,
        )

        logger.info("waiting_for_transaction", tx_hash=handle.hex)

        try:
            status = await retrying(query)
        except RetryError as e:
            logger.error(
                "transaction_confirmation_timeout",
                tx_hash=handle.hex,
                attempts=attempts,
                last_status=last_status.value if last_status else None,
            )
            raise ConfirmationTimeoutError(handle, attempts, last_status) from e

        if status.is_rejected:
            logger.error("transaction_rejected", tx_hash=handle.hex, attempts=attempts)
            raise TransactionRejectedError(handle, attempts)

        logger.info(
            "transaction_accepted",
            tx_hash=handle.hex,
            status=status.value,
            attempts=attempts,
        )
        return TerminalOutcome(handle=handle, status=status, attempts=attempts)
