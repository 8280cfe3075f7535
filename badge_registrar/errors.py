"""
Registrar Errors
================

Exception hierarchy for the badge registrar.

Configuration errors are fatal at startup. Submission errors are surfaced
to the caller untouched. Status query errors are transient and only ever
seen by the confirmation poller. Confirmation errors are the two ways a
submitted transaction can fail to reach acceptance.

Version: 0.1.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from badge_registrar.models import TransactionHandle, TransactionStatus


class RegistrarError(Exception):
    """Base class for all badge registrar errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigurationError(RegistrarError):
    """Startup configuration is unusable. The process must not start."""


class UnrecognizedChainError(ConfigurationError):
    """Chain selector is not one of the supported networks."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Unrecognized chain {value!r}: must be either 'MAINNET' or 'TESTNET'"
        )


class InvalidPrivateKeyError(ConfigurationError):
    """Private key is not a valid Stark curve scalar."""


class InvalidAccountAddressError(ConfigurationError):
    """Account address is not a valid field element."""


class InvalidRegistryAddressError(ConfigurationError):
    """Badge registry address is not a valid field element."""


# =============================================================================
# Submission
# =============================================================================


class SubmissionError(RegistrarError):
    """The provider refused or failed to accept an invocation."""


# =============================================================================
# Confirmation
# =============================================================================


class StatusQueryError(RegistrarError):
    """Transient failure while querying a transaction status."""


class ConfirmationError(RegistrarError):
    """A submitted transaction did not reach acceptance."""

    def __init__(self, message: str, handle: TransactionHandle, attempts: int) -> None:
        self.handle = handle
        self.attempts = attempts
        super().__init__(message)


class TransactionRejectedError(ConfirmationError):
    """The chain rejected the transaction."""

    def __init__(self, handle: TransactionHandle, attempts: int) -> None:
        super().__init__(f"Transaction {handle} rejected", handle, attempts)


class ConfirmationTimeoutError(ConfirmationError):
    """Polling gave up before the transaction reached a terminal status."""

    def __init__(
        self,
        handle: TransactionHandle,
        attempts: int,
        last_status: TransactionStatus | None = None,
    ) -> None:
        self.last_status = last_status
        status = last_status.value if last_status is not None else "unknown"
        super().__init__(
            f"Transaction {handle} not finalized after {attempts} attempts "
            f"(last status: {status})",
            handle,
            attempts,
        )
