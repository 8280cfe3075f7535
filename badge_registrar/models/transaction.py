"""
Transaction Models
==================

Value types shared by the transaction client and the confirmation poller.

Version: 0.1.0
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TransactionStatus(str, Enum):
    """Finality status of a submitted transaction."""

    NOT_RECEIVED = "NOT_RECEIVED"
    RECEIVED = "RECEIVED"
    PENDING = "PENDING"
    ACCEPTED_ON_L2 = "ACCEPTED_ON_L2"
    ACCEPTED_ON_L1 = "ACCEPTED_ON_L1"
    REJECTED = "REJECTED"

    @property
    def is_accepted(self) -> bool:
        return self in (TransactionStatus.ACCEPTED_ON_L2, TransactionStatus.ACCEPTED_ON_L1)

    @property
    def is_rejected(self) -> bool:
        return self is TransactionStatus.REJECTED

    @property
    def is_terminal(self) -> bool:
        """Check if no further status change is expected."""
        return self.is_accepted or self.is_rejected


class TransactionHandle(BaseModel):
    """Hash returned by a successful submission."""

    model_config = ConfigDict(frozen=True)

    transaction_hash: int = Field(..., ge=0, description="Transaction hash")

    @property
    def hex(self) -> str:
        return f"0x{self.transaction_hash:x}"

    def __str__(self) -> str:
        return self.hex


class TerminalOutcome(BaseModel):
    """Accepted transaction, as reported by the confirmation poller."""

    model_config = ConfigDict(frozen=True)

    handle: TransactionHandle
    status: TransactionStatus
    attempts: int = Field(..., ge=1, description="Status queries made")
