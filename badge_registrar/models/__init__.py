"""
Registrar Models
================

Pydantic value types used across the badge registrar.

Models:
- Transaction models (TransactionStatus, TransactionHandle, TerminalOutcome)
- Identity claim (GitHubIdentityClaim)
- Field element helpers (parse_field_element, FIELD_PRIME, EC_ORDER)
"""

from badge_registrar.models.claim import GitHubIdentityClaim
from badge_registrar.models.field import (
    EC_ORDER,
    FIELD_PRIME,
    format_field_element,
    parse_field_element,
)
from badge_registrar.models.transaction import (
    TerminalOutcome,
    TransactionHandle,
    TransactionStatus,
)

__all__ = [
    # Transactions
    "TransactionStatus",
    "TransactionHandle",
    "TerminalOutcome",
    # Identity
    "GitHubIdentityClaim",
    # Field elements
    "FIELD_PRIME",
    "EC_ORDER",
    "parse_field_element",
    "format_field_element",
]
