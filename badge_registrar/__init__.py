"""
GitHub Badge Registrar
======================

Registers badges for verified GitHub identities in a StarkNet
badge registry contract, and waits for the transactions to finalize.

Modules:
    - config: Configuration management with Pydantic Settings
    - logging: Structured logging with structlog
    - models: Pydantic value types (transaction status, handles, claims)
    - errors: Exception hierarchy
    - starknet: Chain selection, signing identity, transaction client, poller

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Badge Registrar Team"

__all__ = [
    "__version__",
]
