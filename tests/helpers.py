"""
Test Helpers
============

Shared test doubles and key material.
"""

from badge_registrar.config import Settings, StarkNetSettings

TEST_ACCOUNT = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcde"
TEST_PRIVATE_KEY = "0x3f1b7c0e9d2a4c5b6a7988776655443322110ffeeddccbbaa99887766554433"
TEST_REGISTRY = "0x05a1b2c3d4e5f60718293a4b5c6d7e8f90a1b2c3d4e5f60718293a4b5c6d7e8f"


def load_settings() -> Settings:
    """Build settings from the process environment only, ignoring any .env file."""
    return Settings(_env_file=None, starknet=StarkNetSettings(_env_file=None))


class RecordingSleep:
    """Async sleep replacement recording requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
