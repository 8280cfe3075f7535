"""
Field Elements
==============

Parsing of hex-encoded StarkNet field elements.

Version: 0.1.0
"""

import re

# Prime of the STARK field: 2**251 + 17 * 2**192 + 1
FIELD_PRIME = 0x800000000000011000000000000000000000000000000000000000000000001

# Order of the Stark curve generator, upper bound for private keys
EC_ORDER = 0x800000000000010FFFFFFFFFFFFFFFFB781126DCAE7B2321E66A241ADC64D2F

_HEX_FELT = re.compile(r"^(?:0[xX])?([0-9a-fA-F]{1,64})$")


def parse_field_element(value: str) -> int:
    """
    Parse a big-endian hex string into a field element.

    Args:
        value: Hex string, with or without a 0x prefix

    Returns:
        Integer in [0, FIELD_PRIME)

    Raises:
        ValueError: If the string is not hex, too long, or out of range
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected a hex string, got {type(value).__name__}")

    match = _HEX_FELT.match(value.strip())
    if match is None:
        raise ValueError("Expected 1 to 64 hex digits with optional 0x prefix")

    felt = int(match.group(1), 16)
    if felt >= FIELD_PRIME:
        raise ValueError("Value is outside the STARK field")
    return felt


def format_field_element(felt: int) -> str:
    """Render a field element as 0x-prefixed hex."""
    return f"0x{felt:x}"
