"""
Signing Identity
================

Account address and Stark curve key pair used to sign invocations.

Version: 0.1.0
"""

from typing import Any, NoReturn

from starknet_py.net.signer.stark_curve_signer import KeyPair

from badge_registrar.errors import InvalidAccountAddressError, InvalidPrivateKeyError
from badge_registrar.models import EC_ORDER, format_field_element, parse_field_element


class SigningIdentity:
    """
    Account controlled by a local private key.

    The private key is kept only inside the key pair. It is not part of
    the repr and the identity refuses to be pickled or copied.
    """

    __slots__ = ("_address", "_key_pair")

    def __init__(self, address: int, key_pair: KeyPair) -> None:
        self._address = address
        self._key_pair = key_pair

    @classmethod
    def from_hex(cls, account_address: str, private_key: str) -> "SigningIdentity":
        """
        Build an identity from hex-encoded configuration values.

        Args:
            account_address: Account contract address (hex)
            private_key: Secret scalar (hex)

        Returns:
            SigningIdentity

        Raises:
            InvalidPrivateKeyError: If the key is not a valid curve scalar
            InvalidAccountAddressError: If the address is not a field element
        """
        scalar = _parse_private_key(private_key)

        try:
            address = parse_field_element(account_address)
        except ValueError as e:
            raise InvalidAccountAddressError(f"Invalid account address: {e}") from None

        try:
            key_pair = KeyPair.from_private_key(scalar)
        except (ValueError, ArithmeticError):
            raise InvalidPrivateKeyError("Invalid private key: key derivation failed") from None

        return cls(address, key_pair)

    @property
    def address(self) -> int:
        return self._address

    @property
    def public_key(self) -> int:
        return self._key_pair.public_key

    @property
    def key_pair(self) -> KeyPair:
        """Key pair for the account signer. Never log this."""
        return self._key_pair

    def __repr__(self) -> str:
        return f"SigningIdentity(address={format_field_element(self._address)})"

    def __reduce__(self) -> NoReturn:
        raise TypeError("SigningIdentity holds key material and cannot be serialized")

    def __copy__(self) -> NoReturn:
        raise TypeError("SigningIdentity cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        raise TypeError("SigningIdentity cannot be copied")


def _parse_private_key(private_key: str) -> int:
    # Error messages must not echo the input
    try:
        scalar = parse_field_element(private_key)
    except ValueError as e:
        raise InvalidPrivateKeyError(f"Invalid private key: {e}") from None

    if not 0 < scalar < EC_ORDER:
        raise InvalidPrivateKeyError("Invalid private key: outside the curve scalar field")
    return scalar
