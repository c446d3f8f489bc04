"""
NIC Reassign - Address Validators

Checks the three command line addresses before any Azure call is made.
"""

import re
from typing import Dict

from nic_reassign.validators.base import BaseValidator, ValidationResult

DOTTED_QUAD = re.compile(r'([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})')


def is_valid_ipv4(address: str) -> bool:
    """
    True for a dotted-quad IPv4 address with every octet in 0-255.

    Example:
        >>> is_valid_ipv4('10.0.0.1')
        True
        >>> is_valid_ipv4('10.0.0')
        False
    """
    match = DOTTED_QUAD.fullmatch(address or '')
    if not match:
        return False
    return all(int(octet) <= 255 for octet in match.groups())


class AddressFormatValidator(BaseValidator):
    """
    Validates that one address is a well-formed IPv4 address.

    Example:
        validator = AddressFormatValidator('--alternative-zca-ip', '10.0.0.9')
        result = validator.validate()
    """

    def __init__(self, flag: str, address: str):
        """
        Args:
            flag: Command line flag the address came from (for messages)
            address: The address to check
        """
        self.flag = flag
        self.address = address

    @property
    def name(self) -> str:
        """Display name for this validator."""
        return f"Address format ({self.flag})"

    def validate(self) -> ValidationResult:
        if not self.address:
            return self._fail(f"Missing required parameter {self.flag}")

        if not is_valid_ipv4(self.address):
            return self._fail(
                f"Invalid IP address format: {self.address}",
                fix=f"Pass a dotted-quad IPv4 address to {self.flag}, e.g. 10.0.0.4"
            )

        return self._pass(f"{self.address} is a valid address")


class AddressUniquenessValidator(BaseValidator):
    """
    Validates that all addresses differ from each other.

    Each VM must end up with its own address, so reusing one of the
    inputs would make two NICs compete for the same IP.
    """

    def __init__(self, addresses: Dict[str, str]):
        """
        Args:
            addresses: Addresses keyed by their command line flag
        """
        self.addresses = addresses

    @property
    def name(self) -> str:
        """Display name for this validator."""
        return "Address uniqueness"

    def validate(self) -> ValidationResult:
        seen = {}
        for flag, address in self.addresses.items():
            if address in seen:
                return self._fail(
                    "Each VM IP address input must be unique",
                    duplicate=address,
                    flags=[seen[address], flag]
                )
            seen[address] = flag

        return self._pass("All addresses are unique")


def address_validators(addresses: Dict[str, str]):
    """
    Build the format validators for every address, then the uniqueness check.

    Args:
        addresses: Addresses keyed by their command line flag

    Returns:
        list of validators, in the order they should run
    """
    validators = [AddressFormatValidator(flag, address) for flag, address in addresses.items()]
    validators.append(AddressUniquenessValidator(addresses))
    return validators
