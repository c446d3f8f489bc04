"""
NIC Reassign - Validators Module

This module provides validators for pre-flight checks before a reassign or revert run.

Usage:
    from nic_reassign.validators import (
        ValidationRunner,
        address_validators,
        SharedResourceGroupValidator
    )

    runner = ValidationRunner(address_validators(config.addresses))
    results = runner.run_all(logger)

    if not results.all_passed():
        results.log_failures(logger)
        return False
"""

from nic_reassign.validators.base import (
    BaseValidator,
    ValidationResult,
    ValidationResults,
    ValidationRunner
)
from nic_reassign.validators.addresses import (
    AddressFormatValidator,
    AddressUniquenessValidator,
    address_validators,
    is_valid_ipv4
)
from nic_reassign.validators.credentials import CredentialsValidator
from nic_reassign.validators.placement import (
    SameRegionValidator,
    SameSubnetValidator,
    SharedResourceGroupValidator
)

__all__ = [
    # Base classes
    'BaseValidator',
    'ValidationResult',
    'ValidationResults',
    'ValidationRunner',

    # Validators
    'AddressFormatValidator',
    'AddressUniquenessValidator',
    'address_validators',
    'is_valid_ipv4',
    'CredentialsValidator',
    'SharedResourceGroupValidator',
    'SameRegionValidator',
    'SameSubnetValidator',
]
