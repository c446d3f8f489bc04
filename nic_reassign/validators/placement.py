"""
NIC Reassign - Placement Validators

The reassignment moves a NIC from one VM to the other, which Azure only
allows inside one resource group, one region and one subnet. These checks
compare values already resolved for both VMs; they make no calls of their own.
"""

from nic_reassign.validators.base import BaseValidator, ValidationResult


class _PairValidator(BaseValidator):
    """Compares one resolved property of the ZCA VM and the appliance VM."""

    property_name = ''
    failure_message = ''

    def __init__(self, zca_value: str, appliance_value: str):
        """
        Args:
            zca_value: Value resolved for the Windows ZCA VM
            appliance_value: Value resolved for the Linux ZCA appliance VM
        """
        self.zca_value = zca_value
        self.appliance_value = appliance_value

    def _normalize(self, value):
        return value

    def validate(self) -> ValidationResult:
        if self._normalize(self.zca_value) != self._normalize(self.appliance_value):
            return self._fail(
                self.failure_message,
                zca=self.zca_value,
                appliance=self.appliance_value
            )
        return self._pass(f"Shared {self.property_name}: {self.zca_value}")


class SharedResourceGroupValidator(_PairValidator):
    """
    Both VMs must be in the same resource group.

    Resource group names are case-insensitive in Azure.
    """

    property_name = 'resource group'
    failure_message = (
        "The Linux ZCA VM and the Windows ZCA VM are not part of the same resource group. "
        "To execute the migration process, both the Linux ZCA VM and the Windows ZCA VM "
        "must be assigned to the same resource group."
    )

    @property
    def name(self) -> str:
        return "Shared resource group"

    def _normalize(self, value):
        return (value or '').upper()


class SameRegionValidator(_PairValidator):
    """Both VMs must be in the same region."""

    property_name = 'region'
    failure_message = (
        "The Linux ZCA VM and the Windows ZCA VM are not located in the same region. "
        "To execute the migration process, both the Linux ZCA VM and the Windows ZCA VM "
        "must be located in the same region."
    )

    @property
    def name(self) -> str:
        return "Same region"


class SameSubnetValidator(_PairValidator):
    """Both VMs' NICs must be in the same subnet."""

    property_name = 'subnet'
    failure_message = (
        "The Linux ZCA VM and the Windows ZCA VM are not located in the same subnet. "
        "To execute the migration process, both the Linux ZCA VM and the Windows ZCA VM "
        "must be located in the same subnet."
    )

    @property
    def name(self) -> str:
        return "Same subnet"
