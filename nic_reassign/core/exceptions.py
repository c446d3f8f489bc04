"""
NIC Reassign - Custom Exception Classes

This module defines all custom exceptions used in NIC Reassign.
Each exception provides a clear error message, and a suggested fix where one exists.
"""


class NicReassignError(Exception):
    """
    Base exception for all NIC Reassign errors.

    All custom exceptions inherit from this, making it easy to catch
    any NIC Reassign-specific error with a single except clause.
    """
    pass


class ConfigurationError(NicReassignError):
    """
    Raised when the run cannot be configured, e.g. no Azure subscription
    could be determined.
    """

    def __init__(self, message: str, fix: str = None):
        """
        Args:
            message: Error description
            fix: Suggested fix
        """
        self.fix = fix
        full_message = f"{message}"
        if fix:
            full_message += f"\n\nFix: {fix}"
        super().__init__(full_message)


class ResourceNotFoundError(NicReassignError):
    """
    Raised when no NIC or VM can be found for a private IP address.
    """

    def __init__(self, resource: str, ip_address: str):
        """
        Args:
            resource: Kind of resource we looked for (e.g., 'VM', 'NIC')
            ip_address: Private IP address used for the lookup
        """
        self.resource = resource
        self.ip_address = ip_address

        message = f"{resource} with {ip_address} not found"
        message += f"\n\nTroubleshooting:"
        message += f"\n  1. Check the address is the primary private IP of the NIC"
        message += f"\n  2. Verify the active subscription is correct"
        message += f"\n\nList NICs with this address:"
        message += f"\n  az network nic list --query \"[?ipConfigurations[0].privateIPAddress=='{ip_address}']\""

        super().__init__(message)


class StateTransitionError(NicReassignError):
    """
    Raised when a run tries to move between states in a way the workflow forbids.
    """

    def __init__(self, current_state: str, requested_state: str):
        self.current_state = current_state
        self.requested_state = requested_state
        super().__init__(f"Invalid run state transition: {current_state} -> {requested_state}")
