"""NIC Reassign - move a VM's network identity in Azure, with automatic rollback.

Reassigns the NIC (and so the private IP) of a Windows ZCA VM to a Linux ZCA
appliance VM, and reverts that change. Every Azure call is paired with the
call that undoes it; if a step fails, completed steps are undone in reverse
order, and any undo step that fails is reported for manual execution.

Example usage:
    >>> from nic_reassign import create_config, reassign_nic, revert_nic
    >>> config = create_config('10.0.0.4', '10.0.0.5', '10.0.0.9')
    >>> reassign_nic(config).exit_code
    0
"""

__version__ = "1.0.0"

from nic_reassign.core.config import create_config
from nic_reassign.main import reassign_nic, revert_nic

__all__ = ['create_config', 'reassign_nic', 'revert_nic']
