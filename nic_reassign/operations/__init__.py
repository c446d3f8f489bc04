"""
NIC Reassign - Operations Module

This module provides the actions a run can perform and the client that executes them.
Each action does ONE thing and knows which action undoes it.

Usage:
    from nic_reassign.operations import AzureOperationClient, DeallocateVM

    client = AzureOperationClient(compute, network, logger)
    action = DeallocateVM(resource_group='rg', vm_name='zca-vm')

    result = client.run(action)
    if result.success:
        undo = action.inverse()   # StartVM(resource_group='rg', vm_name='zca-vm')
"""

from nic_reassign.operations.base import Action, OperationResult
from nic_reassign.operations.actions import (
    AttachNic,
    CreateNic,
    DeallocateVM,
    DeleteNic,
    DetachNic,
    StartVM,
)
from nic_reassign.operations.client import AzureOperationClient

__all__ = [
    # Base classes
    'Action',
    'OperationResult',

    # Actions
    'CreateNic',
    'DeleteNic',
    'DeallocateVM',
    'StartVM',
    'AttachNic',
    'DetachNic',

    # Client
    'AzureOperationClient',
]
