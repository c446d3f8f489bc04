"""
NIC Reassign - Azure Operation Client

Performs the remote calls a run needs:
- Read-only lookups that resolve VMs, NICs, resource groups, regions and
  subnets from a private IP address
- The mutating calls behind each Action

Lookups raise ResourceNotFoundError. Mutations never raise for Azure
failures; they return an OperationResult with success=False.
"""

import time
from typing import Optional

from azure.core.exceptions import AzureError
from azure.mgmt.compute.models import NetworkInterfaceReference
from azure.mgmt.core.tools import parse_resource_id
from azure.mgmt.network.models import NetworkInterface, NetworkInterfaceIPConfiguration, Subnet

from nic_reassign.core.exceptions import ResourceNotFoundError
from nic_reassign.operations.actions import (
    AttachNic,
    CreateNic,
    DeallocateVM,
    DeleteNic,
    DetachNic,
    StartVM,
)
from nic_reassign.operations.base import Action, OperationResult
from nic_reassign.utils.logger import log_api_call, log_api_response


class AzureOperationClient:
    """
    Executes actions and lookups against Azure Resource Manager.

    Example:
        client = AzureOperationClient(compute, network, logger)

        vm_name = client.resolve_vm_name('10.0.0.4')
        result = client.run(DeallocateVM(resource_group='rg', vm_name=vm_name))

        if not result.success:
            print(f"Failed: {result.error}")
    """

    def __init__(self, compute, network, logger=None):
        """
        Initialize client.

        Args:
            compute: azure.mgmt.compute.ComputeManagementClient
            network: azure.mgmt.network.NetworkManagementClient
            logger: Optional logger for debug output
        """
        self.compute = compute
        self.network = network
        self.logger = logger

        # Closed dispatch table: one handler per Action variant
        self._handlers = {
            CreateNic: self._create_nic,
            DeleteNic: self._delete_nic,
            DeallocateVM: self._deallocate_vm,
            StartVM: self._start_vm,
            AttachNic: self._attach_nic,
            DetachNic: self._detach_nic,
        }

    def _log_debug(self, message: str):
        """Log debug message if logger available."""
        if self.logger:
            self.logger.debug(message)

    def _log_error(self, message: str):
        """Log error message if logger available."""
        if self.logger:
            self.logger.error(message)

    # ------------------------------------------------------------------
    # Action execution
    # ------------------------------------------------------------------

    def run(self, action: Action) -> OperationResult:
        """
        Execute one action.

        Args:
            action: Any of the Action variants in operations.actions

        Returns:
            OperationResult with success/failure

        Raises:
            TypeError: If the action is not one of the known variants
        """

        handler = self._handlers.get(type(action))
        if handler is None:
            raise TypeError(f"Unsupported action: {action!r}")

        self._log_debug(f"Executing {action}")
        start_time = time.time()

        try:
            message = handler(action)
        except AzureError as e:
            self._log_error(f"{action.name} failed: {e}")
            return OperationResult(
                operation_name=action.name,
                success=False,
                message=f"Failed: {action.describe()}",
                error=str(e)
            )

        self._log_debug(f"{action.name} finished in {time.time() - start_time:.2f}s")
        return OperationResult(
            operation_name=action.name,
            success=True,
            message=message
        )

    def _create_nic(self, action: CreateNic) -> str:
        parameters = NetworkInterface(
            location=action.location,
            ip_configurations=[
                NetworkInterfaceIPConfiguration(
                    name='ipconfig1',
                    subnet=Subnet(id=action.subnet_id),
                    private_ip_address=action.private_ip,
                    private_ip_allocation_method='Static'
                )
            ]
        )
        log_api_call(self.logger, 'network_interfaces.begin_create_or_update',
                     resource_group=action.resource_group, name=action.nic_name,
                     location=action.location, private_ip=action.private_ip)
        nic = self.network.network_interfaces.begin_create_or_update(
            action.resource_group,
            action.nic_name,
            parameters
        ).result()
        log_api_response(self.logger, getattr(nic, 'id', nic))
        return f"NIC {action.nic_name} created"

    def _delete_nic(self, action: DeleteNic) -> str:
        log_api_call(self.logger, 'network_interfaces.begin_delete',
                     resource_group=action.resource_group, name=action.nic_name)
        self.network.network_interfaces.begin_delete(
            action.resource_group,
            action.nic_name
        ).result()
        return f"NIC {action.nic_name} deleted"

    def _deallocate_vm(self, action: DeallocateVM) -> str:
        log_api_call(self.logger, 'virtual_machines.begin_deallocate',
                     resource_group=action.resource_group, name=action.vm_name)
        self.compute.virtual_machines.begin_deallocate(
            action.resource_group,
            action.vm_name
        ).result()
        return f"VM {action.vm_name} deallocated"

    def _start_vm(self, action: StartVM) -> str:
        log_api_call(self.logger, 'virtual_machines.begin_start',
                     resource_group=action.resource_group, name=action.vm_name)
        # Fire-and-forget: the poller is not waited on, the guest boots in the background
        self.compute.virtual_machines.begin_start(
            action.resource_group,
            action.vm_name
        )
        return f"VM {action.vm_name} start requested"

    def _attach_nic(self, action: AttachNic) -> str:
        vm = self.compute.virtual_machines.get(action.resource_group, action.vm_name)
        nic = self.network.network_interfaces.get(action.resource_group, action.nic_name)

        references = vm.network_profile.network_interfaces
        if any(_same_id(ref.id, nic.id) for ref in references):
            return f"NIC {action.nic_name} already attached to {action.vm_name}"

        references.append(NetworkInterfaceReference(id=nic.id, primary=False))
        _ensure_primary(references)

        log_api_call(self.logger, 'virtual_machines.begin_create_or_update',
                     resource_group=action.resource_group, name=action.vm_name,
                     nics=[ref.id for ref in references])
        self.compute.virtual_machines.begin_create_or_update(
            action.resource_group,
            action.vm_name,
            vm
        ).result()
        return f"NIC {action.nic_name} attached to {action.vm_name}"

    def _detach_nic(self, action: DetachNic) -> str:
        vm = self.compute.virtual_machines.get(action.resource_group, action.vm_name)
        nic = self.network.network_interfaces.get(action.resource_group, action.nic_name)

        references = vm.network_profile.network_interfaces
        remaining = [ref for ref in references if not _same_id(ref.id, nic.id)]
        if len(remaining) == len(references):
            return f"NIC {action.nic_name} not attached to {action.vm_name}"

        _ensure_primary(remaining)
        vm.network_profile.network_interfaces = remaining

        log_api_call(self.logger, 'virtual_machines.begin_create_or_update',
                     resource_group=action.resource_group, name=action.vm_name,
                     nics=[ref.id for ref in remaining])
        self.compute.virtual_machines.begin_create_or_update(
            action.resource_group,
            action.vm_name,
            vm
        ).result()
        return f"NIC {action.nic_name} detached from {action.vm_name}"

    # ------------------------------------------------------------------
    # Read-only lookups
    # ------------------------------------------------------------------

    def find_nic_by_ip(self, ip_address: str):
        """
        Find the NIC whose first IP configuration holds this private address.

        Args:
            ip_address: Private IPv4 address

        Returns:
            azure.mgmt.network.models.NetworkInterface

        Raises:
            ResourceNotFoundError: If no NIC holds the address
        """

        log_api_call(self.logger, 'network_interfaces.list_all', private_ip=ip_address)
        for nic in self.network.network_interfaces.list_all():
            configurations = nic.ip_configurations or []
            if configurations and configurations[0].private_ip_address == ip_address:
                log_api_response(self.logger, nic.id)
                return nic

        raise ResourceNotFoundError('NIC', ip_address)

    def resolve_vm_name(self, ip_address: str) -> str:
        """Name of the VM the NIC holding ip_address is attached to."""
        nic = self.find_nic_by_ip(ip_address)
        if nic.virtual_machine is None or not nic.virtual_machine.id:
            raise ResourceNotFoundError('VM', ip_address)
        return nic.virtual_machine.id.split('/')[-1]

    def resolve_nic_name(self, ip_address: str) -> str:
        """Name of the NIC holding ip_address."""
        return self.find_nic_by_ip(ip_address).name

    def resolve_resource_group(self, ip_address: str) -> str:
        """Resource group of the NIC holding ip_address."""
        nic = self.find_nic_by_ip(ip_address)
        return parse_resource_id(nic.id)['resource_group']

    def resolve_location(self, ip_address: str) -> str:
        """Region of the NIC holding ip_address."""
        return self.find_nic_by_ip(ip_address).location

    def resolve_subnet_id(self, nic_name: str, resource_group: str) -> Optional[str]:
        """Subnet id of the first IP configuration of a NIC."""
        log_api_call(self.logger, 'network_interfaces.get',
                     resource_group=resource_group, name=nic_name)
        nic = self.network.network_interfaces.get(resource_group, nic_name)
        configurations = nic.ip_configurations or []
        if not configurations or configurations[0].subnet is None:
            return None
        return configurations[0].subnet.id


def _same_id(left: str, right: str) -> bool:
    """Azure resource ids compare case-insensitively."""
    return (left or '').lower() == (right or '').lower()


def _ensure_primary(references):
    """A VM with NICs must have exactly one primary NIC."""
    primaries = [ref for ref in references if ref.primary]
    if references and not primaries:
        references[0].primary = True
    for extra in primaries[1:]:
        extra.primary = False
