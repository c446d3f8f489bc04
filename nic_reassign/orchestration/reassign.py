"""
NIC Reassign - Reassign Orchestrator

Coordinates the apply workflow: the Windows ZCA VM moves to the
alternative address and its original NIC (with the original address)
moves to the Linux ZCA appliance VM.

1. Validates addresses and credentials
2. Resolves both VMs and checks they share resource group, region and subnet
3. Executes the plan, recording undo steps
4. Rolls back on failure
"""

from typing import List, Optional

from nic_reassign.operations import AttachNic, CreateNic, DeallocateVM, DetachNic, StartVM
from nic_reassign.orchestration.base import BaseOrchestrator
from nic_reassign.orchestration.context import (
    ResourceContext,
    build_apply_context,
    new_alternative_nic_name,
    resolve_placement
)
from nic_reassign.orchestration.executor import PlannedAction
from nic_reassign.validators import (
    SameRegionValidator,
    SameSubnetValidator,
    SharedResourceGroupValidator
)


class ReassignOrchestrator(BaseOrchestrator):
    """
    Orchestrates the apply workflow.

    Plan:
    1. Create the alternative NIC for the Windows ZCA VM
    2. Deallocate the Linux ZCA VM
    3. Deallocate the Windows ZCA VM
    4. Attach the alternative NIC to the Windows ZCA VM
    5. Detach the original NIC from the Windows ZCA VM
    6. Attach the original Windows ZCA NIC to the Linux ZCA VM
    7. Detach the original NIC from the Linux ZCA VM
    8. Start the Windows ZCA VM
    9. Start the Linux ZCA VM

    If anything fails, completed steps are undone in reverse order.

    Example:
        orchestrator = ReassignOrchestrator(client, config, logger=logger)
        outcome = orchestrator.run()
    """

    failure_headline = "Windows ZCA NIC wasn't assigned to Linux ZCA VM"

    def resolve(self) -> Optional[ResourceContext]:
        self._log_info("Initialization...")

        zca = resolve_placement(self.client, self.config.original_zca_ip, self.logger)
        self._log_debug(f"Windows ZCA VM name: {zca.vm_name}")
        self._log_debug(f"Windows ZCA NIC name: {zca.nic_name}")

        appliance = resolve_placement(self.client, self.config.original_appliance_ip, self.logger)
        self._log_debug(f"Linux ZCA VM name: {appliance.vm_name}")
        self._log_debug(f"Linux ZCA NIC name: {appliance.nic_name}")

        preconditions = [
            SharedResourceGroupValidator(zca.resource_group, appliance.resource_group),
            SameRegionValidator(zca.location, appliance.location),
            SameSubnetValidator(zca.subnet_id, appliance.subnet_id),
        ]
        if not self._validate_preconditions(preconditions):
            return None

        alternative_nic_name = new_alternative_nic_name(self.config.alternative_nic_prefix)
        self._log_debug(f"Windows ZCA Alternative NIC name: {alternative_nic_name}")

        return build_apply_context(zca, appliance, alternative_nic_name)

    def build_plan(self, context: ResourceContext) -> List[PlannedAction]:
        rg = context.resource_group
        zca_vm = context.zca_vm_name
        appliance_vm = context.appliance_vm_name

        return [
            PlannedAction(
                CreateNic(
                    resource_group=rg,
                    nic_name=context.alternative_nic_name,
                    location=context.location,
                    subnet_id=context.subnet_id,
                    private_ip=self.config.alternative_zca_ip
                ),
                f"Creating: {context.alternative_nic_name} as an alternative NIC for Windows ZCA",
                "Delete alternative Windows ZCA NIC"
            ),
            PlannedAction(
                DeallocateVM(resource_group=rg, vm_name=appliance_vm),
                f"Stopping Linux ZCA VM: {appliance_vm}",
                "Starting Linux ZCA"
            ),
            PlannedAction(
                DeallocateVM(resource_group=rg, vm_name=zca_vm),
                f"Stopping Windows ZCA VM: {zca_vm}",
                "Starting Windows ZCA VM"
            ),
            PlannedAction(
                AttachNic(resource_group=rg, vm_name=zca_vm, nic_name=context.alternative_nic_name),
                "Changing network configuration for Windows ZCA VM",
                "Detaching alternative NIC from Windows ZCA VM"
            ),
            PlannedAction(
                DetachNic(resource_group=rg, vm_name=zca_vm, nic_name=context.zca_nic_name),
                f"Detaching original NIC {context.zca_nic_name} from Windows ZCA VM",
                "Attaching original NIC to Windows ZCA VM"
            ),
            PlannedAction(
                AttachNic(resource_group=rg, vm_name=appliance_vm, nic_name=context.zca_nic_name),
                "Changing network configuration for Linux ZCA VM",
                "Detaching original Windows ZCA NIC from Linux ZCA VM"
            ),
            PlannedAction(
                DetachNic(resource_group=rg, vm_name=appliance_vm, nic_name=context.appliance_nic_name),
                f"Detaching original NIC {context.appliance_nic_name} from Linux ZCA VM",
                "Attaching original NIC to Linux ZCA VM"
            ),
            PlannedAction(
                StartVM(resource_group=rg, vm_name=zca_vm),
                f"Starting Windows ZCA VM: {zca_vm}",
                "Stopping Windows ZCA VM"
            ),
            PlannedAction(
                StartVM(resource_group=rg, vm_name=appliance_vm),
                f"Starting Linux ZCA VM: {appliance_vm}",
                "Stopping Linux ZCA VM"
            ),
        ]

    def report_success(self, context: ResourceContext):
        self._log_info("Windows ZCA NIC was assigned to Linux ZCA VM")
        self._log_info(f"To connect to Windows ZCA use {self.config.alternative_zca_ip}")
        self._log_info(f"To connect to Linux ZCA use {self.config.original_zca_ip}")
        self._log_info("To undo changes you can use the following command:")
        self._log_info(f" -> {self.config.revert_command()}")
