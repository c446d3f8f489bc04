"""
NIC Reassign - Revert Orchestrator

Coordinates the revert workflow: both VMs get their original NICs back
and the alternative NIC is deleted.

Nothing is remembered from the apply run. Everything is resolved again
from Azure using the same three addresses.
"""

from typing import List

from nic_reassign.operations import AttachNic, DeallocateVM, DeleteNic, DetachNic, StartVM
from nic_reassign.orchestration.base import BaseOrchestrator
from nic_reassign.orchestration.context import ResourceContext, resolve_revert_context
from nic_reassign.orchestration.executor import PlannedAction


class RevertOrchestrator(BaseOrchestrator):
    """
    Orchestrates the revert workflow.

    Plan:
    1. Deallocate the Linux ZCA VM
    2. Deallocate the Windows ZCA VM
    3. Attach the original NIC to the Linux ZCA VM
    4. Detach the original Windows ZCA NIC from the Linux ZCA VM
    5. Attach the original NIC to the Windows ZCA VM
    6. Detach the alternative NIC from the Windows ZCA VM
    7. Start the Windows ZCA VM
    8. Start the Linux ZCA VM
    9. Delete the alternative NIC (best effort: a failure only warns)

    Example:
        orchestrator = RevertOrchestrator(client, config, logger=logger)
        outcome = orchestrator.run()
    """

    failure_headline = "The changes to the NICs were not reverted"

    def resolve(self) -> ResourceContext:
        self._log_info("Revert initialization...")
        return resolve_revert_context(self.client, self.config, self.logger)

    def build_plan(self, context: ResourceContext) -> List[PlannedAction]:
        rg = context.resource_group
        zca_vm = context.zca_vm_name
        appliance_vm = context.appliance_vm_name

        return [
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
                AttachNic(resource_group=rg, vm_name=appliance_vm, nic_name=context.appliance_nic_name),
                "Changing network configuration for Linux ZCA VM",
                "Detaching original NIC from Linux ZCA VM"
            ),
            PlannedAction(
                DetachNic(resource_group=rg, vm_name=appliance_vm, nic_name=context.zca_nic_name),
                f"Detaching Windows ZCA NIC {context.zca_nic_name} from Linux ZCA VM",
                "Attaching original Windows ZCA NIC to Linux ZCA VM"
            ),
            PlannedAction(
                AttachNic(resource_group=rg, vm_name=zca_vm, nic_name=context.zca_nic_name),
                "Changing network configuration for Windows ZCA VM",
                "Detaching original NIC from Windows ZCA VM"
            ),
            PlannedAction(
                DetachNic(resource_group=rg, vm_name=zca_vm, nic_name=context.alternative_nic_name),
                f"Detaching alternative NIC {context.alternative_nic_name} from Windows ZCA VM",
                "Attaching alternative NIC to Windows ZCA VM"
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
            PlannedAction(
                DeleteNic(resource_group=rg, nic_name=context.alternative_nic_name),
                "Deleting alternative Windows ZCA NIC",
                best_effort=True,
                warning=(
                    f"The {context.alternative_nic_name} wasn't deleted. "
                    "You may need to delete it manually"
                )
            ),
        ]

    def report_success(self, context: ResourceContext):
        self._log_info("The changes to the NICs were reverted")
        self._log_info(f"To connect to Windows ZCA use {self.config.original_zca_ip}")
        self._log_info(f"To connect to Linux ZCA use {self.config.original_appliance_ip}")
