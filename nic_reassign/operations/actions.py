"""
NIC Reassign - Actions

The closed set of remote operations a run can perform.

    CreateNic     <->  DeleteNic
    DeallocateVM  <->  StartVM
    AttachNic     <->  DetachNic

DeleteNic has no inverse: the NIC and its address reservation are gone.
"""

from dataclasses import dataclass

from nic_reassign.operations.base import Action


@dataclass(frozen=True)
class CreateNic(Action):
    """
    Creates a NIC holding a static private IP in an existing subnet.

    Inverse: deletes the NIC.
    """
    resource_group: str
    nic_name: str
    location: str
    subnet_id: str
    private_ip: str

    @property
    def name(self) -> str:
        return "Create NIC"

    def describe(self) -> str:
        return f"Create NIC {self.nic_name} with address {self.private_ip}"

    def inverse(self) -> 'DeleteNic':
        return DeleteNic(resource_group=self.resource_group, nic_name=self.nic_name)


@dataclass(frozen=True)
class DeleteNic(Action):
    """
    Deletes a NIC.

    WARNING: Cannot be undone - only run this where failure is tolerable.
    """
    resource_group: str
    nic_name: str

    @property
    def name(self) -> str:
        return "Delete NIC"

    def describe(self) -> str:
        return f"Delete NIC {self.nic_name}"

    def inverse(self) -> None:
        return None


@dataclass(frozen=True)
class DeallocateVM(Action):
    """
    Stops a VM and releases its compute resources. Waits for completion.

    Inverse: starts the VM.
    """
    resource_group: str
    vm_name: str

    @property
    def name(self) -> str:
        return "Deallocate VM"

    def describe(self) -> str:
        return f"Deallocate VM {self.vm_name}"

    def inverse(self) -> 'StartVM':
        return StartVM(resource_group=self.resource_group, vm_name=self.vm_name)


@dataclass(frozen=True)
class StartVM(Action):
    """
    Starts a VM. Does not wait for the guest OS to boot.

    Inverse: deallocates the VM.
    """
    resource_group: str
    vm_name: str

    @property
    def name(self) -> str:
        return "Start VM"

    def describe(self) -> str:
        return f"Start VM {self.vm_name} (no wait)"

    def inverse(self) -> DeallocateVM:
        return DeallocateVM(resource_group=self.resource_group, vm_name=self.vm_name)


@dataclass(frozen=True)
class AttachNic(Action):
    """
    Adds an existing NIC to a deallocated VM.

    Inverse: removes the NIC from the VM.
    """
    resource_group: str
    vm_name: str
    nic_name: str

    @property
    def name(self) -> str:
        return "Attach NIC"

    def describe(self) -> str:
        return f"Attach NIC {self.nic_name} to VM {self.vm_name}"

    def inverse(self) -> 'DetachNic':
        return DetachNic(
            resource_group=self.resource_group,
            vm_name=self.vm_name,
            nic_name=self.nic_name
        )


@dataclass(frozen=True)
class DetachNic(Action):
    """
    Removes a NIC from a deallocated VM.

    Inverse: adds the NIC back.
    """
    resource_group: str
    vm_name: str
    nic_name: str

    @property
    def name(self) -> str:
        return "Detach NIC"

    def describe(self) -> str:
        return f"Detach NIC {self.nic_name} from VM {self.vm_name}"

    def inverse(self) -> AttachNic:
        return AttachNic(
            resource_group=self.resource_group,
            vm_name=self.vm_name,
            nic_name=self.nic_name
        )

