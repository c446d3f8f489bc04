from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace
from unittest import mock

import pytest
from azure.core.exceptions import AzureError
from azure.mgmt.compute.models import NetworkInterfaceReference

from nic_reassign.core.exceptions import ResourceNotFoundError
from nic_reassign.operations import (
    Action,
    AttachNic,
    AzureOperationClient,
    CreateNic,
    DeallocateVM,
    DeleteNic,
    DetachNic,
    StartVM,
)

NIC_ID = "/subscriptions/sub/resourceGroups/{rg}/providers/Microsoft.Network/networkInterfaces/{name}"
VM_ID = "/subscriptions/sub/resourceGroups/rg-a/providers/Microsoft.Compute/virtualMachines/{name}"
SUBNET_ID = "/subscriptions/sub/resourceGroups/rg-a/providers/Microsoft.Network/virtualNetworks/vnet/subnets/default"


def _nic(name: str, ip_address: str, vm_name: str = None, rg: str = "rg-a"):
    return SimpleNamespace(
        id=NIC_ID.format(rg=rg, name=name),
        name=name,
        location="westeurope",
        ip_configurations=[SimpleNamespace(private_ip_address=ip_address, subnet=SimpleNamespace(id=SUBNET_ID))],
        virtual_machine=SimpleNamespace(id=VM_ID.format(name=vm_name)) if vm_name else None,
    )


def _vm(*references):
    return SimpleNamespace(network_profile=SimpleNamespace(network_interfaces=list(references)))


def _client(nics=()):
    compute = mock.MagicMock()
    network = mock.MagicMock()
    network.network_interfaces.list_all.return_value = list(nics)
    return AzureOperationClient(compute, network), compute, network


def test_lookups_match_first_ip_configuration() -> None:
    client, _, _ = _client([
        _nic("zvma-nic", "10.0.0.5", "zvma-vm"),
        _nic("zca-nic", "10.0.0.4", "zca-vm", rg="RG-A"),
    ])

    assert client.resolve_vm_name("10.0.0.4") == "zca-vm"
    assert client.resolve_nic_name("10.0.0.4") == "zca-nic"
    assert client.resolve_resource_group("10.0.0.4") == "RG-A"
    assert client.resolve_location("10.0.0.4") == "westeurope"


def test_unknown_address_raises() -> None:
    client, _, _ = _client([_nic("zca-nic", "10.0.0.4", "zca-vm")])

    with pytest.raises(ResourceNotFoundError) as excinfo:
        client.resolve_nic_name("10.0.0.40")

    assert excinfo.value.ip_address == "10.0.0.40"


def test_unattached_nic_has_no_vm() -> None:
    client, _, _ = _client([_nic("spare-nic", "10.0.0.7")])

    with pytest.raises(ResourceNotFoundError) as excinfo:
        client.resolve_vm_name("10.0.0.7")

    assert excinfo.value.resource == "VM"


def test_resolve_subnet_id() -> None:
    client, _, network = _client()
    network.network_interfaces.get.return_value = _nic("zca-nic", "10.0.0.4")

    assert client.resolve_subnet_id("zca-nic", "rg-a") == SUBNET_ID
    network.network_interfaces.get.assert_called_once_with("rg-a", "zca-nic")


def test_create_nic_uses_static_address() -> None:
    client, _, network = _client()

    result = client.run(CreateNic("rg-a", "alternativeZcaNic42", "westeurope", SUBNET_ID, "10.0.0.9"))

    assert result.success
    args = network.network_interfaces.begin_create_or_update.call_args[0]
    assert args[:2] == ("rg-a", "alternativeZcaNic42")
    configuration = args[2].ip_configurations[0]
    assert configuration.private_ip_address == "10.0.0.9"
    assert configuration.private_ip_allocation_method == "Static"
    assert configuration.subnet.id == SUBNET_ID
    network.network_interfaces.begin_create_or_update.return_value.result.assert_called_once()


def test_deallocate_waits_for_completion() -> None:
    client, compute, _ = _client()

    result = client.run(DeallocateVM("rg-a", "zca-vm"))

    assert result.success
    compute.virtual_machines.begin_deallocate.return_value.result.assert_called_once()


def test_start_does_not_wait() -> None:
    client, compute, _ = _client()

    result = client.run(StartVM("rg-a", "zca-vm"))

    assert result.success
    compute.virtual_machines.begin_start.assert_called_once_with("rg-a", "zca-vm")
    compute.virtual_machines.begin_start.return_value.result.assert_not_called()


def test_azure_error_becomes_failed_result() -> None:
    client, _, network = _client()
    network.network_interfaces.begin_delete.side_effect = AzureError("NIC is in use")

    result = client.run(DeleteNic("rg-a", "alternativeZcaNic42"))

    assert not result.success
    assert result.message == "Failed: Delete NIC alternativeZcaNic42"
    assert "NIC is in use" in result.error


def test_attach_adds_secondary_reference() -> None:
    client, compute, network = _client()
    existing = NetworkInterfaceReference(id=NIC_ID.format(rg="rg-a", name="zvma-nic"), primary=True)
    vm = _vm(existing)
    compute.virtual_machines.get.return_value = vm
    network.network_interfaces.get.return_value = _nic("zca-nic", "10.0.0.4")

    result = client.run(AttachNic("rg-a", "zvma-vm", "zca-nic"))

    assert result.success
    references = vm.network_profile.network_interfaces
    assert [ref.id.split("/")[-1] for ref in references] == ["zvma-nic", "zca-nic"]
    assert [ref.primary for ref in references] == [True, False]
    compute.virtual_machines.begin_create_or_update.assert_called_once_with("rg-a", "zvma-vm", vm)


def test_attach_is_a_no_op_when_already_attached() -> None:
    client, compute, network = _client()
    nic = _nic("zca-nic", "10.0.0.4")
    compute.virtual_machines.get.return_value = _vm(NetworkInterfaceReference(id=nic.id.upper(), primary=True))
    network.network_interfaces.get.return_value = nic

    result = client.run(AttachNic("rg-a", "zca-vm", "zca-nic"))

    assert result.success
    compute.virtual_machines.begin_create_or_update.assert_not_called()


def test_detach_promotes_remaining_nic_to_primary() -> None:
    client, compute, network = _client()
    original = NetworkInterfaceReference(id=NIC_ID.format(rg="rg-a", name="zca-nic"), primary=True)
    alternative = NetworkInterfaceReference(id=NIC_ID.format(rg="rg-a", name="alternativeZcaNic42"), primary=False)
    vm = _vm(original, alternative)
    compute.virtual_machines.get.return_value = vm
    network.network_interfaces.get.return_value = _nic("zca-nic", "10.0.0.4")

    result = client.run(DetachNic("rg-a", "zca-vm", "zca-nic"))

    assert result.success
    assert vm.network_profile.network_interfaces == [alternative]
    assert alternative.primary is True


def test_unknown_action_is_rejected() -> None:
    @dataclass(frozen=True)
    class ResizeVM(Action):
        vm_name: str

        @property
        def name(self) -> str:
            return "Resize VM"

        def describe(self) -> str:
            return f"Resize VM {self.vm_name}"

        def inverse(self):
            return None

    client, _, _ = _client()

    with pytest.raises(TypeError):
        client.run(ResizeVM("zca-vm"))
