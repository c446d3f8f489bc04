"""
NIC Reassign - Resource Context

Resolves the names every action of a run needs from the three input
addresses. Resolution only reads from Azure; it runs once per run and
its result never changes afterwards.
"""

import random
from dataclasses import dataclass
from typing import Optional

from nic_reassign.core.config import ReassignConfig


@dataclass(frozen=True)
class VMPlacement:
    """Where one VM lives, resolved from the private IP of its NIC."""
    ip_address: str
    vm_name: str
    nic_name: str
    resource_group: str
    location: str
    subnet_id: Optional[str]


@dataclass(frozen=True)
class ResourceContext:
    """
    Resolved identities used by a run's plan.

    Attributes:
        zca_vm_name: Windows ZCA VM
        zca_nic_name: NIC originally attached to the Windows ZCA VM
        appliance_vm_name: Linux ZCA (ZVM appliance) VM
        appliance_nic_name: NIC originally attached to the appliance VM
        resource_group: Resource group shared by both VMs
        alternative_nic_name: NIC holding the alternative ZCA address
        location: Region of both VMs (apply runs only)
        subnet_id: Subnet of both VMs (apply runs only)
    """
    zca_vm_name: str
    zca_nic_name: str
    appliance_vm_name: str
    appliance_nic_name: str
    resource_group: str
    alternative_nic_name: str
    location: Optional[str] = None
    subnet_id: Optional[str] = None


def new_alternative_nic_name(prefix: str, rng=random) -> str:
    """Generate a fresh name for the alternative NIC, e.g. alternativeZcaNic20417."""
    return f"{prefix}{rng.randint(0, 32767)}"


def resolve_placement(client, ip_address: str, logger=None) -> VMPlacement:
    """
    Resolve VM, NIC, resource group, region and subnet for one address.

    Raises:
        ResourceNotFoundError: If no NIC or VM holds the address
    """
    vm_name = client.resolve_vm_name(ip_address)
    nic_name = client.resolve_nic_name(ip_address)
    resource_group = client.resolve_resource_group(ip_address)
    location = client.resolve_location(ip_address)
    subnet_id = client.resolve_subnet_id(nic_name, resource_group)

    placement = VMPlacement(
        ip_address=ip_address,
        vm_name=vm_name,
        nic_name=nic_name,
        resource_group=resource_group,
        location=location,
        subnet_id=subnet_id
    )
    if logger:
        logger.debug(f"Resolved {ip_address}: {placement}")
    return placement


def build_apply_context(zca: VMPlacement, appliance: VMPlacement,
                        alternative_nic_name: str) -> ResourceContext:
    """Combine both placements once they are known to share group, region and subnet."""
    return ResourceContext(
        zca_vm_name=zca.vm_name,
        zca_nic_name=zca.nic_name,
        appliance_vm_name=appliance.vm_name,
        appliance_nic_name=appliance.nic_name,
        resource_group=zca.resource_group,
        alternative_nic_name=alternative_nic_name,
        location=zca.location,
        subnet_id=zca.subnet_id
    )


def resolve_revert_context(client, config: ReassignConfig, logger=None) -> ResourceContext:
    """
    Resolve a revert run's identities from the current Azure state.

    After a successful apply run the ZCA VM answers on the alternative
    address and the appliance VM on the original ZCA address.

    Raises:
        ResourceNotFoundError: If an address no longer resolves
    """
    context = ResourceContext(
        zca_vm_name=client.resolve_vm_name(config.alternative_zca_ip),
        zca_nic_name=client.resolve_nic_name(config.original_zca_ip),
        appliance_vm_name=client.resolve_vm_name(config.original_zca_ip),
        appliance_nic_name=client.resolve_nic_name(config.original_appliance_ip),
        resource_group=client.resolve_resource_group(config.original_zca_ip),
        alternative_nic_name=client.resolve_nic_name(config.alternative_zca_ip)
    )

    if logger:
        logger.debug(f"Windows ZCA VM name: {context.zca_vm_name}")
        logger.debug(f"Windows ZCA Original NIC name: {context.zca_nic_name}")
        logger.debug(f"Linux ZCA VM name: {context.appliance_vm_name}")
        logger.debug(f"Linux ZCA Original NIC name: {context.appliance_nic_name}")
        logger.debug(f"Resource Group name: {context.resource_group}")
        logger.debug(f"Windows ZCA Alternative NIC name: {context.alternative_nic_name}")

    return context
