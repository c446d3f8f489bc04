from __future__ import annotations

import logging
from typing import Dict, List, Optional

import pytest

from nic_reassign.core.config import ReassignConfig, RunMode
from nic_reassign.core.exceptions import ResourceNotFoundError
from nic_reassign.operations.base import Action, OperationResult

SUBNET = "/subscriptions/sub/resourceGroups/rg-a/providers/Microsoft.Network/virtualNetworks/vnet/subnets/default"


class FakeOperationClient:
    """In-memory stand-in for AzureOperationClient that records every call."""

    def __init__(self, inventory: Optional[Dict[str, dict]] = None, fail_on=(), raise_on=()) -> None:
        self.inventory = inventory or {}
        self.fail_on = list(fail_on)
        self.raise_on = list(raise_on)
        self.calls: List[Action] = []
        self.lookups: List[tuple] = []

    def run(self, action: Action) -> OperationResult:
        self.calls.append(action)
        if action in self.raise_on:
            raise RuntimeError(f"connection reset during {action.name}")
        if action in self.fail_on:
            return OperationResult(
                operation_name=action.name,
                success=False,
                message=f"Failed: {action.describe()}",
                error="simulated failure",
            )
        return OperationResult(operation_name=action.name, success=True, message=action.describe())

    def _entry(self, kind: str, ip_address: str) -> dict:
        self.lookups.append((kind, ip_address))
        if ip_address not in self.inventory:
            raise ResourceNotFoundError(kind, ip_address)
        return self.inventory[ip_address]

    def resolve_vm_name(self, ip_address: str) -> str:
        return self._entry("VM", ip_address)["vm"]

    def resolve_nic_name(self, ip_address: str) -> str:
        return self._entry("NIC", ip_address)["nic"]

    def resolve_resource_group(self, ip_address: str) -> str:
        return self._entry("NIC", ip_address)["rg"]

    def resolve_location(self, ip_address: str) -> str:
        return self._entry("NIC", ip_address)["location"]

    def resolve_subnet_id(self, nic_name: str, resource_group: str) -> str:
        self.lookups.append(("subnet", nic_name))
        for entry in self.inventory.values():
            if entry["nic"] == nic_name:
                return entry["subnet"]
        return None


def apply_inventory() -> Dict[str, dict]:
    """Azure state before a reassignment."""
    return {
        "10.0.0.4": {"vm": "zca-vm", "nic": "zca-nic", "rg": "rg-a", "location": "westeurope", "subnet": SUBNET},
        "10.0.0.5": {"vm": "zvma-vm", "nic": "zvma-nic", "rg": "RG-A", "location": "westeurope", "subnet": SUBNET},
    }


def revert_inventory() -> Dict[str, dict]:
    """Azure state after a successful reassignment."""
    return {
        "10.0.0.4": {"vm": "zvma-vm", "nic": "zca-nic", "rg": "rg-a", "location": "westeurope", "subnet": SUBNET},
        "10.0.0.5": {"vm": None, "nic": "zvma-nic", "rg": "rg-a", "location": "westeurope", "subnet": SUBNET},
        "10.0.0.9": {"vm": "zca-vm", "nic": "alternativeZcaNic42", "rg": "rg-a", "location": "westeurope", "subnet": SUBNET},
    }


@pytest.fixture
def config() -> ReassignConfig:
    return ReassignConfig(
        original_zca_ip="10.0.0.4",
        original_appliance_ip="10.0.0.5",
        alternative_zca_ip="10.0.0.9",
    )


@pytest.fixture
def revert_config(config: ReassignConfig) -> ReassignConfig:
    config.mode = RunMode.REVERT
    return config


@pytest.fixture
def logger(caplog: pytest.LogCaptureFixture) -> logging.Logger:
    caplog.set_level(logging.DEBUG, logger="nic_reassign")
    return logging.getLogger("nic_reassign.tests")
