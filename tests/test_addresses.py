from __future__ import annotations

import pytest

from nic_reassign.validators import (
    AddressFormatValidator,
    AddressUniquenessValidator,
    ValidationRunner,
    address_validators,
)
from nic_reassign.validators.addresses import is_valid_ipv4


@pytest.mark.parametrize("address", ["10.0.0.1", "0.0.0.0", "255.255.255.255", "192.168.1.20"])
def test_valid_addresses(address: str) -> None:
    assert is_valid_ipv4(address)


@pytest.mark.parametrize(
    "address",
    ["10.0.0.1.1", "abc.def.ghi.jkl", "10.0.0", "10.0.0.256", "1000.0.0.1", "10.0.0.1\n", " 10.0.0.1", "", "١٠.0.0.1"],
)
def test_invalid_addresses(address: str) -> None:
    assert not is_valid_ipv4(address)


def test_format_failure_names_the_address() -> None:
    result = AddressFormatValidator("--alternative-zca-ip", "10.0.0").validate()

    assert not result.passed
    assert result.message == "Invalid IP address format: 10.0.0"
    assert "fix" in result.details


def test_missing_address() -> None:
    result = AddressFormatValidator("--original-zca-ip", None).validate()

    assert not result.passed
    assert result.message == "Missing required parameter --original-zca-ip"


def test_duplicate_addresses_rejected() -> None:
    result = AddressUniquenessValidator(
        {
            "--original-zca-ip": "10.0.0.4",
            "--original-zvm-appliance-ip": "10.0.0.5",
            "--alternative-zca-ip": "10.0.0.4",
        }
    ).validate()

    assert not result.passed
    assert result.message == "Each VM IP address input must be unique"
    assert result.details["flags"] == ["--original-zca-ip", "--alternative-zca-ip"]


def test_runner_reports_every_failure(config) -> None:
    config.original_appliance_ip = "10.0.0"
    config.alternative_zca_ip = "10.0.0.4"

    results = ValidationRunner(address_validators(config.addresses)).run_all()

    assert not results.all_passed()
    assert [failure.validator_name for failure in results.get_failures()] == [
        "Address format (--original-zvm-appliance-ip)",
        "Address uniqueness",
    ]
