"""
NIC Reassign - Configuration Management

This module manages configuration options for NIC reassignment runs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Version for usage tracking
VERSION = '1.0.0'

# Prefix of the NIC created to hold the alternative ZCA address
ALTERNATIVE_NIC_PREFIX = 'alternativeZcaNic'

# Scope used to acquire Azure Resource Manager tokens
AZURE_MANAGEMENT_SCOPE = 'https://management.azure.com/.default'


class RunMode(Enum):
    """Which action sequence a process invocation runs."""
    APPLY = 'apply'
    REVERT = 'revert'


@dataclass
class ReassignConfig:
    """
    Configuration for a reassign or revert run.

    The same three addresses are used for both modes: a revert run must be
    invoked with exactly the values of the original apply run.

    Example:
        config = ReassignConfig(
            original_zca_ip='10.0.0.4',
            original_appliance_ip='10.0.0.5',
            alternative_zca_ip='10.0.0.9'
        )
    """

    # Addresses
    original_zca_ip: str
    original_appliance_ip: str
    alternative_zca_ip: str

    # Run mode
    mode: RunMode = RunMode.APPLY

    # Azure settings
    subscription_id: Optional[str] = None
    alternative_nic_prefix: str = ALTERNATIVE_NIC_PREFIX

    # Logging settings
    verbose: bool = False
    log_file: Optional[str] = None

    # Behavior settings
    dry_run: bool = False  # Resolve and validate, show the plan, change nothing
    output_format: str = 'table'

    @property
    def is_revert(self) -> bool:
        """True when this run undoes a previous reassignment."""
        return self.mode is RunMode.REVERT

    @property
    def addresses(self) -> dict:
        """The three addresses keyed by their command line flag."""
        return {
            '--original-zca-ip': self.original_zca_ip,
            '--original-zvm-appliance-ip': self.original_appliance_ip,
            '--alternative-zca-ip': self.alternative_zca_ip,
        }

    def revert_command(self, prog: str = 'reassign-nic') -> str:
        """Literal command line that reverts an apply run made with this config."""
        return (
            f"{prog} --original-zca-ip {self.original_zca_ip}"
            f" --original-zvm-appliance-ip {self.original_appliance_ip}"
            f" --alternative-zca-ip {self.alternative_zca_ip} --revert"
        )


def create_config(original_zca_ip: str, original_appliance_ip: str,
                  alternative_zca_ip: str, **kwargs) -> ReassignConfig:
    """
    Create a run configuration with custom options.

    Args:
        original_zca_ip: Current address of the Windows ZCA VM
        original_appliance_ip: Current address of the Linux ZVM appliance VM
        alternative_zca_ip: New address for the Windows ZCA VM
        **kwargs: Configuration options (any other field from ReassignConfig)

    Returns:
        ReassignConfig: Configuration object

    Example:
        config = create_config(
            '10.0.0.4', '10.0.0.5', '10.0.0.9',
            mode=RunMode.REVERT,
            verbose=True
        )
    """
    return ReassignConfig(
        original_zca_ip=original_zca_ip,
        original_appliance_ip=original_appliance_ip,
        alternative_zca_ip=alternative_zca_ip,
        **kwargs
    )
