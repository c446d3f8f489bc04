"""
NIC Reassign - Authentication Manager

This module handles Azure authentication and management client creation.
"""

import os
import subprocess

from azure.identity import DefaultAzureCredential
from azure.mgmt.compute import ComputeManagementClient
from azure.mgmt.network import NetworkManagementClient

from nic_reassign.core.exceptions import ConfigurationError
from nic_reassign.core.config import VERSION


class AuthManager:
    """
    Manages Azure authentication and management client creation.

    This class:
    1. Gets credentials using DefaultAzureCredential
    2. Creates authenticated Compute and Network management clients
    3. Provides a clear error when no subscription is selected

    Usage:
        auth = AuthManager()
        compute, network, subscription = auth.get_clients('0000-...')
    """

    def __init__(self):
        """Initialize the authentication manager."""
        self._credential = None
        self._compute = None
        self._network = None

    def get_credential(self):
        """
        Get the Azure credential chain.

        DefaultAzureCredential searches for credentials in this order:
        1. Environment variables (service principal)
        2. Workload / managed identity
        3. Azure CLI login (az login, or Azure Cloud Shell)

        No token is requested here; CredentialsValidator does that
        once the addresses have been checked.

        Returns:
            DefaultAzureCredential
        """

        if not self._credential:
            self._credential = DefaultAzureCredential()

        return self._credential

    def get_clients(self, subscription_id: str):
        """
        Get authenticated Azure Compute and Network management clients.

        Args:
            subscription_id: Subscription holding both VMs

        Returns:
            tuple: (compute_client, network_client, subscription_id)

        Raises:
            ConfigurationError: If no subscription was given

        Example:
            auth = AuthManager()
            compute, network, subscription = auth.get_clients(subscription_id)

            vm = compute.virtual_machines.get('my-rg', 'my-vm')
        """

        if not subscription_id:
            raise ConfigurationError(
                "No Azure subscription selected",
                fix="az account set --subscription <subscription_id>"
            )

        credential = self.get_credential()

        # Tag requests so the calls can be told apart in the activity log
        user_agent = f'nic_reassign-{VERSION}'

        if not self._compute:
            self._compute = ComputeManagementClient(
                credential,
                subscription_id,
                user_agent=user_agent
            )

        if not self._network:
            self._network = NetworkManagementClient(
                credential,
                subscription_id,
                user_agent=user_agent
            )

        return self._compute, self._network, subscription_id


def get_default_subscription():
    """
    Subscription to use when none was given on the command line.

    Looks at AZURE_SUBSCRIPTION_ID first, then at the subscription selected
    with `az account set`.

    Returns:
        Subscription id, or None if neither is available
    """
    subscription = os.environ.get('AZURE_SUBSCRIPTION_ID')
    if subscription:
        return subscription

    try:
        result = subprocess.run(
            ['az', 'account', 'show', '--query', 'id', '--output', 'tsv'],
            capture_output=True,
            text=True,
            timeout=30
        )
    except (subprocess.SubprocessError, FileNotFoundError):
        # Azure CLI not available
        return None

    value = result.stdout.strip()
    return value if result.returncode == 0 and value else None
