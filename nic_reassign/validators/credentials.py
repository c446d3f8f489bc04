"""
NIC Reassign - Credentials Validator

Validates that Azure credentials are present and valid.
"""

from azure.core.exceptions import ClientAuthenticationError

from nic_reassign.core.config import AZURE_MANAGEMENT_SCOPE
from nic_reassign.validators.base import BaseValidator, ValidationResult


class CredentialsValidator(BaseValidator):
    """
    Validates that an Azure Resource Manager token can be acquired.

    Common failure reasons:
    - User hasn't run: az login
    - Service principal environment variables are incomplete
    - Managed identity not assigned to the machine running the tool

    Example:
        validator = CredentialsValidator(DefaultAzureCredential())
        result = validator.validate()

        if not result.passed:
            print(f"Fix: {result.details['fix']}")
    """

    def __init__(self, credential):
        """
        Args:
            credential: Any azure-identity credential
        """
        self.credential = credential

    @property
    def name(self) -> str:
        """Display name for this validator."""
        return "Credentials & Authentication"

    def validate(self) -> ValidationResult:
        try:
            token = self.credential.get_token(AZURE_MANAGEMENT_SCOPE)
        except ClientAuthenticationError as e:
            return self._fail(
                "No usable Azure credentials found",
                fix="az login",
                error=str(e)
            )

        return self._pass(
            "Authenticated to Azure Resource Manager",
            credentials_type=type(self.credential).__name__,
            expires_on=token.expires_on
        )
