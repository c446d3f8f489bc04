"""
NIC Reassign - Base Validator

This module provides the base class for all validators.
Each validator checks one thing and returns pass/fail.

Validators never change anything in Azure: they only read.

Pattern: Create a new validator by inheriting from BaseValidator
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class ValidationResult:
    """
    Result from a single validation check.

    Attributes:
        validator_name: Name of the validator (for display)
        passed: True if validation passed, False if failed
        message: Human-readable message about the result
        details: Optional dict with extra info (for debugging/fixes)
    """
    validator_name: str
    passed: bool
    message: str
    details: Optional[dict] = None

    def __str__(self):
        """String representation of result."""
        status = "[OK]" if self.passed else "[X]"
        return f"{status} {self.validator_name}: {self.message}"


class ValidationResults:
    """
    Collection of validation results.

    Makes it easy to check if all validations passed and report failures.
    """

    def __init__(self):
        """Initialize empty results."""
        self.results: List[ValidationResult] = []

    def add(self, result: ValidationResult):
        """Add a validation result."""
        self.results.append(result)

    def all_passed(self) -> bool:
        """Check if all validations passed."""
        return all(r.passed for r in self.results)

    def get_failures(self) -> List[ValidationResult]:
        """Get only failed validations."""
        return [r for r in self.results if not r.passed]

    def log_failures(self, logger):
        """Log only failed validations with details."""
        for result in self.get_failures():
            logger.error(f"{result.validator_name}: {result.message}")

            # Print fix suggestions if available
            if result.details and 'fix' in result.details:
                logger.error(f"  Fix: {result.details['fix']}")


class BaseValidator(ABC):
    """
    Base class for all validators.

    To create a new validator:
    1. Inherit from this class
    2. Implement the validate() method
    3. Implement the name property

    Example:
        class MyValidator(BaseValidator):
            @property
            def name(self):
                return "My Check"

            def validate(self):
                if all_good:
                    return self._pass("Everything is good")
                return self._fail("Something is wrong", fix="Do this to fix it")
    """

    @abstractmethod
    def validate(self) -> ValidationResult:
        """
        Run the validation check.

        Returns:
            ValidationResult with pass/fail and message
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this validator.

        Used for display in validation results.
        """
        pass

    def _pass(self, message: str, **details) -> ValidationResult:
        return ValidationResult(
            validator_name=self.name,
            passed=True,
            message=message,
            details=details or None
        )

    def _fail(self, message: str, fix: str = None, **details) -> ValidationResult:
        if fix:
            details['fix'] = fix
        return ValidationResult(
            validator_name=self.name,
            passed=False,
            message=message,
            details=details or None
        )


class ValidationRunner:
    """
    Runs multiple validators and collects results.

    Example:
        runner = ValidationRunner()
        runner.add(AddressFormatValidator('--original-zca-ip', '10.0.0.4'))
        runner.add(AddressUniquenessValidator(addresses))

        results = runner.run_all(logger)

        if not results.all_passed():
            results.log_failures(logger)
            return False
    """

    def __init__(self, validators: List[BaseValidator] = None):
        """Initialize with an optional list of validators."""
        self.validators: List[BaseValidator] = list(validators or [])

    def add(self, validator: BaseValidator):
        """
        Add a validator to the chain.

        Args:
            validator: A validator instance
        """
        self.validators.append(validator)

    def run_all(self, logger=None) -> ValidationResults:
        """
        Run all validators and collect results.

        Args:
            logger: Optional logger for debug output

        Returns:
            ValidationResults with all results
        """
        results = ValidationResults()

        for validator in self.validators:
            if logger:
                logger.debug(f"Running validator: {validator.name}")

            result = validator.validate()

            if logger:
                status = "PASS" if result.passed else "FAIL"
                logger.debug(f"  {status}: {result.message}")

            results.add(result)

        return results
