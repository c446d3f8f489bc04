"""
NIC Reassign - Base Action

This module provides the base class for all actions.
Each action does ONE thing and knows which action undoes it (its inverse).

Key concept: an action is a plain, immutable request. It does not talk to
Azure itself; AzureOperationClient.run() executes it. That keeps the set of
things a rollback can do closed and inspectable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Optional, Tuple


@dataclass
class OperationResult:
    """
    Result from executing an action.

    Attributes:
        operation_name: Name of the operation (for display)
        success: True if operation succeeded, False if failed
        message: Human-readable message about the result
        error: Optional error details
    """
    operation_name: str
    success: bool
    message: str
    error: Optional[str] = None

    def __str__(self):
        """String representation."""
        status = "[OK]" if self.success else "[X]"
        return f"{status} {self.operation_name}: {self.message}"


@dataclass(frozen=True)
class Action(ABC):
    """
    Base class for all actions.

    Every action must:
    1. Be a frozen dataclass inheriting from this class
    2. Implement the name property (operation identifier)
    3. Implement describe() (human readable text)
    4. Implement inverse() (the action that undoes it, or None)

    Example:
        action = AttachNic(resource_group='rg', vm_name='zca-vm', nic_name='nic-1')
        undo = action.inverse()
        # DetachNic(resource_group='rg', vm_name='zca-vm', nic_name='nic-1')
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this operation.

        Used for display and logging.
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Describe exactly what this action changes."""
        pass

    @abstractmethod
    def inverse(self) -> Optional['Action']:
        """
        Action that semantically undoes this one.

        Returns:
            The inverse action, or None when the action cannot be undone
        """
        pass

    @property
    def parameters(self) -> Tuple[str, ...]:
        """Ordered string arguments of this action."""
        return tuple(str(getattr(self, f.name)) for f in fields(self))

    def __str__(self):
        return f"{self.name}({', '.join(self.parameters)})"
