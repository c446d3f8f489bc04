"""
NIC Reassign - Step Ledger

Records, for every forward action that succeeded, how to undo it.
The ledger lives only as long as the run; nothing is persisted.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from nic_reassign.operations.base import Action


@dataclass(frozen=True)
class Step:
    """
    One completed forward action.

    Attributes:
        description: What running the inverse does, as shown to the operator
        inverse: The action that undoes the forward action
    """
    description: str
    inverse: Optional[Action]


class StepLedger:
    """
    Append-only record of completed steps, in the order they completed.

    Positions are 1-based and counted from the head (first completed step),
    which is how steps are numbered in rollback output.

    Example:
        ledger = StepLedger()
        ledger.record("Starting Linux ZCA", StartVM('rg', 'appliance-vm'))
        ledger.record("Starting Windows ZCA VM", StartVM('rg', 'zca-vm'))

        for position, step in ledger.reversed_steps():
            print(position, step.description)
        # 2 Starting Windows ZCA VM
        # 1 Starting Linux ZCA
    """

    def __init__(self):
        """Initialize empty ledger."""
        self._steps: List[Step] = []

    def record(self, description: str, inverse: Optional[Action]) -> Step:
        """
        Append a step to the end of the ledger.

        Args:
            description: Human-readable description of the undo step
            inverse: Action that undoes the completed forward action

        Returns:
            The recorded Step
        """
        step = Step(description=description, inverse=inverse)
        self._steps.append(step)
        return step

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(list(self._steps))

    def __getitem__(self, position: int) -> Step:
        """Step at a 1-based head-relative position."""
        if position < 1 or position > len(self._steps):
            raise IndexError(f"No step #{position} (ledger has {len(self._steps)})")
        return self._steps[position - 1]

    def reversed_steps(self) -> Iterator[Tuple[int, Step]]:
        """
        Walk the ledger from tail to head without changing it.

        Yields:
            (position, step) pairs, newest first
        """
        for index in range(len(self._steps) - 1, -1, -1):
            yield index + 1, self._steps[index]

    def leftovers(self, failed_position: int) -> List[Tuple[int, Step]]:
        """
        Steps older than failed_position, newest first.

        These are the undo steps a rollback never attempted because it
        stopped at failed_position. The failed step itself is excluded.

        Args:
            failed_position: 1-based position at which rollback failed

        Returns:
            list of (position, step) pairs
        """
        return [
            (position, step)
            for position, step in self.reversed_steps()
            if position < failed_position
        ]

    def descriptions(self) -> List[str]:
        """Descriptions of all steps, head to tail."""
        return [step.description for step in self._steps]
