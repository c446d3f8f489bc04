"""
NIC Reassign - Run State Tracking

Tracks where a run is in its workflow:

    VALIDATING -> APPLYING -> SUCCEEDED
                           -> ROLLING_BACK -> ROLLED_BACK
                                           -> ROLLBACK_FAILED
    VALIDATING -> FAILED
    VALIDATING -> PLANNED        (dry run)

Apply and revert runs share this state machine.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from nic_reassign.core.exceptions import StateTransitionError
from nic_reassign.orchestration.ledger import Step, StepLedger


class RunState(Enum):
    """States of a reassign or revert run."""
    VALIDATING = 'validating'
    APPLYING = 'applying'
    SUCCEEDED = 'succeeded'
    ROLLING_BACK = 'rolling_back'
    ROLLED_BACK = 'rolled_back'
    ROLLBACK_FAILED = 'rollback_failed'
    FAILED = 'failed'
    PLANNED = 'planned'

    @property
    def is_terminal(self) -> bool:
        return not TRANSITIONS[self]


TRANSITIONS = {
    RunState.VALIDATING: {RunState.APPLYING, RunState.FAILED, RunState.PLANNED},
    RunState.APPLYING: {RunState.SUCCEEDED, RunState.ROLLING_BACK},
    RunState.ROLLING_BACK: {RunState.ROLLED_BACK, RunState.ROLLBACK_FAILED},
    RunState.SUCCEEDED: set(),
    RunState.ROLLED_BACK: set(),
    RunState.ROLLBACK_FAILED: set(),
    RunState.FAILED: set(),
    RunState.PLANNED: set(),
}


class StateTracker:
    """
    Tracks the state of one run.

    Every transition is checked against TRANSITIONS and recorded with a
    timestamp, so the run's history can be logged or printed.

    Example:
        tracker = StateTracker()
        tracker.transition(RunState.APPLYING)
        tracker.transition(RunState.SUCCEEDED)
        tracker.state   # RunState.SUCCEEDED
    """

    def __init__(self, logger=None):
        """Initialize a tracker in the VALIDATING state."""
        self.state = RunState.VALIDATING
        self.logger = logger
        self.history: List[Tuple[RunState, datetime]] = [(self.state, datetime.now())]

    def transition(self, new_state: RunState):
        """
        Move to new_state.

        Raises:
            StateTransitionError: If the workflow does not allow the move
        """
        if new_state not in TRANSITIONS[self.state]:
            raise StateTransitionError(self.state.value, new_state.value)

        if self.logger:
            self.logger.debug(f"State change: {self.state.value} -> {new_state.value}")

        self.state = new_state
        self.history.append((new_state, datetime.now()))

    def get_summary(self) -> str:
        """Get summary of the run."""
        duration = (datetime.now() - self.history[0][1]).total_seconds()
        path = ' -> '.join(state.value for state, _ in self.history)
        return f"{path} (took {duration:.1f}s)"


@dataclass
class RunOutcome:
    """
    Final result of a run.

    Attributes:
        state: Terminal state the run ended in
        ledger: Steps completed during the run
        failed_step: Description of the forward action that failed, if any
        failed_rollback_position: Ledger position where rollback stopped, if it did
        leftovers: Undo steps left for manual execution
        warnings: Messages of best-effort actions that failed
    """
    state: RunState
    ledger: StepLedger = field(default_factory=StepLedger)
    failed_step: Optional[str] = None
    failed_rollback_position: Optional[int] = None
    leftovers: List[Tuple[int, Step]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state is RunState.SUCCEEDED

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 when every forward action succeeded, or nothing was meant to run."""
        return 0 if self.state in (RunState.SUCCEEDED, RunState.PLANNED) else 1

    def to_dict(self) -> dict:
        """Summary suitable for json/yaml output."""
        return {
            'state': self.state.value,
            'stepsCompleted': len(self.ledger),
            'failedStep': self.failed_step,
            'rollbackFailedAt': self.failed_rollback_position,
            'manualSteps': [
                f"#{position}: {step.description}" for position, step in self.leftovers
            ],
            'warnings': list(self.warnings),
            'success': self.succeeded,
        }
