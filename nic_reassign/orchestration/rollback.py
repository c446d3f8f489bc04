"""
NIC Reassign - Rollback Handler

Handles rollback of completed steps when a forward action fails.
Undoes steps in reverse order, and when an undo step itself fails,
reports the steps that are left for the operator to run by hand.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from nic_reassign.orchestration.ledger import Step, StepLedger


@dataclass
class RollbackResult:
    """
    Outcome of a rollback pass.

    Attributes:
        succeeded: True if every recorded step was undone
        undone: Positions of the steps that were undone, in the order they ran
        failed_position: 1-based ledger position of the undo step that failed
        error: Error details of the failed undo step
    """
    succeeded: bool
    undone: List[int] = field(default_factory=list)
    failed_position: Optional[int] = None
    error: Optional[str] = None


class RollbackHandler:
    """
    Handles rollback of completed steps.

    When a forward action fails, this undoes all previous successful
    actions in reverse order. The first undo step that fails stops the
    rollback; nothing older is attempted automatically.

    Example:
        handler = RollbackHandler(client, logger)

        # Forward sequence:
        # 1. Create NIC [OK]
        # 2. Deallocate appliance VM [OK]
        # 3. Deallocate ZCA VM [X] FAILED

        result = handler.rollback(ledger)
        # -> undo step #2 (start appliance VM)
        # -> undo step #1 (delete NIC)

        if not result.succeeded:
            handler.report_leftovers(ledger, result.failed_position)
    """

    def __init__(self, client, logger=None):
        """
        Initialize rollback handler.

        Args:
            client: Object with run(action) -> OperationResult
            logger: Optional logger for output
        """
        self.client = client
        self.logger = logger

    def _log_info(self, message: str):
        """Log info message."""
        if self.logger:
            self.logger.info(message)

    def _log_warning(self, message: str):
        """Log warning message."""
        if self.logger:
            self.logger.warning(message)

    def _log_error(self, message: str):
        """Log error message."""
        if self.logger:
            self.logger.error(message)

    def _log_debug(self, message: str):
        """Log debug message."""
        if self.logger:
            self.logger.debug(message)

    def _undo(self, step: Step):
        """Run one undo step. Returns (success, error)."""
        if step.inverse is None:
            return False, "no undo action recorded"
        try:
            result = self.client.run(step.inverse)
        except Exception as e:
            return False, str(e)
        return result.success, result.error

    def rollback(self, ledger: StepLedger) -> RollbackResult:
        """
        Undo all recorded steps, newest first.

        The ledger is only read, so a failed rollback can still report
        what is left.

        Args:
            ledger: Ledger of the failed run

        Returns:
            RollbackResult
        """

        self._log_warning("Error occurred...")

        if not len(ledger):
            self._log_debug("No steps to roll back")
            self._log_info("Script steps were successfully rolled back")
            return RollbackResult(succeeded=True)

        self._log_debug(f"Rolling back {len(ledger)} steps in reverse order")

        undone = []
        for position, step in ledger.reversed_steps():
            self._log_info(f"- undo step #{position}: {step.description}")
            self._log_debug(f"  {step.inverse}")

            success, error = self._undo(step)

            if not success:
                self._log_error(f"  [X] Failed to undo step #{position}: {step.description}")
                if error:
                    self._log_error(f"  {error}")
                return RollbackResult(
                    succeeded=False,
                    undone=undone,
                    failed_position=position,
                    error=error
                )

            undone.append(position)

        self._log_info("Script steps were successfully rolled back")
        return RollbackResult(succeeded=True, undone=undone)

    def report_leftovers(self, ledger: StepLedger,
                         failed_position: int) -> List[Tuple[int, Step]]:
        """
        Report the undo steps a failed rollback never attempted.

        Steps are listed newest first, which is the order the operator
        should run them in.

        Args:
            ledger: Ledger of the failed run
            failed_position: Position where rollback stopped

        Returns:
            list of (position, step) pairs that were reported
        """

        leftovers = ledger.leftovers(failed_position)

        self._log_warning("Rollback steps that require manual execution:")
        for position, step in leftovers:
            self._log_info(f"- step #{position}: {step.description}")

        return leftovers
