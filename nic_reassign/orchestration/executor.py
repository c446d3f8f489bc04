"""
NIC Reassign - Forward Executor

Runs an ordered plan of actions. After each action succeeds its inverse
is recorded in the step ledger; the first failure stops the plan.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from nic_reassign.operations.base import Action, OperationResult
from nic_reassign.orchestration.ledger import StepLedger
from nic_reassign.utils.progress import SimpleProgressTracker


@dataclass(frozen=True)
class PlannedAction:
    """
    One entry of a run's plan.

    Attributes:
        action: The forward action
        description: Progress message logged before the action runs
        undo_description: Description recorded with the inverse in the ledger
        best_effort: A failure is logged as a warning and the plan continues
        warning: Message logged when a best-effort action fails
    """
    action: Action
    description: str
    undo_description: str = ''
    best_effort: bool = False
    warning: str = ''


@dataclass
class ExecutionResult:
    """
    Outcome of running a plan.

    Attributes:
        success: True if every non-best-effort action succeeded
        completed: Number of actions that succeeded
        failed: The planned action that stopped the run, if any
        result: OperationResult of the failed action, if any
        warnings: Results of best-effort actions that failed
    """
    success: bool
    completed: int
    failed: Optional[PlannedAction] = None
    result: Optional[OperationResult] = None
    warnings: List[OperationResult] = field(default_factory=list)


class ForwardExecutor:
    """
    Executes a plan and keeps the step ledger current.

    Example:
        ledger = StepLedger()
        executor = ForwardExecutor(client, ledger, logger)

        outcome = executor.run(plan)
        if not outcome.success:
            RollbackHandler(client, logger).rollback(ledger)
    """

    def __init__(self, client, ledger: StepLedger, logger=None, progress=None):
        """
        Args:
            client: Object with run(action) -> OperationResult
            ledger: Ledger receiving one step per successful action
            logger: Optional logger
            progress: Optional progress tracker
        """
        self.client = client
        self.ledger = ledger
        self.logger = logger
        self.progress = progress or SimpleProgressTracker()

    def _log_info(self, message: str):
        if self.logger:
            self.logger.info(message)

    def _log_debug(self, message: str):
        if self.logger:
            self.logger.debug(message)

    def _log_warning(self, message: str):
        if self.logger:
            self.logger.warning(message)

    def _log_error(self, message: str):
        if self.logger:
            self.logger.error(message)

    def _execute(self, action: Action) -> OperationResult:
        try:
            return self.client.run(action)
        except Exception as e:
            self._log_error(f"Unexpected error during {action.name}: {str(e)}")
            return OperationResult(
                operation_name=action.name,
                success=False,
                message=f"Failed: {action.describe()}",
                error=str(e)
            )

    def run(self, plan: List[PlannedAction]) -> ExecutionResult:
        """
        Run the plan in order.

        Args:
            plan: Planned actions, in execution order

        Returns:
            ExecutionResult; on failure the ledger holds every completed step
        """

        completed = 0
        warnings = []

        self.progress.start()
        try:
            for planned in plan:
                self.progress.update_step(planned.action.describe())
                self._log_info(planned.description)

                result = self._execute(planned.action)

                if not result.success:
                    if planned.best_effort:
                        self._log_warning(planned.warning or result.message)
                        if result.error:
                            self._log_debug(f"  Error: {result.error}")
                        warnings.append(result)
                        self.progress.advance()
                        continue

                    self._log_error(f"{result.message}")
                    if result.error:
                        self._log_error(f"  {result.error}")
                    return ExecutionResult(
                        success=False,
                        completed=completed,
                        failed=planned,
                        result=result,
                        warnings=warnings
                    )

                self._log_debug(f"  [OK] {result.message}")
                completed += 1

                inverse = planned.action.inverse()
                if inverse is None:
                    self._log_debug(f"  {planned.action.name} cannot be undone, nothing recorded")
                else:
                    self.ledger.record(planned.undo_description or inverse.describe(), inverse)
                    self._log_debug(f"  Recorded undo step #{len(self.ledger)}: {inverse}")

                self.progress.advance()
        finally:
            self.progress.finish()

        return ExecutionResult(success=True, completed=completed, warnings=warnings)
