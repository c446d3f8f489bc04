"""
NIC Reassign - Base Orchestrator

Coordinates a run:
1. Validates (addresses, credentials, then read-only resolution)
2. Executes the mode's plan, recording undo steps
3. Rolls back on failure
4. Reports leftover undo steps if the rollback fails too

ReassignOrchestrator and RevertOrchestrator only differ in how they
resolve resources, which plan they run and what they report.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from azure.core.exceptions import AzureError

from nic_reassign.core.config import ReassignConfig
from nic_reassign.core.exceptions import ResourceNotFoundError
from nic_reassign.orchestration.context import ResourceContext
from nic_reassign.orchestration.executor import ForwardExecutor, PlannedAction
from nic_reassign.orchestration.ledger import StepLedger
from nic_reassign.orchestration.rollback import RollbackHandler
from nic_reassign.orchestration.state import RunOutcome, RunState, StateTracker
from nic_reassign.utils.progress import create_progress_tracker
from nic_reassign.validators import (
    CredentialsValidator,
    ValidationRunner,
    address_validators
)


class BaseOrchestrator(ABC):
    """
    Runs one mode's plan through validation, execution and rollback.

    Example:
        orchestrator = ReassignOrchestrator(client, config, logger=logger)
        outcome = orchestrator.run()
        sys.exit(outcome.exit_code)
    """

    # Headline logged when the run does not succeed
    failure_headline = ''

    def __init__(self, client, config: ReassignConfig, logger=None,
                 credential=None, show_progress: bool = False):
        """
        Args:
            client: AzureOperationClient (or anything with the same methods)
            config: Run configuration
            logger: Optional logger
            credential: Optional azure-identity credential to validate before resolving
            show_progress: Show a progress bar while the plan runs
        """
        self.client = client
        self.config = config
        self.logger = logger
        self.credential = credential
        self.show_progress = show_progress

        self.state_tracker = StateTracker(logger)
        self.ledger = StepLedger()
        self.rollback_handler = RollbackHandler(client, logger)
        self.context: Optional[ResourceContext] = None

    def _log_info(self, message: str):
        """Log info message."""
        if self.logger:
            self.logger.info(message)

    def _log_debug(self, message: str):
        """Log debug message."""
        if self.logger:
            self.logger.debug(message)

    def _log_error(self, message: str):
        """Log error message."""
        if self.logger:
            self.logger.error(message)

    def _log_critical(self, message: str):
        """Log critical message."""
        if self.logger:
            self.logger.critical(message)

    # ------------------------------------------------------------------
    # Mode specific hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def resolve(self) -> Optional[ResourceContext]:
        """
        Resolve the run's resources with read-only calls.

        Returns:
            ResourceContext, or None if a precondition failed (already reported)

        Raises:
            ResourceNotFoundError: If an address does not resolve
        """
        pass

    @abstractmethod
    def build_plan(self, context: ResourceContext) -> List[PlannedAction]:
        """The ordered forward actions of this mode."""
        pass

    @abstractmethod
    def report_success(self, context: ResourceContext):
        """Tell the operator how to reach both VMs."""
        pass

    # ------------------------------------------------------------------
    # Workflow
    # ------------------------------------------------------------------

    def validate(self) -> bool:
        """
        Run pre-flight validation and resolution.

        Nothing in Azure is changed here, and nothing is recorded in the ledger.

        Returns:
            True if the run may proceed
        """

        runner = ValidationRunner(address_validators(self.config.addresses))
        results = runner.run_all(self.logger)
        if not results.all_passed():
            if self.logger:
                results.log_failures(self.logger)
            return False

        if self.credential is not None:
            results = ValidationRunner([CredentialsValidator(self.credential)]).run_all(self.logger)
            if not results.all_passed():
                if self.logger:
                    results.log_failures(self.logger)
                return False

        try:
            self.context = self.resolve()
        except ResourceNotFoundError as e:
            self._log_error(str(e))
            return False
        except AzureError as e:
            self._log_error(f"Could not resolve resources from Azure: {e}")
            return False

        return self.context is not None

    def _validate_preconditions(self, validators) -> bool:
        """Run validators over already resolved values."""
        results = ValidationRunner(validators).run_all(self.logger)
        if not results.all_passed():
            if self.logger:
                results.log_failures(self.logger)
            return False
        return True

    def run(self) -> RunOutcome:
        """
        Execute the whole run.

        Returns:
            RunOutcome in a terminal state
        """

        if not self.validate():
            self.state_tracker.transition(RunState.FAILED)
            return RunOutcome(state=RunState.FAILED, ledger=self.ledger)

        plan = self.build_plan(self.context)

        if self.config.dry_run:
            self._log_info("Dry run - the following actions would be executed:")
            for index, planned in enumerate(plan, 1):
                self._log_info(f"  {index}. {planned.action.describe()}")
            self.state_tracker.transition(RunState.PLANNED)
            return RunOutcome(state=RunState.PLANNED, ledger=self.ledger)

        self.state_tracker.transition(RunState.APPLYING)

        progress = create_progress_tracker(
            total_steps=len(plan),
            desc=self.progress_description,
            enabled=self.show_progress
        )
        executor = ForwardExecutor(self.client, self.ledger, self.logger, progress)
        execution = executor.run(plan)
        warnings = [result.message for result in execution.warnings]

        if execution.success:
            self.state_tracker.transition(RunState.SUCCEEDED)
            self.report_success(self.context)
            self._log_debug(self.state_tracker.get_summary())
            return RunOutcome(state=RunState.SUCCEEDED, ledger=self.ledger, warnings=warnings)

        failed_step = execution.failed.action.describe()
        self.state_tracker.transition(RunState.ROLLING_BACK)
        rollback = self.rollback_handler.rollback(self.ledger)

        if rollback.succeeded:
            self.state_tracker.transition(RunState.ROLLED_BACK)
            self._log_error(self.failure_headline)
            self._log_error(
                "Monitor script messages to track failed steps. "
                "In case of failure, re-run the revert operation or contact support"
            )
            self._log_debug(self.state_tracker.get_summary())
            return RunOutcome(
                state=RunState.ROLLED_BACK,
                ledger=self.ledger,
                failed_step=failed_step,
                warnings=warnings
            )

        self.state_tracker.transition(RunState.ROLLBACK_FAILED)
        self._log_error(self.failure_headline)
        self._log_critical("Rollback was not executed properly. Re-run the revert command or contact support")
        leftovers = self.rollback_handler.report_leftovers(self.ledger, rollback.failed_position)
        self._log_debug(self.state_tracker.get_summary())
        return RunOutcome(
            state=RunState.ROLLBACK_FAILED,
            ledger=self.ledger,
            failed_step=failed_step,
            failed_rollback_position=rollback.failed_position,
            leftovers=leftovers,
            warnings=warnings
        )

    @property
    def progress_description(self) -> str:
        return type(self).__name__.replace('Orchestrator', '')
