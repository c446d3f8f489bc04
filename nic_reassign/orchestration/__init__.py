"""
NIC Reassign - Orchestration Module

Coordinates reassign and revert workflows.
"""

from nic_reassign.orchestration.ledger import Step, StepLedger
from nic_reassign.orchestration.executor import ExecutionResult, ForwardExecutor, PlannedAction
from nic_reassign.orchestration.rollback import RollbackHandler, RollbackResult
from nic_reassign.orchestration.state import RunOutcome, RunState, StateTracker
from nic_reassign.orchestration.context import ResourceContext, VMPlacement
from nic_reassign.orchestration.reassign import ReassignOrchestrator
from nic_reassign.orchestration.revert import RevertOrchestrator

__all__ = [
    'Step',
    'StepLedger',
    'ExecutionResult',
    'ForwardExecutor',
    'PlannedAction',
    'RollbackHandler',
    'RollbackResult',
    'RunOutcome',
    'RunState',
    'StateTracker',
    'ResourceContext',
    'VMPlacement',
    'ReassignOrchestrator',
    'RevertOrchestrator',
]
