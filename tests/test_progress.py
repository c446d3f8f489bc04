from __future__ import annotations

from conftest import FakeOperationClient, apply_inventory

from nic_reassign.orchestration import ReassignOrchestrator, RunState
from nic_reassign.utils.progress import ProgressTracker, SimpleProgressTracker, create_progress_tracker


def test_factory_respects_enabled_flag() -> None:
    assert isinstance(create_progress_tracker(9, enabled=False), SimpleProgressTracker)
    assert isinstance(create_progress_tracker(9, enabled=True), ProgressTracker)


def test_progress_bar_counts_steps() -> None:
    tracker = ProgressTracker(total_steps=3, desc="Reassign")
    tracker.start()
    tracker.update_step("Deallocate VM zca-vm")
    tracker.advance()
    tracker.advance(2)
    tracker.finish()

    assert tracker.current_step == 3
    assert tracker.current_step_name == "Deallocate VM zca-vm"
    assert tracker.bar is None


def test_orchestrator_runs_with_progress_bar(config) -> None:
    client = FakeOperationClient(apply_inventory())

    outcome = ReassignOrchestrator(client, config, show_progress=True).run()

    assert outcome.state is RunState.SUCCEEDED
