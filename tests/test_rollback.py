from __future__ import annotations

import logging

from conftest import FakeOperationClient

from nic_reassign.operations import AttachNic, DeallocateVM, DeleteNic, DetachNic, StartVM
from nic_reassign.orchestration import RollbackHandler, StepLedger


def _ledger() -> StepLedger:
    ledger = StepLedger()
    ledger.record("Delete alternative Windows ZCA NIC", DeleteNic("rg", "alternativeZcaNic7"))
    ledger.record("Starting Linux ZCA", StartVM("rg", "zvma-vm"))
    ledger.record("Starting Windows ZCA VM", StartVM("rg", "zca-vm"))
    ledger.record("Detaching alternative NIC from Windows ZCA VM", DetachNic("rg", "zca-vm", "alternativeZcaNic7"))
    ledger.record("Attaching original NIC to Windows ZCA VM", AttachNic("rg", "zca-vm", "zca-nic"))
    return ledger


def test_undoes_in_exact_reverse_order(caplog, logger: logging.Logger) -> None:
    ledger = _ledger()
    client = FakeOperationClient()

    result = RollbackHandler(client, logger).rollback(ledger)

    assert result.succeeded
    assert result.undone == [5, 4, 3, 2, 1]
    assert client.calls == [step.inverse for step in reversed(list(ledger))]
    assert "- undo step #5: Attaching original NIC to Windows ZCA VM" in caplog.text
    assert "Script steps were successfully rolled back" in caplog.text


def test_empty_ledger_makes_no_calls(caplog, logger: logging.Logger) -> None:
    client = FakeOperationClient()

    result = RollbackHandler(client, logger).rollback(StepLedger())

    assert result.succeeded
    assert client.calls == []
    assert "Script steps were successfully rolled back" in caplog.text


def test_stops_at_first_failed_undo() -> None:
    ledger = _ledger()
    client = FakeOperationClient(fail_on=[StartVM("rg", "zca-vm")])

    result = RollbackHandler(client).rollback(ledger)

    assert not result.succeeded
    assert result.failed_position == 3
    assert result.undone == [5, 4]
    # Nothing older than the failed step is attempted
    assert DeallocateVM("rg", "zvma-vm") not in client.calls
    assert StartVM("rg", "zvma-vm") not in client.calls
    assert len(client.calls) == 3


def test_exception_in_undo_is_a_failure() -> None:
    ledger = _ledger()
    client = FakeOperationClient(raise_on=[AttachNic("rg", "zca-vm", "zca-nic")])

    result = RollbackHandler(client).rollback(ledger)

    assert result.failed_position == 5
    assert "connection reset" in result.error


def test_report_leftovers_lists_only_older_steps(caplog, logger: logging.Logger) -> None:
    ledger = _ledger()
    handler = RollbackHandler(FakeOperationClient(), logger)

    leftovers = handler.report_leftovers(ledger, 3)

    assert [position for position, _ in leftovers] == [2, 1]
    assert "Rollback steps that require manual execution:" in caplog.text
    assert "- step #2: Starting Linux ZCA" in caplog.text
    assert "- step #1: Delete alternative Windows ZCA NIC" in caplog.text
    assert "- step #3:" not in caplog.text
