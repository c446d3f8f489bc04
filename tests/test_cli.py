from __future__ import annotations

import json

import pytest
import yaml

import nic_reassign.cli as cli
from nic_reassign.core.config import RunMode
from nic_reassign.orchestration import RunOutcome, RunState

ADDRESSES = [
    "--original-zca-ip", "10.0.0.4",
    "--original-zvm-appliance-ip", "10.0.0.5",
    "--alternative-zca-ip", "10.0.0.9",
]


class DummyRun:
    def __init__(self, state: RunState) -> None:
        self.state = state
        self.configs = []

    def __call__(self, config):
        self.configs.append(config)
        return RunOutcome(state=self.state)


@pytest.mark.parametrize(
    "state, code",
    [
        (RunState.SUCCEEDED, 0),
        (RunState.ROLLED_BACK, 1),
        (RunState.ROLLBACK_FAILED, 1),
        (RunState.FAILED, 1),
    ],
)
def test_exit_code_follows_outcome(monkeypatch, state: RunState, code: int) -> None:
    monkeypatch.setattr(cli, "run", DummyRun(state))

    assert cli.main(ADDRESSES) == code


def test_flags_map_to_config(monkeypatch) -> None:
    dummy = DummyRun(RunState.SUCCEEDED)
    monkeypatch.setattr(cli, "run", dummy)

    cli.main(ADDRESSES + ["--revert", "--subscription", "sub-1", "--verbose", "--dry-run"])

    config = dummy.configs[0]
    assert config.original_zca_ip == "10.0.0.4"
    assert config.original_appliance_ip == "10.0.0.5"
    assert config.alternative_zca_ip == "10.0.0.9"
    assert config.mode is RunMode.REVERT
    assert config.subscription_id == "sub-1"
    assert config.verbose and config.dry_run


def test_default_mode_is_apply(monkeypatch) -> None:
    dummy = DummyRun(RunState.SUCCEEDED)
    monkeypatch.setattr(cli, "run", dummy)

    cli.main(ADDRESSES)

    assert dummy.configs[0].mode is RunMode.APPLY


def test_missing_flag_exits_with_1(monkeypatch) -> None:
    dummy = DummyRun(RunState.SUCCEEDED)
    monkeypatch.setattr(cli, "run", dummy)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(ADDRESSES[:4])

    assert excinfo.value.code == 1
    assert dummy.configs == []


def test_json_summary(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "run", DummyRun(RunState.SUCCEEDED))

    cli.main(ADDRESSES + ["--format", "json"])

    summary = json.loads(capsys.readouterr().out)
    assert summary["operation"] == "apply"
    assert summary["state"] == "succeeded"
    assert summary["success"] is True


def test_yaml_summary(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "run", DummyRun(RunState.ROLLED_BACK))

    cli.main(ADDRESSES + ["--revert", "--format", "yaml"])

    summary = yaml.safe_load(capsys.readouterr().out)
    assert summary["operation"] == "revert"
    assert summary["state"] == "rolled_back"


def test_keyboard_interrupt(monkeypatch) -> None:
    def interrupted(config):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run", interrupted)

    assert cli.main(ADDRESSES) == 130


def test_unexpected_error_exits_with_1(monkeypatch, capsys) -> None:
    def broken(config):
        raise RuntimeError("management endpoint unreachable")

    monkeypatch.setattr(cli, "run", broken)

    assert cli.main(ADDRESSES) == 1
    assert "Unexpected error: management endpoint unreachable" in capsys.readouterr().err


def test_table_summary_is_the_default(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "run", DummyRun(RunState.SUCCEEDED))

    cli.main(ADDRESSES)

    out = capsys.readouterr().out
    assert "| operation            | apply" in out
    assert "| state                | succeeded" in out


def test_disable_prints_no_summary(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "run", DummyRun(RunState.SUCCEEDED))

    cli.main(ADDRESSES + ["--format", "disable"])

    assert capsys.readouterr().out == ""


def test_format_table_rows() -> None:
    table = cli.OutputFormatter.format_output({"state": "rolled_back", "success": False}, "table")

    lines = table.splitlines()
    assert lines[0] == lines[-1] == "+-" + "-" * 50 + "-+"
    assert lines[1] == f"| {'state':20} | {'rolled_back':27} |"
    assert lines[2] == f"| {'success':20} | {'False':27} |"
