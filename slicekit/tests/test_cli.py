"""
Tests for the slicekit CLI.
"""

import json

import pytest
from typer.testing import CliRunner

from slicekit_cli.main import app

COUNTER = "slicekit.tests.fixtures:counter"
PROFILE = "slicekit.tests.fixtures:profile_config"

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    import logging

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "slicekit CLI" in result.output


def test_inspect_json():
    result = runner.invoke(app, ["inspect", COUNTER, "--json"])

    assert result.exit_code == 0
    out = json.loads(result.output)
    assert out["slice"] == "counter"
    assert out["actions"] == {"increment": "counter/increment", "reset": "counter/reset"}
    assert out["selectors"] == ["doubled", "value"]
    assert out["initial"] == 0


def test_inspect_builds_configs():
    result = runner.invoke(app, ["inspect", PROFILE, "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output)["initial"] == {"bio": None, "handle": ""}


def test_inspect_table():
    result = runner.invoke(app, ["inspect", COUNTER])

    assert result.exit_code == 0
    assert "counter/increment" in result.output


@pytest.mark.parametrize(
    "target",
    ["slicekit.tests.fixtures", "slicekit.tests.fixtures:missing", "slicekit.tests.fixtures:not_a_slice", "nope.nope:x"],
)
def test_inspect_bad_target(target):
    result = runner.invoke(app, ["inspect", target, "--json"])

    assert result.exit_code == 2
    assert "error" in json.loads(result.output)


def test_append_then_replay(tmp_path):
    log_path = str(tmp_path / "actions.jsonl")

    for payload in ("5", "2"):
        result = runner.invoke(app, ["log", "append", COUNTER, "increment", "--payload", payload, "--log", log_path])
        assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["log", "append", COUNTER, "increment", "-p", "1", "-l", log_path, "--json"])
    assert json.loads(result.output) == {"seq": 2, "action": {"type": "counter/increment", "payload": 1}}

    result = runner.invoke(
        app, ["replay", COUNTER, "--log", log_path, "--select", "doubled", "--show-state", "--json"]
    )

    assert result.exit_code == 0, result.output
    out = json.loads(result.output)
    assert out["actions_replayed"] == 3
    assert out["state"] == 8
    assert out["selected"] == {"doubled": 16}
    assert out["action_counts"] == {"counter/increment": 3}
    assert len(out["state_hash"]) == 64


def test_replay_until(tmp_path):
    log_path = str(tmp_path / "actions.jsonl")
    for payload in ("1", "10", "100"):
        runner.invoke(app, ["log", "append", COUNTER, "increment", "-p", payload, "-l", log_path])

    result = runner.invoke(app, ["replay", COUNTER, "-l", log_path, "--until", "1", "-s", "--json"])

    assert json.loads(result.output)["state"] == 11


def test_replay_rich_output(tmp_path):
    log_path = str(tmp_path / "actions.jsonl")
    runner.invoke(app, ["log", "append", COUNTER, "reset", "-l", log_path])

    result = runner.invoke(app, ["replay", COUNTER, "-l", log_path, "--select", "value"])

    assert result.exit_code == 0
    assert "Replayed 1 actions" in result.output
    assert "counter/reset" in result.output


def test_replay_missing_log(tmp_path):
    result = runner.invoke(app, ["replay", COUNTER, "--log", str(tmp_path / "missing.jsonl"), "--json"])

    assert result.exit_code == 2
    assert json.loads(result.output)["error"] == "Log file not found"


def test_replay_unknown_selector(tmp_path):
    log_path = str(tmp_path / "actions.jsonl")
    runner.invoke(app, ["log", "append", COUNTER, "reset", "-l", log_path])

    result = runner.invoke(app, ["replay", COUNTER, "-l", log_path, "--select", "nope", "--json"])

    assert result.exit_code == 2
    assert "nope" in json.loads(result.output)["error"]


def test_append_unknown_action(tmp_path):
    result = runner.invoke(app, ["log", "append", COUNTER, "decrement", "-l", str(tmp_path / "a.jsonl")])

    assert result.exit_code == 2
    assert "decrement" in result.output


def test_tail(tmp_path):
    log_path = str(tmp_path / "actions.jsonl")
    for payload in ("1", "2", "3"):
        runner.invoke(app, ["log", "append", COUNTER, "increment", "-p", payload, "-l", log_path])

    result = runner.invoke(app, ["log", "tail", "-l", log_path, "-n", "2", "--json"])

    assert result.exit_code == 0
    out = json.loads(result.output)
    assert out["count"] == 2
    assert [a["payload"] for a in out["actions"]] == [2, 3]
    assert out["actions"][0]["seq"] == 1


def test_append_creator_error(tmp_path):
    log_path = str(tmp_path / "actions.jsonl")

    result = runner.invoke(app, ["log", "append", "slicekit.tests.fixtures:user", "rename", "-l", log_path, "--json"])

    assert result.exit_code == 2
    assert "name" in json.loads(result.output)["error"]


def test_replay_unserializable_state(tmp_path):
    log_path = str(tmp_path / "actions.jsonl")
    runner.invoke(app, ["log", "append", "slicekit.tests.fixtures:tags", "add", "-p", '"x"', "-l", log_path])

    result = runner.invoke(app, ["replay", "slicekit.tests.fixtures:tags", "-l", log_path, "--json"])

    assert result.exit_code == 2
    assert "error" in json.loads(result.output)


def test_replay_counts_only_replayed_window(tmp_path):
    log_path = str(tmp_path / "actions.jsonl")
    runner.invoke(app, ["log", "append", COUNTER, "reset", "-l", log_path])
    for payload in ("1", "2"):
        runner.invoke(app, ["log", "append", COUNTER, "increment", "-p", payload, "-l", log_path])

    result = runner.invoke(app, ["replay", COUNTER, "-l", log_path, "--until", "0", "--json"])

    out = json.loads(result.output)
    assert out["actions_replayed"] == 1
    assert out["action_counts"] == {"counter/reset": 1}
