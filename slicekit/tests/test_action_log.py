"""
Tests for the JSONL action log.
"""

import pytest

from slicekit.core import Action, ActionLogError
from slicekit.log import ActionLog
from slicekit.replay import replay
from slicekit.tests.fixtures import counter


def test_append_and_read(tmp_path):
    log = ActionLog(str(tmp_path / "actions.jsonl"))

    assert log.append(counter.actions.increment(2)) == 0
    assert log.append({"type": "counter/reset"}) == 1

    assert list(log.read()) == [Action("counter/increment", 2), Action("counter/reset", None)]
    assert len(log) == 2


def test_read_from_seq(tmp_path):
    log = ActionLog(str(tmp_path / "actions.jsonl"))
    for n in range(4):
        log.append(counter.actions.increment(n))

    assert [a.payload for a in log.read(from_seq=2)] == [2, 3]


def test_lines_are_canonical(tmp_path):
    path = tmp_path / "actions.jsonl"
    ActionLog(str(path)).append(Action("user/update", {"b": 1, "a": 2}))

    assert path.read_text(encoding="utf-8") == '{"payload":{"a":2,"b":1},"type":"user/update"}\n'


def test_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "actions.jsonl"

    log = ActionLog(str(path))

    assert path.exists()
    assert len(log) == 0


def test_missing_log_without_create(tmp_path):
    with pytest.raises(FileNotFoundError):
        ActionLog(str(tmp_path / "missing.jsonl"), create=False)


def test_append_requires_type(tmp_path):
    log = ActionLog(str(tmp_path / "actions.jsonl"))

    with pytest.raises(ActionLogError):
        log.append({"payload": 1})


def test_append_rejects_unserializable_payload(tmp_path):
    log = ActionLog(str(tmp_path / "actions.jsonl"))

    with pytest.raises(ActionLogError):
        log.append(Action("x/y", object()))
    assert len(log) == 0


def test_malformed_lines(tmp_path):
    path = tmp_path / "actions.jsonl"
    path.write_text('{"type":"a/b"}\n\nnot json\n', encoding="utf-8")
    log = ActionLog(str(path))

    actions = log.read()
    assert next(actions) == Action("a/b")
    with pytest.raises(ActionLogError, match=":3:"):
        next(actions)


def test_non_action_records(tmp_path):
    path = tmp_path / "actions.jsonl"
    path.write_text('[1, 2]\n', encoding="utf-8")

    with pytest.raises(ActionLogError, match="not an action record"):
        list(ActionLog(str(path)).read())


def test_replay_from_log(tmp_path):
    log = ActionLog(str(tmp_path / "actions.jsonl"))
    for n in (1, 2, 3):
        log.append(counter.actions.increment(n))

    assert replay(counter.reducer, log.read()).state == 6


def test_sequence_numbers_across_writers(tmp_path):
    path = str(tmp_path / "actions.jsonl")
    first = ActionLog(path)
    second = ActionLog(path)

    assert first.append(counter.actions.increment(1)) == 0
    assert first.append(counter.actions.increment(2)) == 1
    assert second.append(counter.actions.increment(3)) == 2
    assert first.append(counter.actions.increment(4)) == 3
    assert [a.payload for a in first.read()] == [1, 2, 3, 4]


def test_sequence_numbers_after_log_is_replaced(tmp_path):
    path = tmp_path / "actions.jsonl"
    log = ActionLog(str(path))
    for n in range(3):
        log.append(counter.actions.increment(n))

    path.write_text("", encoding="utf-8")

    assert log.append(counter.actions.reset()) == 0
