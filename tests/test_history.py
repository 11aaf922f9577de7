# tests/test_history.py

import datetime

import pytest

from core.history import HistoryManager, HistorySnapshot

FIXED_NOW = datetime.datetime(2025, 9, 1, 8, 30)


def test_snapshot_does_not_alias_live_records(sample_student):
    live = [sample_student]
    snapshot = HistorySnapshot.capture("Added student: Ann Lee", live, FIXED_NOW)

    sample_student.scores = [0]
    sample_student.name = "Changed Name"

    assert snapshot.records[0].scores == [90, 80, 70]
    assert snapshot.records[0].name == "Ann Lee"


def test_snapshot_restore_returns_fresh_copies(sample_student):
    snapshot = HistorySnapshot.capture("Added student: Ann Lee", [sample_student], FIXED_NOW)

    restored = snapshot.restore()
    restored[0].scores = [1]

    assert snapshot.restore()[0].scores == [90, 80, 70]
    assert restored[0] is not snapshot.records[0]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        HistoryManager(capacity=0)


def test_record_evicts_oldest_beyond_capacity():
    history = HistoryManager(capacity=2)

    for label in ("first", "second", "third"):
        history.record(HistorySnapshot.capture(label, [], FIXED_NOW))

    assert history.undo_labels() == ["second", "third"]
    assert history.undo_depth == 2


def test_record_clears_redo():
    history = HistoryManager()
    history.record(HistorySnapshot.capture("first", [], FIXED_NOW))
    history.pop_undo([], FIXED_NOW)
    assert history.can_redo

    history.record(HistorySnapshot.capture("second", [], FIXED_NOW))
    assert not history.can_redo


def test_pop_undo_on_empty_stack_leaves_state_unchanged():
    history = HistoryManager()

    assert history.pop_undo([], FIXED_NOW) is None
    assert not history.can_undo
    assert not history.can_redo


def test_pop_undo_moves_current_to_redo(sample_student):
    history = HistoryManager()
    history.record(HistorySnapshot.capture("Added student: Ann Lee", [], FIXED_NOW))

    previous = history.pop_undo([sample_student], FIXED_NOW)

    assert previous.action == "Added student: Ann Lee"
    assert previous.records == ()
    assert history.redo_labels() == ["Added student: Ann Lee"]
    assert not history.can_undo


def test_pop_redo_moves_current_back_to_undo(sample_student):
    history = HistoryManager()
    history.record(HistorySnapshot.capture("Added student: Ann Lee", [], FIXED_NOW))
    history.pop_undo([sample_student], FIXED_NOW)

    following = history.pop_redo([], FIXED_NOW)

    assert following.action == "Added student: Ann Lee"
    assert [s.name for s in following.records] == ["Ann Lee"]
    assert history.undo_labels() == ["Added student: Ann Lee"]
    assert not history.can_redo


def test_pop_redo_keeps_remaining_redo_states():
    history = HistoryManager()
    history.record(HistorySnapshot.capture("first", [], FIXED_NOW))
    history.record(HistorySnapshot.capture("second", [], FIXED_NOW))
    history.pop_undo([], FIXED_NOW)
    history.pop_undo([], FIXED_NOW)

    history.pop_redo([], FIXED_NOW)

    assert history.redo_labels() == ["second"]
    assert history.undo_labels() == ["first"]


def test_clear():
    history = HistoryManager()
    history.record(HistorySnapshot.capture("first", [], FIXED_NOW))
    history.record(HistorySnapshot.capture("second", [], FIXED_NOW))
    history.pop_undo([], FIXED_NOW)

    history.clear()

    assert not history.can_undo
    assert not history.can_redo
