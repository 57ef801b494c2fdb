"""Tests for the active-account tracker."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gitshift.core.exceptions import CorruptStoreError, NotFoundError
from gitshift.identity.activation import ActivationTracker
from gitshift.identity.store import AccountStore


@pytest.fixture
def tracker(tmp_path: Path) -> ActivationTracker:
    store = AccountStore(tmp_path / "config.json")
    store.accounts_file.write_text(
        json.dumps(
            [
                {"name": n, "ssh_key_path": str(tmp_path / f"{n}_id"), "email": f"{n}@x", "public_key": "k"}
                for n in ("alice", "bob")
            ]
        )
    )
    return ActivationTracker(tmp_path / "state.json", store)


class TestActivationTracker:
    def test_nothing_active_without_file(self, tracker):
        assert tracker.get() is None

    def test_set_and_get(self, tracker):
        tracker.set("alice")
        assert tracker.get() == "alice"
        assert json.loads(tracker.state_file.read_text()) == "alice"

    def test_switching_replaces_previous(self, tracker):
        tracker.set("alice")
        tracker.set("bob")
        assert tracker.get() == "bob"

    def test_set_unknown_leaves_state(self, tracker):
        tracker.set("alice")
        with pytest.raises(NotFoundError) as exc_info:
            tracker.set("carol")
        assert exc_info.value.message == "Account 'carol' not found"
        assert tracker.get() == "alice"

    def test_set_unknown_creates_no_file(self, tracker):
        with pytest.raises(NotFoundError):
            tracker.set("carol")
        assert not tracker.state_file.exists()

    def test_clear_writes_null(self, tracker):
        tracker.set("alice")
        tracker.clear()
        assert tracker.get() is None
        assert tracker.state_file.read_text().strip() == "null"

    def test_explicit_null_file(self, tracker):
        tracker.state_file.write_text("null")
        assert tracker.get() is None

    @pytest.mark.parametrize("content", ["{broken", "42", '["alice"]'])
    def test_corrupt_state(self, tracker, content):
        tracker.state_file.write_text(content)
        with pytest.raises(CorruptStoreError) as exc_info:
            tracker.get()
        assert "state.json" in exc_info.value.message

    def test_reads_fresh_each_time(self, tracker):
        tracker.set("alice")
        tracker.state_file.write_text('"bob"')
        assert tracker.get() == "bob"
