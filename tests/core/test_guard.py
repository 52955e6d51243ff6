"""Tests for PathGuard target classification."""

from __future__ import annotations

from pathlib import Path

import pytest

from zapforge.contracts.errors import ErrorKind
from zapforge.contracts.state import ScaffoldStage, TargetState
from zapforge.core import guard as guard_module
from zapforge.core.guard import PathGuard


@pytest.fixture
def guard() -> PathGuard:
    return PathGuard(marker_files=("zap.config.ts", "package.json"))


def test_absent_target_with_writable_parent_is_ok(tmp_path: Path, guard: PathGuard) -> None:
    outcome = guard.check(tmp_path / "app")

    assert outcome.ok
    assert outcome.state == TargetState.ABSENT


def test_empty_directory_is_ok(tmp_path: Path, guard: PathGuard) -> None:
    target = tmp_path / "app"
    target.mkdir()

    outcome = guard.check(target)

    assert outcome.ok
    assert outcome.state == TargetState.EMPTY


def test_directory_with_foreign_files_is_classified_but_not_rejected(tmp_path: Path, guard: PathGuard) -> None:
    target = tmp_path / "app"
    target.mkdir()
    (target / "notes.txt").write_text("mine")

    outcome = guard.check(target)

    assert outcome.ok
    assert outcome.state == TargetState.OCCUPIED_FOREIGN


@pytest.mark.parametrize("marker", ["zap.config.ts", "package.json"])
def test_marker_file_means_already_scaffolded(tmp_path: Path, guard: PathGuard, marker: str) -> None:
    target = tmp_path / "app"
    target.mkdir()
    (target / marker).write_text("{}")

    outcome = guard.check(target)

    assert not outcome.ok
    assert outcome.state == TargetState.OCCUPIED_SCAFFOLD
    assert outcome.failure is not None
    assert outcome.failure.kind == ErrorKind.ALREADY_SCAFFOLDED
    assert outcome.failure.stage == ScaffoldStage.GUARD
    assert marker in outcome.failure.message


def test_missing_parent_is_a_permission_failure(tmp_path: Path, guard: PathGuard) -> None:
    outcome = guard.check(tmp_path / "missing" / "app")

    assert outcome.failure is not None
    assert outcome.failure.kind == ErrorKind.PERMISSION
    assert "does not exist" in outcome.failure.message


def test_file_in_place_of_directory_is_rejected(tmp_path: Path, guard: PathGuard) -> None:
    target = tmp_path / "app"
    target.write_text("not a dir")

    outcome = guard.check(target)

    assert outcome.failure is not None
    assert outcome.failure.kind == ErrorKind.PERMISSION
    assert "not a directory" in outcome.failure.message


def test_unwritable_parent_is_rejected(tmp_path: Path, guard: PathGuard, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(guard_module.os, "access", lambda path, mode: False)

    outcome = guard.check(tmp_path / "app")

    assert outcome.failure is not None
    assert outcome.failure.kind == ErrorKind.PERMISSION
    assert "not writable" in outcome.failure.message


def test_unwritable_existing_directory_is_rejected(
    tmp_path: Path, guard: PathGuard, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "app"
    target.mkdir()
    monkeypatch.setattr(guard_module.os, "access", lambda path, mode: False)

    outcome = guard.check(target)

    assert outcome.state == TargetState.EMPTY
    assert outcome.failure is not None
    assert outcome.failure.kind == ErrorKind.PERMISSION


def test_check_does_not_modify_the_filesystem(tmp_path: Path, guard: PathGuard) -> None:
    guard.check(tmp_path / "app")

    assert list(tmp_path.iterdir()) == []
