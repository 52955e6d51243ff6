from __future__ import annotations

from pathlib import Path

import pytest

from zapforge.contracts.errors import ErrorKind, ScaffoldError
from zapforge.core.naming import resolve_target, validate_project_name


@pytest.mark.parametrize("name", ["my-zap-app", "App_2", "x", " padded "])
def test_valid_names(name: str) -> None:
    assert validate_project_name(name) == name.strip()


@pytest.mark.parametrize("name", ["", "has space", "dots.are.bad", "../escape", "slash/name", "émoji"])
def test_invalid_names(name: str) -> None:
    with pytest.raises(ScaffoldError) as exc_info:
        validate_project_name(name)

    assert exc_info.value.kind == ErrorKind.VALIDATION


def test_resolve_target_uses_directory(tmp_path: Path) -> None:
    assert resolve_target("app", tmp_path) == (tmp_path / "app").resolve()


def test_resolve_target_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert resolve_target("app") == (tmp_path / "app").resolve()
