from __future__ import annotations

from pathlib import Path

import pytest

from zapforge.contracts.errors import ErrorKind, ScaffoldError
from zapforge.core.config import load_config


def test_load_config_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "zapforge.json"
    path.write_text('{"template_url": "https://example.test/t.tar.gz", "lock_files": ["yarn.lock"]}', encoding="utf-8")

    config = load_config(path)

    assert config.template_url == "https://example.test/t.tar.gz"
    assert config.lock_files == ("yarn.lock",)
    assert config.nested_dir == "core"


@pytest.mark.parametrize(
    ("content", "message"),
    [
        (None, "failed reading config file"),
        ("{", "invalid JSON"),
        ('{"timeout": -1}', "invalid config"),
    ],
)
def test_load_config_errors(tmp_path: Path, content: str | None, message: str) -> None:
    path = tmp_path / "zapforge.json"
    if content is not None:
        path.write_text(content, encoding="utf-8")

    with pytest.raises(ScaffoldError, match=message) as exc_info:
        load_config(path)

    assert exc_info.value.kind == ErrorKind.CONFIG


def test_load_config_rejects_non_utf8(tmp_path: Path) -> None:
    path = tmp_path / "zapforge.json"
    path.write_bytes(b'{"nested_dir": "\xff"}')

    with pytest.raises(ScaffoldError, match="UTF-8") as exc_info:
        load_config(path)

    assert exc_info.value.kind == ErrorKind.CONFIG
