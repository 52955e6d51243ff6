"""Tests for ManifestPatcher."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from zapforge.contracts.errors import ErrorKind, ScaffoldError
from zapforge.core.manifest import ManifestPatcher


def _write_manifest(root: Path, text: str) -> Path:
    path = root / "package.json"
    path.write_text(text, encoding="utf-8")
    return path


def test_package_manager_field_is_removed(tmp_path: Path) -> None:
    path = _write_manifest(
        tmp_path, json.dumps({"private": True, "packageManager": "bun@1.1.0", "scripts": {"dev": "next dev"}})
    )

    assert ManifestPatcher().patch(tmp_path) is True

    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == {"private": True, "scripts": {"dev": "next dev"}}
    assert text == '{\n  "private": true,\n  "scripts": {\n    "dev": "next dev"\n  }\n}\n'


def test_key_order_and_unicode_are_preserved(tmp_path: Path) -> None:
    path = _write_manifest(tmp_path, '{"z": 1, "packageManager": "npm@10", "version": "café", "a": 2}')

    ManifestPatcher().patch(tmp_path)

    text = path.read_text(encoding="utf-8")
    assert list(json.loads(text)) == ["z", "version", "a"]
    assert "café" in text


def test_manifest_without_field_is_left_untouched(tmp_path: Path) -> None:
    original = '{"private":true}'
    path = _write_manifest(tmp_path, original)

    assert ManifestPatcher().patch(tmp_path) is False
    assert path.read_text(encoding="utf-8") == original


def test_missing_manifest_is_a_no_op(tmp_path: Path) -> None:
    assert ManifestPatcher().patch(tmp_path) is False
    assert not (tmp_path / "package.json").exists()


def test_template_metadata_is_removed(tmp_path: Path) -> None:
    path = _write_manifest(
        tmp_path,
        json.dumps(
            {
                "name": "zap.ts",
                "version": "0.1.0",
                "description": "starter kit",
                "author": "Template Author",
                "license": "MIT",
                "repository": {"type": "git", "url": "https://example.test/zap.git"},
                "homepage": "https://example.test",
                "bugs": {"url": "https://example.test/issues"},
                "keywords": ["starter"],
                "packageManager": "bun@1.1.0",
                "dependencies": {"next": "15.0.0"},
            }
        ),
    )

    assert ManifestPatcher().patch(tmp_path) is True

    assert json.loads(path.read_text(encoding="utf-8")) == {"version": "0.1.0", "dependencies": {"next": "15.0.0"}}


def test_configured_fields_are_stripped(tmp_path: Path) -> None:
    path = _write_manifest(tmp_path, json.dumps({"name": "app", "private": True, "engines": {"node": ">=20"}}))

    ManifestPatcher(strip_fields=("private", "engines")).patch(tmp_path)

    assert json.loads(path.read_text(encoding="utf-8")) == {"name": "app"}


def test_invalid_json_is_a_manifest_error(tmp_path: Path) -> None:
    _write_manifest(tmp_path, "{not json")

    with pytest.raises(ScaffoldError) as exc_info:
        ManifestPatcher().patch(tmp_path)

    assert exc_info.value.kind == ErrorKind.MANIFEST
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


def test_non_object_manifest_is_a_manifest_error(tmp_path: Path) -> None:
    _write_manifest(tmp_path, "[1, 2, 3]")

    with pytest.raises(ScaffoldError) as exc_info:
        ManifestPatcher().patch(tmp_path)

    assert exc_info.value.kind == ErrorKind.MANIFEST
    assert "JSON object" in str(exc_info.value)


def test_non_utf8_manifest_is_a_manifest_error(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_bytes(b'{"name": "\xff"}')

    with pytest.raises(ScaffoldError) as exc_info:
        ManifestPatcher().patch(tmp_path)

    assert exc_info.value.kind == ErrorKind.MANIFEST
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
