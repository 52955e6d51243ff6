"""Shared test fixtures for zapforge tests."""

from __future__ import annotations

import io
import json
import tarfile
from collections.abc import Callable, Mapping
from pathlib import Path

import httpx
import pytest

TarEntries = Mapping[str, str | bytes | None]


def _build_tarball(entries: TarEntries) -> bytes:
    """Build a gzip tarball in memory. ``None`` values become directories."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        for name, content in entries.items():
            info = tarfile.TarInfo(name)
            if content is None:
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                tar.addfile(info)
                continue
            data = content.encode("utf-8") if isinstance(content, str) else content
            info.size = len(data)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


@pytest.fixture
def template_entries() -> dict[str, str | bytes | None]:
    """Snapshot of a template repo: one nested ``core/`` folder plus auxiliary folders."""
    return {
        "zap.ts-abc123": None,
        "zap.ts-abc123/core": None,
        "zap.ts-abc123/core/package.json": json.dumps(
            {"name": "zap", "packageManager": "bun@1.1.0", "scripts": {"dev": "next dev"}}, indent=2
        ),
        "zap.ts-abc123/core/src": None,
        "zap.ts-abc123/core/src/index.ts": "export {};\n",
        "zap.ts-abc123/examples": None,
        "zap.ts-abc123/examples/readme.md": "# examples\n",
        "zap.ts-abc123/README.md": "# monorepo readme\n",
    }


@pytest.fixture
def template_tarball(template_entries: dict[str, str | bytes | None]) -> bytes:
    return _build_tarball(template_entries)


@pytest.fixture
def client_factory() -> Callable[..., Callable[[], httpx.Client]]:
    """Return a builder of httpx client factories backed by ``httpx.MockTransport``."""

    def make(
        body: bytes = b"", *, status_code: int = 200, error: Exception | None = None
    ) -> Callable[[], httpx.Client]:
        def handler(request: httpx.Request) -> httpx.Response:
            if error is not None:
                raise error
            return httpx.Response(status_code, content=body)

        return lambda: httpx.Client(transport=httpx.MockTransport(handler))

    return make


def _write_tree(root: Path, entries: TarEntries) -> None:
    for name, content in entries.items():
        path = root / name
        if content is None:
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")


def _list_tree(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


@pytest.fixture
def make_tarball() -> Callable[[TarEntries], bytes]:
    return _build_tarball


@pytest.fixture
def write_tree() -> Callable[[Path, TarEntries], None]:
    return _write_tree


@pytest.fixture
def list_tree() -> Callable[[Path], set[str]]:
    return _list_tree
