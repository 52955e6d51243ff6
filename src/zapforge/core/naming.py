"""Project name validation and target path resolution."""

from __future__ import annotations

import re
from pathlib import Path

from zapforge.contracts.errors import ErrorKind, ScaffoldError

PROJECT_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")
DEFAULT_PROJECT_NAME = "my-zap-app"


def validate_project_name(name: str) -> str:
    """Return *name* stripped, or raise a ``validation`` :class:`ScaffoldError`."""
    candidate = name.strip()
    if not PROJECT_NAME_RE.match(candidate):
        raise ScaffoldError(
            ErrorKind.VALIDATION,
            f"invalid project name {name!r}: use only letters, numbers, hyphens, and underscores",
        )
    return candidate


def resolve_target(name: str, directory: str | Path | None = None) -> Path:
    base = Path(directory).expanduser() if directory is not None else Path.cwd()
    return (base / name).resolve()
