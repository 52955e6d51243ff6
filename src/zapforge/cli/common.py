"""Shared CLI formatting helpers and exit codes."""

from __future__ import annotations

import shlex
from pathlib import Path

from zapforge.contracts.errors import ErrorKind, ScaffoldFailure
from zapforge.contracts.package_manager import PackageManager
from zapforge.contracts.results import ScaffoldResult

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_PRECONDITION = 3
EXIT_NETWORK = 4
EXIT_PIPELINE = 5
EXIT_CANCELLED = 130

_EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: EXIT_USAGE,
    ErrorKind.CONFIG: EXIT_USAGE,
    ErrorKind.ALREADY_SCAFFOLDED: EXIT_PRECONDITION,
    ErrorKind.PERMISSION: EXIT_PRECONDITION,
    ErrorKind.TARGET_OCCUPIED: EXIT_PRECONDITION,
    ErrorKind.NETWORK: EXIT_NETWORK,
    ErrorKind.EXTRACTION: EXIT_PIPELINE,
    ErrorKind.RECONCILIATION: EXIT_PIPELINE,
    ErrorKind.MANIFEST: EXIT_PIPELINE,
    ErrorKind.PROMPT: EXIT_ERROR,
}


def exit_code_for(failure: ScaffoldFailure) -> int:
    return _EXIT_CODES.get(failure.kind, EXIT_ERROR)


def format_rollback_note(result: ScaffoldResult) -> str | None:
    if result.rolled_back:
        return f"Removed {result.project_path}; nothing was left behind."
    if result.created_target:
        return f"Could not remove {result.project_path}; delete it manually before retrying."
    if result.project_path.exists():
        return f"Left {result.project_path} in place because it existed before this run."
    return None


def _cd_hint(project_path: Path) -> str:
    try:
        shown = project_path.relative_to(Path.cwd().resolve())
    except ValueError:
        shown = project_path
    return shlex.quote(str(shown))


def format_create_summary(result: ScaffoldResult) -> str:
    package_manager = result.package_manager or PackageManager.NPM
    file_count = len(result.files_written)
    lines = [
        "",
        "zapforge - project created",
        "",
        f"  Project:   {result.project_path}",
        f"  Files:     {file_count} file{'s' if file_count != 1 else ''}",
        f"  Manager:   {package_manager.value}",
        "",
        "Next steps:",
        f"  cd {_cd_hint(result.project_path)}",
        f"  {package_manager.value} install",
        f"  {package_manager.value} run dev",
        "",
    ]
    return "\n".join(lines)
