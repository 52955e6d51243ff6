"""Progress reporting protocol for the scaffolding pipeline.

The orchestrator emits one phase per stage; consumers (e.g. the CLI's Rich
spinner) implement ``ScaffoldProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ScaffoldProgress(ABC):
    """Observer interface for scaffolding lifecycle events."""

    @abstractmethod
    def phase_start(self, phase: str) -> None:
        """A pipeline stage is starting."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """The stage finished successfully."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The stage was interrupted by *error* (including user cancellation)."""
        ...  # pragma: no cover


class NullScaffoldProgress(ScaffoldProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
