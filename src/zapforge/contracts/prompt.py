"""Contracts for interactive collaborators injected into the pipeline."""

from __future__ import annotations

from typing import Protocol

from zapforge.contracts.results import PromptOutcome


class PackageManagerPrompt(Protocol):
    def select(self) -> PromptOutcome: ...
