"""Package managers a scaffolded project can be set up with."""

from __future__ import annotations

from enum import StrEnum


class PackageManager(StrEnum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


# Lock files shipped by the template source; the new project has not chosen a
# package manager yet, so none of these may survive reconciliation.
LOCK_FILES: tuple[str, ...] = (
    "package-lock.json",
    "npm-shrinkwrap.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lockb",
    "bun.lock",
)

# package.json keys that describe the template repository rather than the new
# project, plus the pinned package manager.
TEMPLATE_MANIFEST_FIELDS: tuple[str, ...] = (
    "packageManager",
    "name",
    "description",
    "author",
    "license",
    "repository",
    "homepage",
    "bugs",
    "keywords",
)
