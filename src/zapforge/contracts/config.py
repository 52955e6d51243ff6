"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from zapforge.contracts.package_manager import LOCK_FILES, TEMPLATE_MANIFEST_FIELDS

DEFAULT_TEMPLATE_URL = "https://api.github.com/repos/alexandretrotel/zap.ts/tarball/main"


class ScaffoldConfig(BaseModel):
    """Settings for one scaffolding run.

    Attributes:
        template_url: HTTPS URL of a gzip tarball with a single wrapper directory.
        nested_dir: Folder inside the template holding the canonical project files.
        staging_dir: Scratch folder under the target used during reconciliation.
        archive_name: File name the downloaded tarball is stored under.
        marker_files: Files whose presence means the target is already scaffolded.
        lock_files: Lock files removed after reconciliation.
        manifest_name: Project metadata file patched after reconciliation.
        manifest_strip_fields: Top-level manifest keys removed by the patcher.
        timeout: Network timeout in seconds for the archive download.
    """

    template_url: str = DEFAULT_TEMPLATE_URL
    nested_dir: str = "core"
    staging_dir: str = "temp"
    archive_name: str = "template.tar.gz"
    marker_files: tuple[str, ...] = ("zap.config.ts", "package.json")
    lock_files: tuple[str, ...] = LOCK_FILES
    manifest_name: str = "package.json"
    manifest_strip_fields: tuple[str, ...] = TEMPLATE_MANIFEST_FIELDS
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}

    @field_validator("nested_dir", "staging_dir", "archive_name", "manifest_name")
    @classmethod
    def validate_plain_name(cls, value: str) -> str:
        name = value.strip()
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            raise ValueError(f"must be a plain file or folder name, got {value!r}")
        return name

    @field_validator("template_url")
    @classmethod
    def validate_template_url(cls, value: str) -> str:
        if not value.startswith(("https://", "http://")):
            raise ValueError("template_url must be an http(s) URL")
        return value

    @model_validator(mode="after")
    def validate_distinct_dirs(self) -> ScaffoldConfig:
        if self.nested_dir == self.staging_dir:
            raise ValueError("nested_dir and staging_dir must differ")
        return self
