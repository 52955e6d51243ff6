"""Post-merge rewriting of the project's package manifest."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from zapforge.contracts.errors import ErrorKind, ScaffoldError
from zapforge.contracts.package_manager import TEMPLATE_MANIFEST_FIELDS

logger = logging.getLogger(__name__)


class ManifestPatcher:
    """Remove template metadata and the pinned ``packageManager`` from ``package.json``.

    Absent file or absent fields are a no-op; the file is only rewritten when
    something was removed, using two-space indentation and a trailing newline.
    """

    def __init__(
        self,
        *,
        manifest_name: str = "package.json",
        strip_fields: Iterable[str] = TEMPLATE_MANIFEST_FIELDS,
    ) -> None:
        self._manifest_name = manifest_name
        self._strip_fields = tuple(strip_fields)

    def patch(self, target: Path) -> bool:
        path = Path(target) / self._manifest_name
        if not path.is_file():
            logger.debug("no %s in %s; nothing to patch", self._manifest_name, target)
            return False

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ScaffoldError(ErrorKind.MANIFEST, f"cannot read {path}: {exc}", path=path) from exc
        except UnicodeDecodeError as exc:
            raise ScaffoldError(ErrorKind.MANIFEST, f"{path} is not valid UTF-8: {exc}", path=path) from exc
        except json.JSONDecodeError as exc:
            raise ScaffoldError(ErrorKind.MANIFEST, f"invalid JSON in {path}: {exc}", path=path) from exc
        if not isinstance(payload, dict):
            raise ScaffoldError(ErrorKind.MANIFEST, f"{path} must contain a JSON object", path=path)

        removed = [field for field in self._strip_fields if field in payload]
        if not removed:
            return False
        for field in removed:
            del payload[field]

        try:
            path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        except OSError as exc:
            raise ScaffoldError(ErrorKind.MANIFEST, f"cannot write {path}: {exc}", path=path) from exc
        logger.debug("removed %s from %s", ", ".join(removed), path)
        return True
