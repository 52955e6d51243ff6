"""Config loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from zapforge.contracts.config import ScaffoldConfig
from zapforge.contracts.errors import ErrorKind, ScaffoldError


def load_config(path: str | Path) -> ScaffoldConfig:
    """Load and validate a scaffold config from a JSON file."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return ScaffoldConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ScaffoldError(ErrorKind.CONFIG, f"failed reading config file: {config_path}", path=config_path) from exc
    except UnicodeDecodeError as exc:
        raise ScaffoldError(
            ErrorKind.CONFIG, f"config file is not valid UTF-8: {config_path}", path=config_path
        ) from exc
    except json.JSONDecodeError as exc:
        raise ScaffoldError(ErrorKind.CONFIG, f"invalid JSON in config file: {config_path}", path=config_path) from exc
    except ValidationError as exc:
        raise ScaffoldError(ErrorKind.CONFIG, f"invalid config: {exc}", path=config_path) from exc
