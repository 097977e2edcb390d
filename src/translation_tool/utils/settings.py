"""Settings persistence for the translation tool.

Reads the optional JSON settings file that overrides the default document
and backup locations. Defaults are provided for every key.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

SETTINGS_FILENAME = "translation_tool.json"

ENV_DOCUMENT = "TRANSLATION_TOOL_DOCUMENT"
ENV_BACKUP_DIR = "TRANSLATION_TOOL_BACKUP_DIR"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "document_path": "lhc_web/translations/zh_CN/translation.ts",
    "backup_dir": "translation_backups",
    "backup_prefix": "translation_",
    "backup_extension": "",
}


def load_settings(settings_path: Optional[Path | str] = None) -> Dict[str, Any]:
    """Return stored settings merged with defaults.

    Args:
        settings_path: JSON file to read; defaults to ``translation_tool.json``
            in the working directory.

    Returns:
        A dictionary containing every key of DEFAULT_SETTINGS. Unknown keys
        in the file are ignored; a missing, unreadable or non-object file
        yields the defaults.
    """
    result = DEFAULT_SETTINGS.copy()
    path = Path(settings_path) if settings_path else Path.cwd() / SETTINGS_FILENAME
    if not path.exists():
        return result

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return result

    if not isinstance(data, dict):
        return result

    for key in DEFAULT_SETTINGS:
        value = data.get(key)
        if isinstance(value, str):
            result[key] = value
    return result


def apply_environment(
    settings: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """Overlay environment variables on top of loaded settings.

    Args:
        settings: Settings produced by load_settings.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        A new dictionary with TRANSLATION_TOOL_* values applied.
    """
    env = os.environ if environ is None else environ
    result = dict(settings)
    if env.get(ENV_DOCUMENT):
        result["document_path"] = env[ENV_DOCUMENT]
    if env.get(ENV_BACKUP_DIR):
        result["backup_dir"] = env[ENV_BACKUP_DIR]
    return result


__all__ = [
    "DEFAULT_SETTINGS",
    "ENV_BACKUP_DIR",
    "ENV_DOCUMENT",
    "SETTINGS_FILENAME",
    "apply_environment",
    "load_settings",
]
