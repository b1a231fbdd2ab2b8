"""Loader configuration combining CLI options and an optional YAML file."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from suiteload.core import ModuleFormat
from suiteload.discovery import DEFAULT_PATTERN

from .models import ConfigOptions, LoaderConfig

CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "root_dir": {"type": "string", "minLength": 1},
        "pattern": {"type": "string", "minLength": 1},
        "filter": {"type": ["string", "null"]},
        "filter_body": {"type": ["string", "null"]},
        "module_type": {"enum": [fmt.value for fmt in ModuleFormat]},
    },
}
_validator = Draft7Validator(CONFIG_SCHEMA)


def build_loader_config(options: ConfigOptions) -> LoaderConfig:
    """Resolve a :class:`LoaderConfig`; command line values win over the file."""

    raw, base = _load_yaml(options.config_path)
    if options.root_dir:
        root_dir = Path(options.root_dir).expanduser().resolve()
    elif raw.get("root_dir"):
        root_dir = (base / Path(raw["root_dir"]).expanduser()).resolve()
    else:
        root_dir = Path.cwd()
    pattern = options.pattern or raw.get("pattern") or DEFAULT_PATTERN
    name_filter = _regex(options.filter or raw.get("filter"), "filter")
    body_filter = _regex(options.filter_body or raw.get("filter_body"), "filter_body")
    module_type = ModuleFormat(options.module_type or raw.get("module_type") or ModuleFormat.LEGACY)
    return LoaderConfig(
        root_dir=root_dir,
        pattern=pattern,
        filter=name_filter,
        filter_body=body_filter,
        module_type=module_type,
    )


def _load_yaml(path: Optional[str]) -> tuple[Mapping[str, Any], Path]:
    if not path:
        return {}, Path.cwd()
    config_path = Path(path).expanduser().resolve()
    data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if data is None:
        return {}, config_path.parent
    if not isinstance(data, Mapping):
        raise ValueError("Config file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Config schema validation failed: {messages}")
    return data, config_path.parent


def _regex(value: Optional[str], key: str) -> Optional[str]:
    if not value:
        return None
    try:
        re.compile(value)
    except re.error as exc:
        raise ValueError(f"Invalid regular expression for '{key}': {exc}") from exc
    return value
