"""JSON reporter emitting the structured case listing."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, Dict, Optional, Sequence

import click
from jsonschema import validate

from suiteload.core import TestCase

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes the listing to a file (or stdout) validated against the schema."""

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = pathlib.Path(path) if path else None

    def report(self, cases: Sequence[TestCase]) -> None:
        payload = build_payload(cases)
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        text = json.dumps(payload, indent=2)
        if self._path is None:
            click.echo(text)
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def build_payload(cases: Sequence[TestCase]) -> Dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
        "summary": {
            "total": len(cases),
            "files": len({case.path for case in cases}),
            "with_skip": sum(1 for case in cases if case.skip is not None),
        },
        "cases": [_case_to_dict(case) for case in cases],
    }


def _case_to_dict(case: TestCase) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "name": case.name,
        "description": case.description,
        "path": str(case.path),
        "has_skip": case.skip is not None,
    }
    if case.options:
        record["options"] = _jsonify(dict(case.options))
    return record


def _jsonify(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _jsonify(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonify(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)
