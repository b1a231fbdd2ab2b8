"""JSON schema definition for case listings."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "suiteload case listing",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["total", "files", "with_skip"],
            "properties": {
                "total": {"type": "integer"},
                "files": {"type": "integer"},
                "with_skip": {"type": "integer"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "description", "path", "has_skip"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "description": {"type": "string"},
                    "path": {"type": "string"},
                    "has_skip": {"type": "boolean"},
                    "options": {"type": "object"},
                },
            },
        },
    },
}
