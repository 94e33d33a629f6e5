"""Serialize a generated document."""

import json

import yaml

from route_swagger.errors import UnsupportedFormatError

FORMATS = ("json", "yaml")


def format_document(docs: dict, fmt: str = "json") -> str:
    """Render a document tree as JSON or YAML text."""
    fmt = fmt.lower()
    if fmt == "json":
        return json.dumps(docs, indent=2, ensure_ascii=False)
    if fmt == "yaml":
        return yaml.safe_dump(docs, sort_keys=False, allow_unicode=True)
    raise UnsupportedFormatError(f"Invalid format '{fmt}', expected one of: {', '.join(FORMATS)}")
