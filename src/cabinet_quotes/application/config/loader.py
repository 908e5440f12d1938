"""Quote document loader with error reporting.

Loads stored quote JSON documents and turns file system errors, JSON parsing
errors and Pydantic validation errors into QuoteFileError with readable
messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinet_quotes.application.config.schema import QuoteDocument
from cabinet_quotes.contracts.errors import QuoteFileError


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("spaces", 0, "items", 2, "price"))
        'spaces[0].items[2].price'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _describe_location(data: Any, loc: tuple[str | int, ...]) -> str | None:
    """Name the space and item an error location points into.

    Spaces are named by their label (or id when unnamed) and items by id,
    so "spaces[1].items[0].price" reads as "space 'Pantry', item 'i-7'".
    """
    labels: list[str] = []
    node = data
    collection: str | int | None = None
    for segment in loc:
        if isinstance(segment, int) and isinstance(node, list) and segment < len(node):
            node = node[segment]
            if isinstance(node, dict):
                if collection == "spaces":
                    labels.append(f"space {node.get('name') or node.get('id')!r}")
                elif collection == "items":
                    labels.append(f"item {node.get('id')!r}")
        elif isinstance(segment, str) and isinstance(node, dict):
            node = node.get(segment)
        else:
            break
        collection = segment
    return ", ".join(labels) or None


def _extract_validation_errors(
    error: PydanticValidationError, data: Any
) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "context": _describe_location(data, err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = [f"Quote document has {len(details)} invalid value(s):"]
    for detail in details:
        where = detail["path"] or "<document>"
        if detail.get("context"):
            where = f"{where} ({detail['context']})"
        value = detail.get("value")
        got = ""
        if value is not None and not isinstance(value, (dict, list)):
            got = f" (got: {value!r})"
        lines.append(f"  - {where}: {detail['message']}{got}")
    return "\n".join(lines)


def load_quote_document(path: Path) -> QuoteDocument:
    """Load and validate a quote document from a JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        A validated QuoteDocument

    Raises:
        QuoteFileError: If the file cannot be read or validated. error_type is
            one of "file_not_found", "permission_denied", "file_read_error",
            "json_parse" or "validation".
    """
    if not path.exists():
        raise QuoteFileError(
            message=f"Quote file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise QuoteFileError(
            message=f"Permission denied reading quote file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise QuoteFileError(
            message=f"Error reading quote file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise QuoteFileError(
            message=f"Invalid JSON in quote file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    try:
        return QuoteDocument.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e, data)
        raise QuoteFileError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_quote_document_from_dict(data: dict[str, Any]) -> QuoteDocument:
    """Validate a quote document held in memory (e.g. an API payload).

    Raises:
        QuoteFileError: If the data fails validation.
    """
    try:
        return QuoteDocument.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e, data)
        raise QuoteFileError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )
