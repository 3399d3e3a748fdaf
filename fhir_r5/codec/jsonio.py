"""
JSON reading and writing with exact number lexicals.

Numbers are decoded to ``JsonNumber`` (the source token) rather than
``int``/``float`` so that ``1.200`` stays ``1.200``, and the writer
emits ``JsonNumber`` values verbatim.
"""

import json
from typing import Any

from fhir_r5.constants import ROOT_PATH, UTF8_BOM
from fhir_r5.errors import StructuralError
from fhir_r5.models.primitives import JsonNumber


def _unique_object(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise StructuralError(ROOT_PATH, f"duplicate JSON key '{key}'", details={"key": key})
        result[key] = value
    return result


def _reject_constant(name: str) -> Any:
    raise StructuralError(ROOT_PATH, f"'{name}' is not a valid JSON number")


def loads(data: bytes | str, *, max_bytes: int | None = None) -> Any:
    """
    Decode a FHIR JSON document.

    Args:
        data: UTF-8 bytes or an already-decoded string
        max_bytes: Reject documents larger than this many bytes

    Returns:
        The JSON tree, with numbers as ``JsonNumber``

    Raises:
        StructuralError: On a BOM, invalid UTF-8, invalid JSON, duplicate
            keys, NaN/Infinity, or an oversized document
    """
    if isinstance(data, str):
        if data.startswith("\ufeff"):
            raise StructuralError(ROOT_PATH, "byte order mark is not allowed")
        size = len(data.encode("utf-8", errors="surrogatepass"))
        text = data
    else:
        if bytes(data[:3]) == UTF8_BOM:
            raise StructuralError(ROOT_PATH, "byte order mark is not allowed")
        size = len(data)
        text = None

    if max_bytes is not None and size > max_bytes:
        raise StructuralError(
            ROOT_PATH,
            f"document of {size} bytes exceeds the limit of {max_bytes} bytes",
            details={"size": size, "max_bytes": max_bytes},
        )

    if text is None:
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise StructuralError(ROOT_PATH, f"document is not valid UTF-8: {e.reason}") from e

    try:
        return json.loads(
            text,
            parse_float=JsonNumber,
            parse_int=JsonNumber,
            parse_constant=_reject_constant,
            object_pairs_hook=_unique_object,
        )
    except json.JSONDecodeError as e:
        raise StructuralError(
            ROOT_PATH,
            f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            details={"line": e.lineno, "column": e.colno},
        ) from e


def _scalar(value: Any) -> str:
    if isinstance(value, JsonNumber):
        return str(value)
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return json.dumps(value, allow_nan=False)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _write(value: Any, parts: list[str], indent: int | None, depth: int) -> None:
    if isinstance(value, dict):
        if not value:
            parts.append("{}")
            return
        parts.append("{")
        for i, (key, item) in enumerate(value.items()):
            if i:
                parts.append(",")
            if indent is not None:
                parts.append("\n" + " " * (indent * (depth + 1)))
            parts.append(json.dumps(key, ensure_ascii=False))
            parts.append(": " if indent is not None else ":")
            _write(item, parts, indent, depth + 1)
        if indent is not None:
            parts.append("\n" + " " * (indent * depth))
        parts.append("}")
    elif isinstance(value, list):
        if not value:
            parts.append("[]")
            return
        parts.append("[")
        for i, item in enumerate(value):
            if i:
                parts.append(",")
            if indent is not None:
                parts.append("\n" + " " * (indent * (depth + 1)))
            _write(item, parts, indent, depth + 1)
        if indent is not None:
            parts.append("\n" + " " * (indent * depth))
        parts.append("]")
    else:
        parts.append(_scalar(value))


def dumps(value: Any, *, indent: int | None = None) -> str:
    """
    Encode a JSON tree, writing ``JsonNumber`` tokens verbatim.

    Args:
        value: Tree of dicts, lists and scalars
        indent: Pretty-print with this many spaces per level; compact when None
    """
    parts: list[str] = []
    _write(value, parts, indent, 0)
    return "".join(parts)
