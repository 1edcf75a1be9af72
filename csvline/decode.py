"""Decoding a single CSV line into typed Python values."""

from __future__ import annotations

import dataclasses
import re
import types
import typing
from collections import deque
from typing import Any, Optional, TypeVar, Union

from csvline.parse import _check_delimiter, iter_fields

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

_NAMED_TYPES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "Any": Any,
    "typing.Any": Any,
    "None": type(None),
    "NoneType": type(None),
    "list": list,
    "List": list,
    "typing.List": list,
    "tuple": tuple,
    "Tuple": tuple,
    "typing.Tuple": tuple,
}

_LIST_NAMES = {"list", "List", "typing.List"}
_TUPLE_NAMES = {"tuple", "Tuple", "typing.Tuple"}
_OPTIONAL_NAMES = {"Optional", "typing.Optional"}
_UNION_NAMES = {"Union", "typing.Union"}


class DecodeError(ValueError):
    """Raised when a line does not match the requested type."""


def _split_top_level(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator`` outside of square brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        if ch == separator and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    parts.append("".join(current).strip())
    return parts


def _parse_annotation(text: str) -> Any:
    """Turn a string annotation into a type, for the types decoding supports."""
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
        return _parse_annotation(text[1:-1])

    alternatives = _split_top_level(text, "|")
    if len(alternatives) > 1:
        return Union[tuple(_parse_annotation(alt) for alt in alternatives)]

    if text.endswith("]") and "[" in text:
        name, _, inner = text[:-1].partition("[")
        name = name.strip()
        args = [arg for arg in _split_top_level(inner, ",") if arg]
        if name in _LIST_NAMES and len(args) == 1:
            return list[_parse_annotation(args[0])]
        if name in _TUPLE_NAMES:
            if len(args) == 2 and args[1] == "...":
                return tuple[_parse_annotation(args[0]), ...]
            return tuple[tuple(_parse_annotation(arg) for arg in args)]
        if name in _OPTIONAL_NAMES and len(args) == 1:
            return Optional[_parse_annotation(args[0])]
        if name in _UNION_NAMES and args:
            return Union[tuple(_parse_annotation(arg) for arg in args)]
        raise TypeError(f"unsupported annotation: {text!r}")

    try:
        return _NAMED_TYPES[text]
    except KeyError:
        raise TypeError(f"unsupported annotation: {text!r}") from None


def _resolve(annotation: Any) -> Any:
    if isinstance(annotation, str):
        return _parse_annotation(annotation)
    return annotation


def _take(fields: deque[str], type_name: str) -> str:
    if not fields:
        raise DecodeError(f"unexpected end of row while decoding {type_name}")
    return fields.popleft()


def _decode_scalar(tp: type, fields: deque[str]) -> Any:
    if tp is str or tp is Any:
        return _take(fields, "str")
    if tp is bool:
        value = _take(fields, "bool")
        if value == "true":
            return True
        if value == "false":
            return False
        raise DecodeError(f"invalid bool: {value!r}")
    if tp is int:
        value = _take(fields, "int")
        if not _INT_RE.fullmatch(value):
            raise DecodeError(f"invalid int: {value!r}")
        return int(value)
    if tp is float:
        value = _take(fields, "float")
        if not _FLOAT_RE.fullmatch(value):
            raise DecodeError(f"invalid float: {value!r}")
        return float(value)
    raise TypeError(f"unsupported target type: {tp!r}")


def _decode(tp: Any, fields: deque[str]) -> Any:
    tp = _resolve(tp)
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin is Union or origin is types.UnionType:
        inner = [arg for arg in args if arg is not type(None)]
        if len(inner) != 1 or len(inner) == len(args):
            raise TypeError(f"only optional unions are supported: {tp!r}")
        if not fields:
            return None
        if fields[0] == "":
            fields.popleft()
            return None
        return _decode(inner[0], fields)

    if tp is list or origin is list:
        item = args[0] if args else str
        items = []
        while fields:
            items.append(_decode(item, fields))
        return items

    if tp is tuple:
        return tuple(_decode(str, fields) for _ in range(len(fields)))
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            items = []
            while fields:
                items.append(_decode(args[0], fields))
            return tuple(items)
        return tuple(_decode(arg, fields) for arg in args)

    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        values = {
            field.name: _decode(field.type, fields)
            for field in dataclasses.fields(tp)
            if field.init
        }
        return tp(**values)

    if isinstance(tp, type) and issubclass(tp, tuple) and hasattr(tp, "_fields"):
        annotations = getattr(tp, "__annotations__", {})
        return tp(*(_decode(annotations.get(name, str), fields) for name in tp._fields))

    return _decode_scalar(tp, fields)


@dataclasses.dataclass(frozen=True)
class CSVLine:
    """A parser for a single line of CSV data."""

    separator: str = ","

    def __post_init__(self) -> None:
        _check_delimiter(self.separator)

    def with_separator(self, separator: str) -> CSVLine:
        """Return a parser that uses the given separator."""
        return dataclasses.replace(self, separator=separator)

    def decode_str(self, s: str, cls: Any = list) -> Any:
        """Decode one line into an instance of ``cls``.

        ``cls`` may be ``str``, ``int``, ``float``, ``bool``, an optional type,
        ``list``/``tuple`` types, a dataclass or a named tuple. Fields are
        consumed in order; a list consumes all remaining fields.
        """
        fields = deque(iter_fields(s, self.separator))
        return _decode(cls, fields)


def from_str(s: str, cls: Any = list) -> Any:
    """Decode a comma-separated line into an instance of ``cls``."""
    return CSVLine().decode_str(s, cls)


def from_str_sep(s: str, sep: str, cls: Any = list) -> Any:
    """Decode a line with a custom separator into an instance of ``cls``."""
    return CSVLine(sep).decode_str(s, cls)