"""Splitting a single line of delimited text into its fields."""

from __future__ import annotations

import enum
from collections.abc import Iterator

_QUOTE = '"'
_LINE_BREAKS = "\r\n"


class _State(enum.Enum):
    NEW = enum.auto()
    UNQUOTED = enum.auto()
    QUOTED = enum.auto()
    QUOTE_IN_QUOTED = enum.auto()
    UNQUOTED_AFTER_QUOTED = enum.auto()


def _check_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")


def _unescape(content: str, needs_unescaping: bool) -> str:
    return content.replace('""', '"') if needs_unescaping else content


def iter_fields(line: str, delimiter: str = ",") -> Iterator[str]:
    """Yield the fields of one CSV line, lazily.

    Quoted fields may contain the delimiter, line breaks and doubled quotes.
    An unquoted CR or LF ends the record; anything after it is ignored.
    Text that follows a closing quote is appended to the quoted content.
    """
    _check_delimiter(delimiter)
    chars = iter(enumerate(line))
    column_start = 0

    while True:
        state = _State.NEW
        needs_unescaping = False
        unquoted_start = 0

        def partially_unquoted(end: int) -> str:
            quoted = _unescape(line[column_start + 1 : unquoted_start - 1], needs_unescaping)
            return quoted + line[unquoted_start:end]

        for pos, ch in chars:
            if state is _State.NEW:
                if ch == delimiter:
                    column_start = pos + 1
                    yield ""
                    break
                state = _State.QUOTED if ch == _QUOTE else _State.UNQUOTED
            elif state is _State.UNQUOTED:
                if ch == delimiter:
                    yield line[column_start:pos]
                    column_start = pos + 1
                    break
                if ch in _LINE_BREAKS:
                    yield line[column_start:pos]
                    return
            elif state is _State.QUOTED:
                if ch == _QUOTE:
                    state = _State.QUOTE_IN_QUOTED
            elif state is _State.QUOTE_IN_QUOTED:
                if ch == _QUOTE:
                    needs_unescaping = True
                    state = _State.QUOTED
                    continue
                if ch == delimiter:
                    yield _unescape(line[column_start + 1 : pos - 1], needs_unescaping)
                    column_start = pos + 1
                    break
                if ch in _LINE_BREAKS:
                    yield _unescape(line[column_start + 1 : pos - 1], needs_unescaping)
                    return
                state = _State.UNQUOTED_AFTER_QUOTED
                unquoted_start = pos
            elif ch == delimiter:
                yield partially_unquoted(pos)
                column_start = pos + 1
                break
        else:
            # End of the line reached inside the current field.
            if state is _State.NEW:
                if line.endswith(delimiter):
                    yield ""
            elif state is _State.UNQUOTED:
                yield line[column_start:]
            elif state is _State.QUOTED:
                yield _unescape(line[column_start + 1 :], needs_unescaping)
            elif state is _State.QUOTE_IN_QUOTED:
                yield _unescape(line[column_start + 1 : len(line) - 1], needs_unescaping)
            else:
                yield partially_unquoted(len(line))
            return


def parse_line(line: str, delimiter: str = ",") -> list[str]:
    """Return the fields of one CSV line as a list."""
    return list(iter_fields(line, delimiter))