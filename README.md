# csvline

Decode a single line of CSV text straight into a Python object, such as a dataclass, a named tuple or a plain tuple. You do not need to set up a reader or a file first.

## Installation

```
pip install csvline
```

## Splitting a line into fields

```python
from csvline.parse import parse_line, iter_fields

parse_line('a,"b,c",d')             # ['a', 'b,c', 'd']
parse_line('"say ""hello"""')       # ['say "hello"']
list(iter_fields("foo;bar", ";"))   # ['foo', 'bar']
```

`parse_line(line, delimiter=",")` returns a list. `iter_fields(line, delimiter=",")` yields the same fields one at a time. The delimiter must be a single character. Anything else raises `ValueError`.

The parser follows RFC 4180 and is lenient in the same places as common CSV readers:

- Quoted fields may contain the delimiter, line breaks and doubled quotes. A doubled quote becomes a single `"`.
- Quotes are allowed inside fields that are not quoted, and they are kept as they are.
- Text after a closing quote is added to the field. For example, `"foo" ,bar` gives `['foo ', 'bar']`.
- A CR or LF outside quotes ends the record, and whatever follows it is ignored.
- A trailing delimiter produces an empty last field. An empty line produces no fields.
- A quoted field that is never closed runs to the end of the line.

## Decoding into types

```python
from dataclasses import dataclass
from typing import Optional

from csvline.decode import CSVLine, from_str, from_str_sep


@dataclass
class Foo:
    text: str
    maybe_text: Optional[str]
    num: int
    flag: bool


from_str('"foo,bar",,1,true', Foo)
# Foo(text='foo,bar', maybe_text=None, num=1, flag=True)

from_str_sep('"foo bar"  1 true', " ", Foo)
# Foo(text='foo bar', maybe_text=None, num=1, flag=True)

CSVLine().with_separator("\t").decode_str("foo\tbar", tuple[str, str])
# ('foo', 'bar')

from_str_sep("31 42 28 97 0", " ", list[int])
# [31, 42, 28, 97, 0]
```

`CSVLine(separator=",")` is an immutable parser. `with_separator` returns a copy that uses another separator. `decode_str(s, cls=list)` decodes one line. `from_str(s, cls=list)` and `from_str_sep(s, sep, cls=list)` are shortcuts for the same call.

Fields are consumed in order. The following target types are supported:

- `str`: the field as it is.
- `int` and `float`: decimal numbers. Floats also accept exponents, `inf` and `nan`.
- `bool`: exactly `true` or `false`.
- `Optional[X]` or `X | None`: an empty or missing field decodes to `None`, and anything else decodes as `X`.
- `list`, `list[X]`, `tuple[X, ...]`: these consume all remaining fields. A bare `list` or `tuple` gives strings.
- `tuple[X, Y, ...]` with fixed items, and dataclasses and typed named tuples: these decode their items or fields in order. Nested types are supported.

String annotations are supported for these same types, as written under `from __future__ import annotations`.

A value that cannot be converted, or a row with too few fields for the target, raises `csvline.decode.DecodeError`, which is a subclass of `ValueError`. Fields left over after a fixed-size target has been filled are ignored. A target type outside the list above raises `TypeError`.

## What it does not do

csvline works on one line at a time. It does not read files or streams of records, it has no header handling, and it has no command-line tool. It only decodes and does not write CSV.