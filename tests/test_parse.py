import pytest

from csvline.parse import iter_fields, parse_line


def test_quotes_in_unquoted_field():
    assert parse_line('foo"bar') == ['foo"bar']
    assert parse_line('foo""bar') == ['foo""bar']


@pytest.mark.parametrize(
    "line, expected",
    [
        ("foo,bar", ["foo", "bar"]),
        ("foo,,bar", ["foo", "", "bar"]),
        (",foo,bar", ["", "foo", "bar"]),
        ("foo,bar,", ["foo", "bar", ""]),
        (",foo,", ["", "foo", ""]),
        (",", ["", ""]),
    ],
)
def test_basic_unquoted_fields(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ('"foo",bar', ["foo", "bar"]),
        ('"foo","bar"', ["foo", "bar"]),
        ('"foo",,"bar"', ["foo", "", "bar"]),
    ],
)
def test_quoted_fields(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ('""', [""]),
        ('"","bar"', ["", "bar"]),
        ('"foo",""', ["foo", ""]),
        ('""","""', ['","']),
        ('"",""",', ["", '",']),
    ],
)
def test_quoted_empty_fields(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ('"foo,bar"', ["foo,bar"]),
        ('"foo,bar",baz', ["foo,bar", "baz"]),
        ('a,"b,c",d', ["a", "b,c", "d"]),
    ],
)
def test_quoted_with_commas(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ('"foo\nbar"', ["foo\nbar"]),
        ('"foo\rbar"', ["foo\rbar"]),
        ('"foo\r\nbar"', ["foo\r\nbar"]),
        ('"line1\nline2",next', ["line1\nline2", "next"]),
        ('"a\nb\r\nc",x', ["a\nb\r\nc", "x"]),
    ],
)
def test_quoted_with_newlines(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ('"foo""bar"', ['foo"bar']),
        ('""', [""]),
        ('""""', ['"']),
        ('""""""', ['""']),
        ('"say ""hello"""', ['say "hello"']),
        ('"a""b""c"', ['a"b"c']),
    ],
)
def test_escaped_quotes(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        (" foo , bar ", [" foo ", " bar "]),
        ('" foo "," bar "', [" foo ", " bar "]),
        ('foo, "bar" ,baz', ["foo", ' "bar" ', "baz"]),
        ('"foo" , "bar"', ["foo ", ' "bar"']),
    ],
)
def test_whitespace_handling(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("foo,bar\n", ["foo", "bar"]),
        ("foo,bar\r", ["foo", "bar"]),
        ("foo,bar\r\n", ["foo", "bar"]),
        ('"foo","bar"\n', ["foo", "bar"]),
    ],
)
def test_line_ending_handling(line, expected):
    assert parse_line(line) == expected


def test_space_after_closing_quote_is_kept():
    assert parse_line('"foo" ,bar') == ["foo ", "bar"]


def test_cr_in_unquoted_field_terminates_record():
    assert parse_line("foo\rbar") == ["foo"]


def test_lf_in_unquoted_field_terminates_record():
    assert parse_line("foo\nbar") == ["foo"]


def test_custom_delimiter():
    assert parse_line("foo;bar;baz", ";") == ["foo", "bar", "baz"]
    assert parse_line('"f;oo";bar', ";") == ["f;oo", "bar"]
    assert parse_line('"f;oo";;bar', ";") == ["f;oo", "", "bar"]


def test_unclosed_quoted_field_runs_to_end():
    assert parse_line('"foo,bar') == ["foo,bar"]


def test_empty_line_has_no_fields():
    assert parse_line("") == []


def test_iter_fields_is_lazy():
    fields = iter_fields("a,b,c")
    assert next(fields) == "a"
    assert list(fields) == ["b", "c"]


def test_tab_delimiter():
    assert parse_line("foo\tbar", "\t") == ["foo", "bar"]


@pytest.mark.parametrize("delimiter", ["", ";;"])
def test_invalid_delimiter(delimiter):
    with pytest.raises(ValueError):
        parse_line("a,b", delimiter)