"""Tests for the Reader layer."""

import pytest

from lang_core.reader import (
    AwaitingValue,
    InArray,
    InString,
    ParseStats,
    closes_array,
    closes_string,
    is_comment,
    parse,
    parse_file,
    split_entry,
)


# ---------------------------------------------------------------------------
# Line predicates
# ---------------------------------------------------------------------------

def test_is_comment():
    assert is_comment("# note")
    assert is_comment("   # indented")
    assert not is_comment("key = # not a comment")

def test_closes_string():
    assert closes_string('world"')
    assert closes_string('  end"  ')
    assert not closes_string('escaped \\"')
    assert not closes_string("no quote")

def test_closes_array():
    assert closes_array("]")
    assert closes_array('  "b"]')
    assert not closes_array('"a",')

def test_split_entry_first_equals():
    assert split_entry("a = b = c") == ("a", "b = c")

def test_split_entry_none():
    assert split_entry("no separator") is None


# ---------------------------------------------------------------------------
# Single-line forms
# ---------------------------------------------------------------------------

def test_quoted_value_strips_quotes():
    assert parse('greeting = "Hello"') == {"greeting": "Hello"}

def test_bare_value_verbatim():
    assert parse("title=  Main Menu  ") == {"title": "Main Menu"}

def test_quoted_value_keeps_escapes():
    assert parse('msg = "a\\nb"') == {"msg": "a\\nb"}

def test_single_line_array_kept_verbatim():
    assert parse('items = ["a", "b"]') == {"items": '["a", "b"]'}

def test_comments_and_blanks_ignored():
    text = "# header\n\n   # indented\nkey = value\n\n"
    assert parse(text) == {"key": "value"}

def test_empty_key_skipped():
    stats = ParseStats()
    assert parse(" = orphan\nok = 1", stats) == {"ok": "1"}
    assert stats.skipped_lines == 1

def test_line_without_equals_skipped():
    stats = ParseStats()
    assert parse("garbage line\nk = v", stats) == {"k": "v"}
    assert stats.skipped_lines == 1
    assert stats.entries == 1

def test_later_key_overwrites():
    assert parse("k = 1\nk = 2") == {"k": "2"}

def test_crlf_input():
    assert parse('a = "x"\r\nb = y\r\n') == {"a": "x", "b": "y"}


# ---------------------------------------------------------------------------
# Continuations
# ---------------------------------------------------------------------------

def test_multiline_array():
    text = 'items = [\n  "a",\n  "b",\n]\nafter = 1'
    table = parse(text)
    assert table["items"] == '[\n  "a",\n  "b",\n]'
    assert table["after"] == "1"

def test_multiline_string():
    text = 'body = "first line\nsecond line"\nnext = x'
    table = parse(text)
    assert table["body"] == '"first line\nsecond line"'
    assert table["next"] == "x"

def test_multiline_string_escaped_quote_does_not_close():
    text = 'q = "he said \\"\nhi\\"\nbye"'
    assert parse(text)["q"] == '"he said \\"\nhi\\"\nbye"'

def test_single_line_escaped_quote_opens_continuation():
    text = 'q = "ends with \\"\ndone"'
    assert parse(text)["q"] == '"ends with \\"\ndone"'

def test_lone_quote_opens_continuation():
    text = 'k = "\nline one\nline two"'
    assert parse(text)["k"] == '"\nline one\nline two"'

def test_comment_inside_continuation_is_content():
    text = 'k = "a\n# not a comment\nb"'
    assert "# not a comment" in parse(text)["k"]

def test_blank_line_inside_continuation_kept():
    text = 'k = "a\n\nb"'
    assert parse(text)["k"] == '"a\n\nb"'

def test_unterminated_string_flushed_at_end():
    stats = ParseStats()
    table = parse('k = "never closed\nmore text   \n', stats)
    assert table == {"k": '"never closed\nmore text'}
    assert stats.unterminated == 1

def test_unterminated_array_flushed_at_end():
    table = parse('k = [\n  "a",')
    assert table == {"k": '[\n  "a",'}


# ---------------------------------------------------------------------------
# Value on the next line
# ---------------------------------------------------------------------------

def test_value_on_next_line_quoted():
    assert parse('k =\n"Hello"') == {"k": "Hello"}

def test_value_on_next_line_skips_blanks():
    assert parse('k =\n\n\n  "Hello"\nz = 1') == {"k": "Hello", "z": "1"}

def test_value_on_next_line_multiline_string():
    table = parse('k =\n"line one\nline two"')
    assert table["k"] == '"line one\nline two"'

def test_value_on_next_line_array():
    table = parse('k =\n[\n"a",\n]')
    assert table["k"] == '[\n"a",\n]'

def test_value_on_next_line_missing_at_end():
    assert parse("k =") == {"k": ""}


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------

def test_state_types_distinct():
    assert InString("k", "") != InArray("k", "")
    assert AwaitingValue("k").key == "k"


# ---------------------------------------------------------------------------
# parse_file
# ---------------------------------------------------------------------------

def test_parse_file(tmp_path):
    path = tmp_path / "en.lang"
    path.write_text('hello = "hello world"\n', encoding="utf-8")
    assert parse_file(path) == {"hello": "hello world"}

def test_parse_file_missing(tmp_path):
    with pytest.raises(OSError):
        parse_file(tmp_path / "missing.lang")


# ---------------------------------------------------------------------------
# Line breaks
# ---------------------------------------------------------------------------

def test_only_newline_breaks_lines():
    assert parse("k = a\x0cb\nz = 1") == {"k": "a\x0cb", "z": "1"}

def test_unicode_separator_stays_in_quoted_value():
    assert parse('k = "a\u2028b"') == {"k": "a\u2028b"}
    assert parse("k = a\x85b\x1cc") == {"k": "a\x85b\x1cc"}

def test_crlf_inside_continuation():
    assert parse('k = "a\r\nb"\r\n') == {"k": '"a\nb"'}
