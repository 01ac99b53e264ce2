import pytest

from yamltree.lines import LineCursor, indent_of, is_ignorable, split_lines


def test_indent_counts_spaces_and_tabs_as_one_column():
  assert indent_of("key: value") == 0
  assert indent_of("    key: value") == 4
  assert indent_of("\t\tkey") == 2
  assert indent_of(" \t key") == 3
  assert indent_of("   ") == 3


def test_ignorable_lines():
  assert is_ignorable("")
  assert is_ignorable("    ")
  assert is_ignorable("\r")
  assert is_ignorable("# comment")
  assert is_ignorable("    # indented comment")
  assert not is_ignorable("key: value # trailing")
  assert not is_ignorable("  - item")


def test_split_keeps_leading_whitespace_and_carriage_returns():
  assert split_lines("a: 1\r\n  b: 2\r\n") == ["a: 1\r", "  b: 2\r"]
  assert split_lines("a\n\nb") == ["a", "", "b"]
  assert split_lines("") == []


def test_cursor_peek_and_advance():
  cursor = LineCursor.from_text("first\nsecond\n")
  assert not cursor.eof()
  assert cursor.peek() == "first"
  cursor.advance()
  assert cursor.peek() == "second"
  cursor.advance()
  assert cursor.eof()
  # advancing past the end is a no-op
  cursor.advance()
  assert cursor.index == 2


def test_cursor_peek_at_end_raises():
  cursor = LineCursor([])
  with pytest.raises(IndexError):
    cursor.peek()


def test_skip_ignorable_stops_at_content():
  cursor = LineCursor.from_text("\n# note\n   \nvalue\n")
  cursor.skip_ignorable()
  assert cursor.peek() == "value"
  cursor.advance()
  cursor.skip_ignorable()
  assert cursor.eof()
