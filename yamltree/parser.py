"""Indentation driven parser for the supported YAML subset.

Supported subset:
- block mappings: ``key: value`` with nested blocks on deeper lines
- block sequences: ``- item``, ``- key: value`` item maps, nested items
- plain scalars (kept as raw text, quotes included)
- ``|`` literal and ``>`` folded block scalars (both keep line breaks)

Malformed structure never raises: offending lines are skipped or end the
enclosing block, and the caller gets whatever tree was built so far.
"""
from __future__ import annotations

from yamltree import config
from yamltree.diagnostics import log
from yamltree.lines import LineCursor, indent_of, is_blank, is_ignorable
from yamltree.nodes import MapNode, Node, ScalarNode, SequenceNode


def read_block_scalar(cursor: LineCursor, base_indent: int) -> str:
 lines: list[str] = []
 while not cursor.eof():
  line = cursor.peek()
  if is_blank(line):
   lines.append("")
   cursor.advance()
   continue
  if indent_of(line) < base_indent:
   break
  lines.append(line)
  cursor.advance()
 # trailing blank lines separate sections, they are not content
 while lines and not lines[-1]:
  lines.pop()
 min_indent = min((indent_of(line) for line in lines if line), default=base_indent)
 return "\n".join(line[min_indent:].rstrip("\r") for line in lines)


def _too_deep(cursor: LineCursor, depth: int) -> bool:
 if depth <= config.MAX_DEPTH:
  return False
 log(f"nesting deeper than {config.MAX_DEPTH} levels at line {cursor.index + 1}, dropping block")
 return True


def _is_quoted(text: str) -> bool:
 quote = text[:1]
 return len(text) >= 2 and quote in config.QUOTE_CHARS and text[-1] == quote and quote not in text[1:-1]


def _parse_value(cursor: LineCursor, key_indent: int, value: str, depth: int) -> Node:
 style = config.BLOCK_MARKERS.get(value)
 if style is not None:
  return ScalarNode(read_block_scalar(cursor, key_indent + config.INDENT_STEP), style)
 cursor.skip_ignorable()
 if cursor.eof():
  return ScalarNode(value)
 next_line = cursor.peek()
 next_indent = indent_of(next_line)
 next_trimmed = next_line.strip()
 nested = next_trimmed.startswith("-") or ":" in next_trimmed
 if next_indent > key_indent and (not value or nested):
  return parse_node(cursor, next_indent, depth + 1)
 if not value and next_indent == key_indent and next_trimmed.startswith("-"):
  # indentless sequence: "key:" followed by "- item" at the key's column
  return parse_node(cursor, next_indent, depth + 1)
 return ScalarNode(value)


def parse_map(cursor: LineCursor, indent: int, depth: int = 0) -> MapNode:
 mapping = MapNode()
 while not cursor.eof():
  line = cursor.peek()
  if is_ignorable(line):
   cursor.advance()
   continue
  line_indent = indent_of(line)
  if line_indent < indent:
   break
  if line_indent > indent:
   cursor.advance()
   continue
  stripped = line.strip()
  if ":" not in stripped:
   break
  key, _, rest = stripped.partition(":")
  cursor.advance()
  mapping.entries[key.strip()] = _parse_value(cursor, line_indent, rest.strip(), depth)
 return mapping


def _parse_item_map(cursor: LineCursor, indent: int, first_pair: str, depth: int) -> MapNode:
 key_indent = indent + config.INDENT_STEP
 element = MapNode()
 key, _, rest = first_pair.partition(":")
 element.entries[key.strip()] = _parse_value(cursor, key_indent, rest.strip(), depth)
 while True:
  cursor.skip_ignorable()
  if cursor.eof():
   break
  line = cursor.peek()
  stripped = line.strip()
  if indent_of(line) != key_indent or stripped.startswith("-") or ":" not in stripped:
   break
  key, _, rest = stripped.partition(":")
  cursor.advance()
  element.entries[key.strip()] = _parse_value(cursor, key_indent, rest.strip(), depth)
 return element


def parse_sequence(cursor: LineCursor, indent: int, depth: int = 0) -> SequenceNode:
 sequence = SequenceNode()
 while not cursor.eof():
  line = cursor.peek()
  if is_ignorable(line):
   cursor.advance()
   continue
  line_indent = indent_of(line)
  if line_indent < indent:
   break
  if line_indent > indent:
   cursor.advance()
   continue
  stripped = line.strip()
  if not stripped.startswith("-"):
   break
  payload = stripped[1:].strip()
  cursor.advance()

  style = config.BLOCK_MARKERS.get(payload)
  if style is not None:
   sequence.items.append(ScalarNode(read_block_scalar(cursor, indent + config.INDENT_STEP), style))
   continue
  if payload and (":" not in payload or _is_quoted(payload)):
   sequence.items.append(ScalarNode(payload))
   continue
  if payload:
   sequence.items.append(_parse_item_map(cursor, indent, payload, depth))
   continue

  # bare "-": the item is whatever block follows on deeper lines
  cursor.skip_ignorable()
  if not cursor.eof() and indent_of(cursor.peek()) > indent:
   sequence.items.append(parse_node(cursor, indent_of(cursor.peek()), depth + 1))
  else:
   sequence.items.append(MapNode())
 return sequence


def parse_node(cursor: LineCursor, indent: int, depth: int = 0) -> Node:
 """Parse the block starting at the next substantive line.

 The block is parsed at that line's own indentation. Nothing is consumed
 when the line sits left of ``indent``, since it belongs to an outer block.
 """
 cursor.skip_ignorable()
 if cursor.eof() or _too_deep(cursor, depth):
  return ScalarNode()
 line = cursor.peek()
 line_indent = indent_of(line)
 if line_indent < indent:
  return ScalarNode()
 stripped = line.strip()
 if stripped.startswith("-"):
  return parse_sequence(cursor, line_indent, depth)
 if ":" in stripped:
  return parse_map(cursor, line_indent, depth)
 cursor.advance()
 return ScalarNode(stripped)


def parse_document(text: str) -> MapNode:
 """Parse a whole document; the root is always a mapping at column 0."""
 if text.startswith("\ufeff"):
  text = text[1:]
 return parse_map(LineCursor.from_text(text), 0)
