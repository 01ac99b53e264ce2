"""Line cursor and line classification helpers used by the parser."""
from __future__ import annotations

from dataclasses import dataclass, field


def indent_of(line: str) -> int:
 """Count leading spaces and tabs; a tab counts as one column."""
 count = 0
 for char in line:
  if char not in " \t":
   break
  count += 1
 return count


def is_blank(line: str) -> bool:
 return not line.strip()


def is_ignorable(line: str) -> bool:
 stripped = line.strip()
 return not stripped or stripped.startswith("#")


def split_lines(text: str) -> list[str]:
 lines = text.split("\n")
 if lines and lines[-1] == "":
  lines.pop()
 return lines


@dataclass
class LineCursor:
 lines: list[str] = field(default_factory=list)
 index: int = 0

 @classmethod
 def from_text(cls, text: str) -> LineCursor:
  return cls(split_lines(text))

 def eof(self) -> bool:
  return self.index >= len(self.lines)

 def peek(self) -> str:
  if self.eof():
   raise IndexError("line cursor is at end of input")
  return self.lines[self.index]

 def advance(self) -> None:
  if not self.eof():
   self.index += 1

 def skip_ignorable(self) -> None:
  while not self.eof() and is_ignorable(self.lines[self.index]):
   self.index += 1
