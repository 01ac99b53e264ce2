"""Serialize node trees back to indented text."""
from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from yamltree import config
from yamltree.nodes import MapNode, Node, ScalarNode, SequenceNode

_MARKERS = {style: marker for marker, style in config.BLOCK_MARKERS.items()}


def _scalar_lines(prefix: str, node: ScalarNode, content_indent: int, in_sequence: bool) -> Iterable[str]:
    style = node.style
    if style == "plain" and "\n" in node.text:
        style = "literal"
    marker = _MARKERS.get(style)
    if marker is None:
        if node.text:
            yield f"{prefix} {node.text}"
        elif in_sequence:
            yield f'{prefix} ""'
        else:
            yield prefix
        return
    yield f"{prefix} {marker}"
    if not node.text:
        return
    pad = " " * content_indent
    for line in node.text.split("\n"):
        yield f"{pad}{line}" if line else ""


def iter_lines(node: Node, depth: int = 0) -> Iterable[str]:
    """Yield the text lines for ``node`` written at ``depth`` columns.

    Structures written at depth 0 or 2 are followed by an empty line so
    top-level sections stay visually apart.
    """
    pad = " " * depth
    child_depth = depth + config.INDENT_STEP
    if isinstance(node, MapNode):
        for key, value in node.entries.items():
            if isinstance(value, ScalarNode):
                yield from _scalar_lines(f"{pad}{key}:", value, child_depth, in_sequence=False)
            else:
                yield f"{pad}{key}:"
                yield from iter_lines(value, child_depth)
    elif isinstance(node, SequenceNode):
        for item in node.items:
            if isinstance(item, ScalarNode):
                yield from _scalar_lines(f"{pad}-", item, child_depth, in_sequence=True)
            else:
                yield f"{pad}-"
                yield from iter_lines(item, child_depth)
    else:
        for line in node.text.split("\n"):
            yield f"{pad}{line}"
    if depth <= config.INDENT_STEP:
        yield ""


def dump(node: Node) -> str:
    return "\n".join(iter_lines(node, 0)) + "\n"


def iter_display_lines(node: Node, indent: int = 0) -> Iterable[str]:
    """Yield a compact human readable rendering of ``node``.

    Unlike ``iter_lines`` this does not reproduce block markers and never adds
    separator lines; mappings held by a sequence are listed under a bare ``-``.
    """
    pad = " " * indent
    if isinstance(node, ScalarNode):
        yield f"{pad}{node.text}"
    elif isinstance(node, SequenceNode):
        for item in node.items:
            if isinstance(item, ScalarNode):
                yield f"{pad}- {item.text}"
            elif isinstance(item, SequenceNode):
                yield f"{pad}-"
                yield from iter_display_lines(item, indent + 2)
            else:
                yield f"{pad}-"
                for key, value in item.entries.items():
                    if isinstance(value, ScalarNode):
                        yield f"{pad}  {key}: {value.text}"
                    else:
                        yield f"{pad}  {key}:"
                        yield from iter_display_lines(value, indent + 4)
    else:
        for key, value in node.entries.items():
            if isinstance(value, ScalarNode):
                yield f"{pad}{key}: {value.text}"
            else:
                yield f"{pad}{key}:"
                yield from iter_display_lines(value, indent + 2)


def print_tree(node: Node, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in iter_display_lines(node):
        print(line, file=out)
