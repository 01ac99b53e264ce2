"""Node tree produced by the parser.

A document is a tree of three node kinds: ``ScalarNode`` leaves holding text,
``SequenceNode`` holding an ordered list of children, and ``MapNode`` holding
children by unique string key. Every node is owned by exactly one parent.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union

ScalarStyle = Literal["plain", "literal", "folded"]
NodeKind = Literal["scalar", "sequence", "map"]


@dataclass
class ScalarNode:
    text: str = ""
    style: ScalarStyle = "plain"

    @property
    def kind(self) -> NodeKind:
        return "scalar"

    def __eq__(self, other: object) -> bool:
        # style is presentation only
        if not isinstance(other, ScalarNode):
            return NotImplemented
        return self.text == other.text


@dataclass
class SequenceNode:
    items: list[Node] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        return "sequence"


@dataclass
class MapNode:
    entries: dict[str, Node] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return "map"


Node = Union[ScalarNode, SequenceNode, MapNode]

NODE_TYPES: dict[str, type] = {
    "scalar": ScalarNode,
    "sequence": SequenceNode,
    "map": MapNode,
}


def new_node(kind: NodeKind) -> Node:
    """Create an empty node of the given kind."""
    try:
        return NODE_TYPES[kind]()
    except KeyError:
        raise ValueError(f"unknown node kind: {kind!r}") from None


def to_python(node: Node) -> Any:
    """Convert a node tree into plain ``str`` / ``list`` / ``dict`` values."""
    if isinstance(node, MapNode):
        return {key: to_python(child) for key, child in node.entries.items()}
    if isinstance(node, SequenceNode):
        return [to_python(child) for child in node.items]
    return node.text


def _scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def from_python(value: Any) -> Node:
    """Build a node tree from plain Python data.

    Mappings become ``MapNode`` (keys converted with ``str``), lists and tuples
    become ``SequenceNode`` and everything else a ``ScalarNode``. Strings that
    span several lines are tagged as literal blocks so they serialize back.
    """
    if isinstance(value, dict):
        return MapNode({str(key): from_python(child) for key, child in value.items()})
    if isinstance(value, (list, tuple)):
        return SequenceNode([from_python(child) for child in value])
    text = _scalar_text(value)
    return ScalarNode(text, "literal" if "\n" in text else "plain")
