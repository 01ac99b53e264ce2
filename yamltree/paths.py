"""Dotted key-path access to a node tree.

A path is a ``.`` separated list of tokens. On a mapping a token is a key, on
a sequence it must be a decimal index. Readers never raise: a path that does
not resolve to a scalar yields the type's default value.
"""
from __future__ import annotations

import re

from yamltree import config
from yamltree.diagnostics import log
from yamltree.nodes import MapNode, Node, NodeKind, ScalarNode, SequenceNode, new_node

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def split_path(path: str) -> list[str]:
    return path.split(".") if path else []


def _index(token: str) -> int | None:
    if token.isascii() and token.isdigit():
        return int(token)
    return None


def resolve(root: Node, path: str) -> Node | None:
    """Return the node addressed by ``path`` or ``None``."""
    node = root
    for token in split_path(path):
        if isinstance(node, MapNode):
            child = node.entries.get(token)
        elif isinstance(node, SequenceNode):
            index = _index(token)
            child = node.items[index] if index is not None and index < len(node.items) else None
        else:
            child = None
        if child is None:
            return None
        node = child
    return node


def has_path(root: Node, path: str) -> bool:
    return resolve(root, path) is not None


def scalar_text(root: Node, path: str) -> str | None:
    node = resolve(root, path)
    if isinstance(node, ScalarNode):
        return node.text
    return None


def unquote(text: str) -> str:
    result = text.strip(" \t\r\n")
    if len(result) >= 2 and result[0] == result[-1] and result[0] in config.QUOTE_CHARS:
        return result[1:-1]
    return result


def get_string(root: Node, path: str, include_quotes: bool = False) -> str:
    """Read a string; surrounding whitespace and one quote layer are removed.

    Args:
        root: Tree to read from
        path: Dotted key-path
        include_quotes: Return the raw scalar text untouched

    Returns:
        The string, or ``""`` when the path does not address a scalar
    """
    text = scalar_text(root, path)
    if text is None:
        return ""
    if include_quotes:
        return text
    return unquote(text)


def get_bool(root: Node, path: str) -> bool:
    text = scalar_text(root, path)
    return text is not None and text.strip() in config.TRUE_VALUES


def get_int(root: Node, path: str) -> int:
    """Read an integer; the whole trimmed text must be ``[+-]digits``.

    Numeric prefixes are not accepted: where a prefix parse would read ``12``
    out of ``12abc``, trailing characters fail the conversion, which is
    logged and yields ``0``.
    """
    text = scalar_text(root, path)
    if text is None:
        return 0
    value = text.strip()
    if _INT_RE.match(value):
        return int(value)
    log(f"integer conversion failed for {path!r}: {text!r}")
    return 0


def get_float(root: Node, path: str) -> float:
    text = scalar_text(root, path)
    if text is None:
        return 0.0
    value = text.strip()
    if _FLOAT_RE.match(value):
        return float(value)
    log(f"float conversion failed for {path!r}: {text!r}")
    return 0.0


def get_double(root: Node, path: str) -> float:
    # Python floats are already double precision
    return get_float(root, path)


def _accepts(node: Node, token: str) -> bool:
    if isinstance(node, MapNode):
        return True
    if isinstance(node, SequenceNode):
        return _index(token) is not None
    return False


def _container_for(token: str) -> Node:
    return SequenceNode() if _index(token) is not None else MapNode()


def _place(parent: Node, token: str, child: Node) -> None:
    if isinstance(parent, MapNode):
        parent.entries[token] = child
        return
    index = _index(token)
    items = parent.items
    if index < len(items):
        items[index] = child
        return
    while len(items) < index:
        items.append(ScalarNode())
    items.append(child)


def _existing(parent: Node, token: str) -> Node | None:
    if isinstance(parent, MapNode):
        return parent.entries.get(token)
    index = _index(token)
    if index < len(parent.items):
        return parent.items[index]
    return None


def writable_key(token: str) -> bool:
    """Whether ``token`` reads back as the same mapping key once dumped."""
    return token == token.strip() and not token.startswith(("-", "#")) and ":" not in token


def generate_node(root: Node, path: str, kind: NodeKind) -> Node | None:
    """Create every missing node along ``path`` and return the terminal node.

    Intermediate nodes are mappings, or sequences when the following token is
    an index; sequences are padded with empty scalars up to that index. A
    terminal node that already has the requested kind is returned as is. A
    node standing in the way with the wrong kind is replaced. Paths holding a
    key that would not survive a dump and reload are refused.
    """
    tokens = split_path(path)
    if not tokens:
        return None
    for token in tokens:
        if not writable_key(token):
            log(f"cannot generate {path!r}: key {token!r} would not read back")
            return None
    if not _accepts(root, tokens[0]):
        log(f"cannot generate {path!r}: root does not accept {tokens[0]!r}")
        return None
    node = root
    for position, token in enumerate(tokens):
        existing = _existing(node, token)
        if position + 1 < len(tokens):
            following = tokens[position + 1]
            if existing is not None and _accepts(existing, following):
                node = existing
                continue
            child = _container_for(following)
        else:
            if existing is not None and existing.kind == kind:
                return existing
            child = new_node(kind)
        if existing is not None:
            where = ".".join(tokens[: position + 1])
            log(f"replacing {existing.kind} at {where!r} with {child.kind}")
        _place(node, token, child)
        node = child
    return node


def needs_quotes(value: str) -> bool:
    if not value or "\n" in value:
        return False
    return (
        value != value.strip()
        or value[0] in config.QUOTE_CHARS
        or value in config.BLOCK_MARKERS
        or ":" in value
    )


def _set_scalar(root: Node, path: str, text: str) -> bool:
    node = generate_node(root, path, "scalar")
    if node is None:
        return False
    node.text = text
    node.style = "literal" if "\n" in text else "plain"
    return True


def set_string(root: Node, path: str, value: str) -> bool:
    if needs_quotes(value):
        quote = "'" if '"' in value else '"'
        value = f"{quote}{value}{quote}"
    return _set_scalar(root, path, value)


def set_int(root: Node, path: str, value: int) -> bool:
    return _set_scalar(root, path, str(int(value)))


def set_float(root: Node, path: str, value: float) -> bool:
    return _set_scalar(root, path, repr(float(value)))


def set_bool(root: Node, path: str, value: bool) -> bool:
    return _set_scalar(root, path, "true" if value else "false")


def remove(root: Node, path: str) -> bool:
    """Drop the node addressed by ``path`` from its parent."""
    tokens = split_path(path)
    if not tokens:
        return False
    parent = resolve(root, ".".join(tokens[:-1]))
    token = tokens[-1]
    if isinstance(parent, MapNode) and token in parent.entries:
        del parent.entries[token]
        return True
    if isinstance(parent, SequenceNode):
        index = _index(token)
        if index is not None and index < len(parent.items):
            del parent.items[index]
            return True
    return False
