"""Shared configuration for yamltree components."""
from __future__ import annotations

import os
from pathlib import Path


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# Text encoding used by Document.load / Document.save
ENCODING = os.environ.get("YAMLTREE_ENCODING", "utf-8")

# Nesting bound for the recursive parser
MAX_DEPTH = _int_from_env("YAMLTREE_MAX_DEPTH", 64)

# Optional file that receives a copy of every diagnostic line
_log_file = os.environ.get("YAMLTREE_LOG_FILE", "").strip()
LOG_FILE: Path | None = Path(_log_file).expanduser() if _log_file else None

# Emitter indentation step (spaces per nesting level)
INDENT_STEP = 2

# Block scalar markers and the style each one selects
BLOCK_MARKERS = {"|": "literal", ">": "folded"}

# Literal values accepted as boolean true
TRUE_VALUES = frozenset({"true", "True", "1"})

# Quote characters; one matching pair around a scalar makes it a single value
QUOTE_CHARS = ('"', "'")
