"""Document facade: load, query, mutate and save a parsed tree."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

from yamltree import config, emitter, paths
from yamltree.diagnostics import log
from yamltree.nodes import MapNode, Node, NodeKind, to_python
from yamltree.parser import parse_document


@dataclass
class Document:
    root: MapNode = field(default_factory=MapNode)
    path: Path | None = None

    @classmethod
    def loads(cls, text: str) -> Document:
        return cls(parse_document(text))

    @classmethod
    def load(cls, path: str | Path | None) -> Document:
        """Load and parse a document file.

        Args:
            path: File to read

        Returns:
            The parsed document; an empty one when the file cannot be read
        """
        if not path:
            log("no document path given")
            return cls()
        source = Path(path)
        try:
            text = source.read_text(encoding=config.ENCODING)
        except FileNotFoundError:
            log(f"document not found: {source}")
            return cls(path=source)
        except (OSError, UnicodeDecodeError) as exc:
            log(f"cannot read document {source}: {exc}")
            return cls(path=source)
        return cls(parse_document(text), source)

    def dumps(self) -> str:
        return emitter.dump(self.root)

    def save(self, path: str | Path | None = None) -> bool:
        """Write the document; falls back to the path it was loaded from.

        Args:
            path: Destination file

        Returns:
            True if the file was written, False otherwise
        """
        target = path or self.path
        if not target:
            log("no output path given")
            return False
        destination = Path(target)
        try:
            destination.write_text(self.dumps(), encoding=config.ENCODING)
        except (OSError, UnicodeEncodeError) as exc:
            log(f"cannot write document {destination}: {exc}")
            return False
        return True

    def print(self, stream: TextIO | None = None) -> None:
        emitter.print_tree(self.root, stream)

    def to_python(self) -> dict[str, Any]:
        return to_python(self.root)

    def resolve(self, path: str) -> Node | None:
        return paths.resolve(self.root, path)

    def has(self, path: str) -> bool:
        return paths.has_path(self.root, path)

    def get_string(self, path: str, include_quotes: bool = False) -> str:
        return paths.get_string(self.root, path, include_quotes)

    def get_bool(self, path: str) -> bool:
        return paths.get_bool(self.root, path)

    def get_int(self, path: str) -> int:
        return paths.get_int(self.root, path)

    def get_float(self, path: str) -> float:
        return paths.get_float(self.root, path)

    def get_double(self, path: str) -> float:
        return paths.get_double(self.root, path)

    def generate_node(self, path: str, kind: NodeKind) -> Node | None:
        return paths.generate_node(self.root, path, kind)

    def set_string(self, path: str, value: str) -> bool:
        return paths.set_string(self.root, path, value)

    def set_int(self, path: str, value: int) -> bool:
        return paths.set_int(self.root, path, value)

    def set_float(self, path: str, value: float) -> bool:
        return paths.set_float(self.root, path, value)

    def set_bool(self, path: str, value: bool) -> bool:
        return paths.set_bool(self.root, path, value)

    def remove(self, path: str) -> bool:
        return paths.remove(self.root, path)
