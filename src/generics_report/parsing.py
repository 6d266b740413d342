"""
Parser boundary.

The collector only needs a tree of nodes exposing ``type``, ``children``,
``text`` and ``child_by_field_name``; tree-sitter nodes satisfy that shape
directly, and tests can hand-build trees that do too.
"""

from __future__ import annotations

from typing import Protocol, Sequence

import tree_sitter_rust
from tree_sitter import Language, Parser

from .errors import SourceParseError


class SyntaxNode(Protocol):
    type: str
    is_named: bool

    @property
    def children(self) -> Sequence["SyntaxNode"]: ...

    @property
    def text(self) -> bytes | None: ...

    def child_by_field_name(self, name: str) -> "SyntaxNode | None": ...


class SourceParser(Protocol):
    def parse(self, text: str) -> SyntaxNode: ...


class RustSourceParser:
    """
    Parses Rust source with tree-sitter.

    tree-sitter always produces a tree, recovering from bad input with
    ``ERROR`` and ``MISSING`` nodes; any such node makes the input invalid.
    """

    RUST_LANGUAGE = Language(tree_sitter_rust.language())

    def __init__(self) -> None:
        self._parser = Parser(self.RUST_LANGUAGE)

    def parse(self, text: str) -> SyntaxNode:
        tree = self._parser.parse(text.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            raise self._error_for(root)
        return root

    @staticmethod
    def _error_for(root) -> SourceParseError:
        node = RustSourceParser._first_error_node(root) or root
        row, column = node.start_point
        if node.is_missing:
            detail = f"expected '{node.type}'"
        else:
            snippet = (node.text or b"").decode("utf-8", errors="replace")
            snippet = " ".join(snippet.split())
            if len(snippet) > 40:
                snippet = snippet[:40] + "..."
            detail = f"unexpected syntax near '{snippet}'" if snippet else "syntax error"
        return SourceParseError(detail, row + 1, column + 1)

    @staticmethod
    def _first_error_node(node):
        if node.is_error or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = RustSourceParser._first_error_node(child)
                if found is not None:
                    return found
        return None
