from typing import Literal

from .parsing import SyntaxNode

DeclarationKind = Literal["struct", "trait", "function"]

# Members of these bodies are associated items, not free declarations.
MEMBER_BODY_OWNERS: frozenset[str] = frozenset({"impl_item", "trait_item"})

NON_BOUND_NODES: frozenset[str] = frozenset({"lifetime", "line_comment", "block_comment"})


class NodeUtils:
    """
    Static utilities for reading tree-sitter Rust nodes.
    """

    @staticmethod
    def node_text(node: SyntaxNode | None) -> str:
        if node is None or node.text is None:
            return ""
        return node.text.decode("utf-8")

    @staticmethod
    def declaration_label(kind: DeclarationKind, node: SyntaxNode) -> str:
        name = NodeUtils.node_text(node.child_by_field_name("name"))
        return f"{kind} {name}"

    @staticmethod
    def lifetime_name(node: SyntaxNode | None) -> str:
        return NodeUtils.node_text(node).lstrip("'").strip()

    @staticmethod
    def render_bound(node: SyntaxNode, collapse_whitespace: bool) -> str:
        text = NodeUtils.node_text(node)
        if collapse_whitespace:
            return " ".join(text.split())
        return text

    @staticmethod
    def trait_bounds(
        param: SyntaxNode, collapse_whitespace: bool = True
    ) -> tuple[str, ...]:
        """
        Render the trait bounds of a type parameter, in declaration order.

        Lifetime bounds (``T: 'a``) are outlives constraints, not traits,
        and are left out.
        """
        bounds_node = param.child_by_field_name("bounds")
        if bounds_node is None:
            return ()
        return tuple(
            NodeUtils.render_bound(child, collapse_whitespace)
            for child in bounds_node.children
            if child.is_named and child.type not in NON_BOUND_NODES
        )
