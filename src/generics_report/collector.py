"""
collector.py

Walks a Rust syntax tree and records every generic type parameter and
lifetime parameter together with the declaration it was found in.
"""

from __future__ import annotations

import logging

from .models import CollectedGenerics, ContextMode, LifetimeEntry, TypeParamEntry
from .node_ops import MEMBER_BODY_OWNERS, DeclarationKind, NodeUtils
from .parsing import SyntaxNode

logger = logging.getLogger("generics_report")


class ContextTracker:
    """
    Holds the label of the declaration currently being traversed.

    In "stack" mode leaving a declaration restores the enclosing label. In
    "overwrite" mode the label is a single field replaced on every
    declaration and never restored, so a nested declaration's label stays
    in effect for siblings visited after it.
    """

    def __init__(self, mode: ContextMode = "stack") -> None:
        self._mode = mode
        self._stack: list[str] = [""]

    @property
    def current(self) -> str:
        return self._stack[-1]

    def set(self, label: str) -> None:
        self._stack[-1] = label

    def enter(self, label: str) -> None:
        if self._mode == "stack":
            self._stack.append(label)
        else:
            self.set(label)

    def leave(self) -> None:
        if self._mode == "stack" and len(self._stack) > 1:
            self._stack.pop()


class GenericsCollector:
    """
    Syntax tree visitor collecting generic parameters.

    Dispatch follows ``ast.NodeVisitor``: ``visit`` looks up a
    ``visit_<node type>`` method and falls back to ``generic_visit``, which
    recurses into every child.
    """

    def __init__(
        self,
        *,
        context_mode: ContextMode = "stack",
        collapse_bound_whitespace: bool = True,
    ) -> None:
        self._context = ContextTracker(context_mode)
        self._collapse = collapse_bound_whitespace
        self.collected = CollectedGenerics()

    @property
    def current_context(self) -> str:
        return self._context.current

    def set_context(self, label: str) -> None:
        self._context.set(label)

    def collect(self, root: SyntaxNode) -> CollectedGenerics:
        self.visit(root)
        return self.collected

    def visit(self, node: SyntaxNode) -> None:
        handler = getattr(self, f"visit_{node.type}", self.generic_visit)
        handler(node)

    def generic_visit(self, node: SyntaxNode) -> None:
        for child in node.children:
            self.visit(child)

    # --- Declarations ---

    def visit_struct_item(self, node: SyntaxNode) -> None:
        self._visit_declaration("struct", node)

    def visit_trait_item(self, node: SyntaxNode) -> None:
        self._visit_declaration("trait", node)

    def visit_function_item(self, node: SyntaxNode) -> None:
        self._visit_declaration("function", node)

    def visit_impl_item(self, node: SyntaxNode) -> None:
        self._visit_children(node)

    def _visit_declaration(self, kind: DeclarationKind, node: SyntaxNode) -> None:
        label = NodeUtils.declaration_label(kind, node)
        logger.debug(f"Entering {label}")
        self._context.enter(label)
        self._visit_children(node)
        self._context.leave()

    def _visit_children(self, node: SyntaxNode) -> None:
        for child in node.children:
            if node.type in MEMBER_BODY_OWNERS and child.type == "declaration_list":
                self._visit_members(child)
            else:
                self.visit(child)

    def _visit_members(self, body: SyntaxNode) -> None:
        for member in body.children:
            if member.type == "function_item":
                # Methods keep the surrounding context.
                self.generic_visit(member)
            else:
                self.visit(member)

    def visit_higher_ranked_trait_bound(self, node: SyntaxNode) -> None:
        # `for<'a>` binds lifetimes for this bound only; they are not
        # parameters of the enclosing declaration.
        bound_type = node.child_by_field_name("type")
        if bound_type is not None:
            self.visit(bound_type)

    # --- Generic parameters ---

    def visit_type_parameters(self, node: SyntaxNode) -> None:
        context = self._context.current
        for param in node.children:
            if param.type == "type_parameter":
                self.collected.types.append(
                    TypeParamEntry(
                        name=NodeUtils.node_text(param.child_by_field_name("name")),
                        bounds=NodeUtils.trait_bounds(param, self._collapse),
                        context=context,
                    )
                )
            elif param.type == "lifetime_parameter":
                self.collected.lifetimes.append(
                    LifetimeEntry(
                        name=NodeUtils.lifetime_name(param.child_by_field_name("name")),
                        context=context,
                    )
                )
            # const parameters and macro metavariables are not reported
        self.generic_visit(node)
