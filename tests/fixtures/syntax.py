"""Hand-built syntax trees shaped like tree-sitter-rust output."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class FakeNode:
    type: str
    children: list["FakeNode"] = field(default_factory=list)
    fields: dict[str, "FakeNode"] = field(default_factory=dict)
    source: str = ""
    is_named: bool = True

    @property
    def text(self) -> bytes:
        if self.source:
            return self.source.encode("utf-8")
        return " ".join(c.text.decode("utf-8") for c in self.children).encode("utf-8")

    def child_by_field_name(self, name: str) -> FakeNode | None:
        return self.fields.get(name)


def token(text: str) -> FakeNode:
    return FakeNode(text, source=text, is_named=False)


def leaf(kind: str, text: str) -> FakeNode:
    return FakeNode(kind, source=text)


def lifetime(name: str) -> FakeNode:
    return FakeNode(
        "lifetime", [token("'"), leaf("identifier", name)], source=f"'{name}"
    )


def trait_bounds(*bounds: FakeNode | str) -> FakeNode:
    children = [token(":")]
    for i, bound in enumerate(bounds):
        if i:
            children.append(token("+"))
        children.append(leaf("type_identifier", bound) if isinstance(bound, str) else bound)
    return FakeNode("trait_bounds", children)


def type_param(name: str, *bounds: FakeNode | str) -> FakeNode:
    name_node = leaf("type_identifier", name)
    children = [name_node]
    fields = {"name": name_node}
    if bounds:
        bounds_node = trait_bounds(*bounds)
        children.append(bounds_node)
        fields["bounds"] = bounds_node
    return FakeNode("type_parameter", children, fields)


def lifetime_param(name: str) -> FakeNode:
    name_node = lifetime(name)
    return FakeNode("lifetime_parameter", [name_node], {"name": name_node})


def const_param(name: str) -> FakeNode:
    name_node = leaf("identifier", name)
    return FakeNode(
        "const_parameter",
        [token("const"), name_node, token(":"), leaf("primitive_type", "usize")],
        {"name": name_node},
    )


def type_parameters(*params: FakeNode) -> FakeNode:
    children = [token("<")]
    for i, param in enumerate(params):
        if i:
            children.append(token(","))
        children.append(param)
    children.append(token(">"))
    return FakeNode("type_parameters", children)


def _item(
    kind: str,
    keyword: str,
    name: FakeNode | None,
    params: FakeNode | None,
    body: FakeNode,
) -> FakeNode:
    children = [token(keyword)]
    fields = {"body": body}
    if name is not None:
        children.append(name)
        fields["name"] = name
    if params is not None:
        children.append(params)
        fields["type_parameters"] = params
    children.append(body)
    return FakeNode(kind, children, fields)


def struct(name: str, params: FakeNode | None = None) -> FakeNode:
    body = FakeNode("field_declaration_list", [token("{"), token("}")])
    return _item("struct_item", "struct", leaf("type_identifier", name), params, body)


def enum(name: str, params: FakeNode | None = None) -> FakeNode:
    body = FakeNode("enum_variant_list", [token("{"), token("}")])
    return _item("enum_item", "enum", leaf("type_identifier", name), params, body)


def function(
    name: str, params: FakeNode | None = None, *statements: FakeNode
) -> FakeNode:
    body = FakeNode("block", [token("{"), *statements, token("}")])
    return _item("function_item", "fn", leaf("identifier", name), params, body)


def method_signature(name: str, params: FakeNode | None = None) -> FakeNode:
    name_node = leaf("identifier", name)
    children = [token("fn"), name_node]
    fields = {"name": name_node}
    if params is not None:
        children.append(params)
        fields["type_parameters"] = params
    children.append(token(";"))
    return FakeNode("function_signature_item", children, fields)


def trait(name: str, params: FakeNode | None = None, *members: FakeNode) -> FakeNode:
    body = FakeNode("declaration_list", [token("{"), *members, token("}")])
    return _item("trait_item", "trait", leaf("type_identifier", name), params, body)


def impl(params: FakeNode | None = None, *members: FakeNode) -> FakeNode:
    body = FakeNode("declaration_list", [token("{"), *members, token("}")])
    return _item("impl_item", "impl", None, params, body)


def module(name: str, *items: FakeNode) -> FakeNode:
    body = FakeNode("declaration_list", [token("{"), *items, token("}")])
    return _item("mod_item", "mod", leaf("identifier", name), None, body)


def source_file(*items: FakeNode) -> FakeNode:
    return FakeNode("source_file", list(items))


def higher_ranked(bound: FakeNode | str, *lifetimes: str) -> FakeNode:
    params = type_parameters(*(lifetime_param(name) for name in lifetimes))
    bound_type = leaf("type_identifier", bound) if isinstance(bound, str) else bound
    node = FakeNode(
        "higher_ranked_trait_bound",
        [token("for"), params, bound_type],
        {"type_parameters": params, "type": bound_type},
    )
    names = ", ".join(f"'{name}" for name in lifetimes)
    node.source = f"for<{names}> {bound_type.text.decode('utf-8')}"
    return node
