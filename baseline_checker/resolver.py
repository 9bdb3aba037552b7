"""
Resolve tree-sitter JavaScript nodes to dotted API identifiers.
"""

from typing import Any, Optional

# Qualifiers that name the global object; `window.webkitURL` is `webkitURL`.
GLOBAL_QUALIFIERS = ("window.", "self.", "globalThis.")


def resolve_identifier(node: Any) -> Optional[str]:
    """Resolve an identifier or static member chain (``a.b.c``, ``a?.b``) to a dotted name.

    Computed access (``obj[name]``), private fields, call results, ``this`` and
    literals are not chased and resolve to None.
    """
    if node is None:
        return None
    if node.type == "identifier":
        return node.text.decode("utf-8")
    if node.type == "member_expression":
        obj = resolve_identifier(node.child_by_field_name("object"))
        prop = node.child_by_field_name("property")
        if obj is None or prop is None or prop.type != "property_identifier":
            return None
        return f"{obj}.{prop.text.decode('utf-8')}"
    return None


def strip_global_qualifier(name: str) -> Optional[str]:
    """Return ``name`` without a leading global-object qualifier, or None if it has none."""
    for prefix in GLOBAL_QUALIFIERS:
        if name.startswith(prefix) and len(name) > len(prefix):
            return name[len(prefix):]
    return None
