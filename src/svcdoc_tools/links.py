"""Anchors and cross-reference links inside a generated document."""

from __future__ import annotations

from .model import Named, Parameter, Primitive, Property, ReturnType, ServiceModel, TypeRef
from .resolve import is_resolvable


def anchor(display_name: str) -> str:
    """Return the same-document fragment for a heading called *display_name*."""
    return "#" + display_name.lower().replace(" ", "-")


def display_type_name(ref: TypeRef) -> str:
    """Visible name of *ref*, without namespace qualifiers."""
    if isinstance(ref, Primitive):
        return ref.kind
    if isinstance(ref, Named):
        return ref.name.rsplit("::", 1)[-1]
    raise TypeError(f"unsupported type reference {ref!r}")


def linked_type_name(
    value: Parameter | Property | ReturnType,
    model: ServiceModel | None = None,
) -> str:
    """Render the type of *value*, linking named types to their section.

    When *model* is given, named references that resolve to nothing are
    rendered as plain text.
    """
    ref = value.type
    name = display_type_name(ref)
    suffix = "[]" if value.is_array else ""
    if isinstance(ref, Primitive):
        return f"{name}{suffix}"
    if model is not None and not is_resolvable(model, ref):
        return f"{name}{suffix}"
    return f"[{name}]({anchor(name)}){suffix}"


def qualified_name(namespace: str, name: str) -> str:
    """``Acme::Types`` + ``Widget`` -> ``Acme::Types::Widget``."""
    if not namespace:
        return name
    return f"{namespace}::{name}"
