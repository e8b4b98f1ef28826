"""Discovery of the types and enums reachable from an interface."""

from __future__ import annotations

import logging
from typing import Iterator

from .model import Enum, Interface, Named, ServiceModel, Type, TypeRef
from .resolve import resolve_enum, resolve_type

logger = logging.getLogger(__name__)


def reachable_types(model: ServiceModel, interface: Interface) -> list[Type]:
    """Return every type reachable from the methods of *interface*.

    Types are expanded at most once, keyed by name, so cyclic references
    terminate. The result is in discovery order.
    """
    found: dict[str, Type] = {}
    stack: list[str] = [ref.name for ref in _method_refs(interface)]
    stack.reverse()

    while stack:
        name = stack.pop()
        if name in found:
            continue
        type_ = resolve_type(model, name)
        if type_ is None:
            if resolve_enum(model, name) is None:
                logger.debug("skipping unresolved reference '%s' in %s", name, interface.name)
            continue
        found[name] = type_
        pending = [
            prop.type.name
            for prop in type_.properties
            if isinstance(prop.type, Named) and prop.type.name not in found
        ]
        stack.extend(reversed(pending))

    return list(found.values())


def reachable_enums(model: ServiceModel, interface: Interface) -> list[Enum]:
    """Return every enum referenced by *interface* or by its reachable types."""
    refs: list[TypeRef] = list(_method_refs(interface))
    for type_ in reachable_types(model, interface):
        refs.extend(prop.type for prop in type_.properties)

    found: dict[str, Enum] = {}
    for ref in refs:
        if not isinstance(ref, Named) or ref.name in found:
            continue
        enum = resolve_enum(model, ref.name)
        if enum is not None:
            found[ref.name] = enum
    return list(found.values())


def _method_refs(interface: Interface) -> Iterator[Named]:
    for method in interface.methods:
        for param in method.parameters:
            if isinstance(param.type, Named):
                yield param.type
        if method.returns is not None and isinstance(method.returns.type, Named):
            yield method.returns.type
