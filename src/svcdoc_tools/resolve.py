"""Name lookups against the service model registries."""

from __future__ import annotations

from .model import Enum, Named, ServiceModel, Type, TypeRef


def resolve_type(model: ServiceModel, name: str) -> Type | None:
    """Return the type called *name*, or ``None`` when it is not registered."""
    for candidate in model.types:
        if candidate.name == name:
            return candidate
    return None


def resolve_enum(model: ServiceModel, name: str) -> Enum | None:
    """Return the enum called *name*, or ``None`` when it is not registered."""
    for candidate in model.enums:
        if candidate.name == name:
            return candidate
    return None


def is_resolvable(model: ServiceModel, ref: TypeRef) -> bool:
    """Whether *ref* names a registered type or enum."""
    if not isinstance(ref, Named):
        return False
    return resolve_type(model, ref.name) is not None or resolve_enum(model, ref.name) is not None
