"""Deterministic ordering of rendered collections."""

from __future__ import annotations

from typing import Iterable, TypeVar

from .links import display_type_name
from .model import Enum, Method, Named, Parameter, Type

Entity = TypeVar("Entity", Method, Type, Enum)
Schema = TypeVar("Schema", Type, Enum)


def sort_by_name(items: Iterable[Entity]) -> list[Entity]:
    """Sort *items* ascending by ``name`` using code point comparison."""
    return sorted(items, key=lambda item: item.name)


def sort_by_display_name(items: Iterable[Schema]) -> list[Schema]:
    """Sort types or enums by the name shown in headings, qualifiers stripped."""
    return sorted(items, key=lambda item: display_type_name(Named(item.name)))


def sort_parameters(parameters: Iterable[Parameter]) -> list[Parameter]:
    """Required parameters first; source order is kept within each group."""
    return sorted(parameters, key=lambda param: not param.is_required)
