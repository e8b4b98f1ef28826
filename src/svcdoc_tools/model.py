"""In-memory service model consumed by the documentation generators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

PRIMITIVE_KINDS = frozenset(
    {
        "string",
        "number",
        "integer",
        "long",
        "float",
        "double",
        "boolean",
        "date",
        "date-time",
        "binary",
        "null",
        "untyped",
    }
)


@dataclass(frozen=True)
class Primitive:
    """A built-in scalar type such as ``string`` or ``integer``."""

    kind: str


@dataclass(frozen=True)
class Named:
    """A reference to a composite type or enum by (possibly qualified) name."""

    name: str


TypeRef = Union[Primitive, Named]


@dataclass(frozen=True)
class Parameter:
    """A method parameter."""

    name: str
    type: TypeRef
    is_array: bool = False
    is_required: bool = False
    description: tuple[str, ...] = ()


@dataclass(frozen=True)
class Property:
    """A property of a composite type."""

    name: str
    type: TypeRef
    is_array: bool = False
    is_required: bool = False
    description: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReturnType:
    """The value returned by a method."""

    type: TypeRef
    is_array: bool = False


@dataclass(frozen=True)
class Method:
    """A single operation of an interface."""

    name: str
    parameters: tuple[Parameter, ...] = ()
    returns: ReturnType | None = None
    description: tuple[str, ...] = ()


@dataclass(frozen=True)
class Interface:
    """A named group of methods, rendered as one document."""

    name: str
    methods: tuple[Method, ...] = ()
    description: tuple[str, ...] = ()


@dataclass(frozen=True)
class Type:
    """A named composite record."""

    name: str
    properties: tuple[Property, ...] = ()
    description: tuple[str, ...] = ()


@dataclass(frozen=True)
class Enum:
    """A named set of literal string values."""

    name: str
    values: tuple[str, ...] = ()
    description: tuple[str, ...] = ()


@dataclass(frozen=True)
class ServiceModel:
    """Root of the model: interfaces plus flat type and enum registries."""

    title: str
    interfaces: tuple[Interface, ...] = ()
    types: tuple[Type, ...] = ()
    enums: tuple[Enum, ...] = ()
    source: str | None = None


def normalize_description(value: str | Sequence[str] | None) -> tuple[str, ...]:
    """Return *value* as a tuple of lines.

    Strings are split on newlines, trailing whitespace is removed from every
    line and leading/trailing blank lines are dropped.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        raw = value.splitlines()
    else:
        raw = []
        for entry in value:
            if not isinstance(entry, str):
                raise ValueError("description lines must be strings")
            raw.extend(entry.splitlines() or [""])
    lines = [line.rstrip() for line in raw]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return tuple(lines)


def type_ref(name: str) -> TypeRef:
    """Build a :data:`TypeRef` from a schema type name."""
    if name in PRIMITIVE_KINDS:
        return Primitive(name)
    return Named(name)
