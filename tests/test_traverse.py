"""Tests for reachable type and enum discovery."""

from __future__ import annotations

from svcdoc_tools.model import (
    Enum,
    Interface,
    Method,
    Named,
    Parameter,
    Primitive,
    Property,
    ReturnType,
    ServiceModel,
    Type,
)
from svcdoc_tools.resolve import is_resolvable, resolve_enum, resolve_type
from svcdoc_tools.traverse import reachable_enums, reachable_types


def _interface(*refs: str, returns: str | None = None) -> Interface:
    method = Method(
        name="run",
        parameters=tuple(Parameter(name=f"p{i}", type=Named(ref)) for i, ref in enumerate(refs)),
        returns=ReturnType(type=Named(returns)) if returns else None,
    )
    return Interface(name="jobs", methods=(method,))


def _type(name: str, *refs: str) -> Type:
    return Type(
        name=name,
        properties=tuple(Property(name=f"f{i}", type=Named(ref)) for i, ref in enumerate(refs)),
    )


def test_resolvers_return_none_for_unknown_names() -> None:
    model = ServiceModel(title="t", types=(_type("Job"),), enums=(Enum(name="State"),))

    assert resolve_type(model, "Job") is model.types[0]
    assert resolve_type(model, "State") is None
    assert resolve_enum(model, "State") is model.enums[0]
    assert resolve_enum(model, "Nope") is None
    assert is_resolvable(model, Named("Job"))
    assert not is_resolvable(model, Named("Nope"))
    assert not is_resolvable(model, Primitive("string"))


def test_self_referencing_type_terminates() -> None:
    model = ServiceModel(title="t", types=(_type("Node", "Node", "Node"),))

    found = reachable_types(model, _interface("Node"))

    assert [type_.name for type_ in found] == ["Node"]


def test_indirect_cycle_includes_each_type_once() -> None:
    model = ServiceModel(title="t", types=(_type("A", "B"), _type("B", "A")))

    found = reachable_types(model, _interface("B", returns="A"))

    assert sorted(type_.name for type_ in found) == ["A", "B"]


def test_deep_chain_does_not_hit_recursion_limit() -> None:
    depth = 2000
    types = tuple(_type(f"T{i}", f"T{i + 1}") for i in range(depth)) + (_type(f"T{depth}"),)
    model = ServiceModel(title="t", types=types)

    found = reachable_types(model, _interface("T0"))

    assert len(found) == depth + 1


def test_dangling_references_are_skipped() -> None:
    model = ServiceModel(title="t", types=(_type("Job", "Ghost"),))

    found = reachable_types(model, _interface("Job", "Missing", returns="Void"))

    assert [type_.name for type_ in found] == ["Job"]
    assert reachable_enums(model, _interface("Missing")) == []


def test_unreferenced_types_are_not_reachable() -> None:
    model = ServiceModel(title="t", types=(_type("Job"), _type("Other")))

    found = reachable_types(model, _interface("Job"))

    assert [type_.name for type_ in found] == ["Job"]


def test_enums_are_found_through_reachable_type_properties() -> None:
    model = ServiceModel(
        title="t",
        types=(_type("Job", "Step", "State"), _type("Step", "Priority")),
        enums=(Enum(name="State"), Enum(name="Priority"), Enum(name="Mode"), Enum(name="Unused")),
    )

    found = reachable_enums(model, _interface("Job", "Mode", returns="State"))

    assert sorted(enum.name for enum in found) == ["Mode", "Priority", "State"]
    assert reachable_types(model, _interface("Mode")) == []


def test_primitive_references_are_ignored() -> None:
    interface = Interface(
        name="jobs",
        methods=(
            Method(
                name="count",
                parameters=(Parameter(name="q", type=Primitive("string")),),
                returns=ReturnType(type=Primitive("integer")),
            ),
        ),
    )
    model = ServiceModel(title="t", types=(_type("string"),))

    assert reachable_types(model, interface) == []
    assert reachable_enums(model, interface) == []
