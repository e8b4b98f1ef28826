"""Tests for ordering of rendered collections."""

from __future__ import annotations

from svcdoc_tools.model import Method, Parameter, Primitive
from svcdoc_tools.ordering import sort_by_name, sort_parameters


def test_sort_by_name_uses_code_point_order() -> None:
    methods = [Method(name=name) for name in ["beta", "Alpha", "alpha", "Zulu", "_hidden"]]

    assert [method.name for method in sort_by_name(methods)] == [
        "Alpha",
        "Zulu",
        "_hidden",
        "alpha",
        "beta",
    ]


def test_sort_parameters_required_first_and_stable() -> None:
    string = Primitive("string")
    parameters = [
        Parameter(name="optionalA", type=string),
        Parameter(name="requiredB", type=string, is_required=True),
        Parameter(name="optionalC", type=string),
        Parameter(name="requiredD", type=string, is_required=True),
    ]

    assert [param.name for param in sort_parameters(parameters)] == [
        "requiredB",
        "requiredD",
        "optionalA",
        "optionalC",
    ]
