"""Schema loading utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .links import display_type_name
from .model import (
    Enum,
    Interface,
    Method,
    Named,
    Parameter,
    Property,
    ReturnType,
    ServiceModel,
    Type,
    normalize_description,
    type_ref,
)

logger = logging.getLogger(__name__)


def load_schema(path: str | Path) -> ServiceModel:
    """Load a service model from *path*.

    Parameters
    ----------
    path:
        Location of the schema file. ``.json`` files are parsed as JSON,
        everything else as YAML.
    """
    schema_path = Path(path)
    text = schema_path.read_text(encoding="utf-8")
    if schema_path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as err:
            raise ValueError(f"schema '{schema_path}' is not valid YAML: {err}") from err
    if not isinstance(data, dict):
        raise ValueError(f"schema '{schema_path}' must be a mapping")
    model = model_from_dict(data, source=str(schema_path))
    logger.debug(
        "loaded %s: %d interfaces, %d types, %d enums",
        schema_path,
        len(model.interfaces),
        len(model.types),
        len(model.enums),
    )
    return model


def model_from_dict(data: dict[str, Any], source: str | None = None) -> ServiceModel:
    """Convert parsed schema data into a :class:`ServiceModel`."""
    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValueError("schema must define a 'title'")

    interfaces = tuple(
        _parse_interface(entry) for entry in _entries(data, "interfaces", "schema")
    )
    types = tuple(_parse_type(entry) for entry in _entries(data, "types", "schema"))
    enums = tuple(_parse_enum(entry) for entry in _entries(data, "enums", "schema"))

    _check_unique([interface.name for interface in interfaces], "interface")
    _check_unique([type_.name for type_ in types] + [enum.name for enum in enums], "type")
    _check_unique(
        [display_type_name(Named(entity.name)) for entity in types + enums],
        "type",
        " after namespace qualifiers are stripped",
    )

    return ServiceModel(
        title=title.strip(),
        interfaces=interfaces,
        types=types,
        enums=enums,
        source=source,
    )


def _parse_interface(entry: dict[str, Any]) -> Interface:
    name = _name(entry, "interface")
    methods = tuple(
        _parse_method(item) for item in _entries(entry, "methods", f"interface '{name}'")
    )
    _check_unique([method.name for method in methods], "method", f" in interface '{name}'")
    return Interface(
        name=name,
        methods=methods,
        description=_description(entry, f"interface '{name}'"),
    )


def _parse_method(entry: dict[str, Any]) -> Method:
    name = _name(entry, "method")
    owner = f"method '{name}'"
    parameters = tuple(
        Parameter(**_member_fields(item, "parameter"))
        for item in _entries(entry, "parameters", owner)
    )

    returns: ReturnType | None = None
    returns_raw = entry.get("returns")
    if isinstance(returns_raw, str):
        returns = ReturnType(type=type_ref(returns_raw))
    elif isinstance(returns_raw, dict):
        returns = ReturnType(
            type=type_ref(_type_name(returns_raw, f"return type of {owner}")),
            is_array=_flag(returns_raw, "array", f"return type of {owner}"),
        )
    elif returns_raw is not None:
        raise ValueError(f"{owner} 'returns' must be a type name or an object")

    return Method(
        name=name,
        parameters=parameters,
        returns=returns,
        description=_description(entry, owner),
    )


def _parse_type(entry: dict[str, Any]) -> Type:
    name = _name(entry, "type")
    properties = tuple(
        Property(**_member_fields(item, "property"))
        for item in _entries(entry, "properties", f"type '{name}'")
    )
    return Type(name=name, properties=properties, description=_description(entry, f"type '{name}'"))


def _parse_enum(entry: dict[str, Any]) -> Enum:
    name = _name(entry, "enum")
    values_raw = entry.get("values", [])
    if not isinstance(values_raw, list):
        raise ValueError(f"enum '{name}' values must be a list")
    if not all(isinstance(value, str) for value in values_raw):
        raise ValueError(f"enum '{name}' values must be strings")
    values = tuple(values_raw)
    return Enum(name=name, values=values, description=_description(entry, f"enum '{name}'"))


def _member_fields(entry: dict[str, Any], kind: str) -> dict[str, Any]:
    name = _name(entry, kind)
    owner = f"{kind} '{name}'"
    return {
        "name": name,
        "type": type_ref(_type_name(entry, owner)),
        "is_array": _flag(entry, "array", owner),
        "is_required": _flag(entry, "required", owner),
        "description": _description(entry, owner),
    }


def _entries(data: dict[str, Any], key: str, owner: str) -> list[dict[str, Any]]:
    raw = data.get(key, [])
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"{owner} '{key}' must be a list")
    for item in raw:
        if not isinstance(item, dict):
            raise ValueError(f"{owner} '{key}' entries must be objects")
    return raw


def _name(entry: dict[str, Any], kind: str) -> str:
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{kind} must define a 'name'")
    return name.strip()


def _type_name(entry: dict[str, Any], owner: str) -> str:
    name = entry.get("type")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{owner} must define a 'type'")
    return name.strip()


def _flag(entry: dict[str, Any], key: str, owner: str) -> bool:
    value = entry.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{owner} '{key}' must be a boolean")
    return value


def _description(entry: dict[str, Any], owner: str) -> tuple[str, ...]:
    raw = entry.get("description")
    if raw is not None and not isinstance(raw, (str, list)):
        raise ValueError(f"{owner} description must be a string or a list of strings")
    return normalize_description(raw)


def _check_unique(names: list[str], kind: str, scope: str = "") -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise ValueError(f"duplicate {kind} name '{name}'{scope}")
        seen.add(name)
