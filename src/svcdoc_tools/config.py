"""Generator configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - python<3.11
    import tomli as tomllib


@dataclass(frozen=True)
class DocsConfig:
    """Namespace and file naming conventions for generated documents.

    Parameters
    ----------
    namespace:
        Root namespace such as ``Acme::Widgets``. When unset it is derived
        from the model title.
    types_module:
        Namespace segment appended for types and enums.
    interfaces_module:
        Namespace segment appended for interfaces.
    extension:
        File extension of generated documents.
    """

    namespace: str | None = None
    types_module: str = "Types"
    interfaces_module: str = "Interfaces"
    extension: str = ".md"


_KEYS = {
    "namespace": "namespace",
    "types-module": "types_module",
    "interfaces-module": "interfaces_module",
    "extension": "extension",
}


def load_config(path: str | Path) -> DocsConfig:
    """Load a :class:`DocsConfig` from the ``[docs]`` table of a TOML file."""
    with Path(path).open("rb") as handle:
        raw = tomllib.load(handle)
    return config_from_dict(raw)


def config_from_dict(raw: dict[str, Any]) -> DocsConfig:
    """Build a :class:`DocsConfig` from parsed TOML data."""
    docs_raw = raw.get("docs", {})
    if not isinstance(docs_raw, dict):
        raise ValueError("config docs must be a table")

    values: dict[str, str] = {}
    for key, value in docs_raw.items():
        if key not in _KEYS:
            raise ValueError(f"unknown config key 'docs.{key}'")
        if not isinstance(value, str):
            raise ValueError(f"config 'docs.{key}' must be a string")
        values[_KEYS[key]] = value.strip()

    extension = values.get("extension")
    if extension is not None and not extension.startswith("."):
        values["extension"] = f".{extension}"

    return DocsConfig(**values)
