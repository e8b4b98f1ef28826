"""Markdown documentation generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .config import DocsConfig
from .links import anchor, display_type_name, linked_type_name, qualified_name
from .model import Enum, Interface, Method, Named, Parameter, Property, ServiceModel, Type
from .naming import title_case
from .ordering import sort_by_display_name, sort_by_name, sort_parameters
from .paths import output_path, types_namespace
from .traverse import reachable_enums, reachable_types

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedFile:
    """A rendered document and the path segments it belongs at."""

    path: tuple[str, ...]
    contents: str


@dataclass
class DocumentContext:
    """Everything needed to render the document of one interface."""

    title: str
    methods: list[Method]
    types: list[Type]
    enums: list[Enum]
    types_namespace: str


def generate_docs(
    model: ServiceModel,
    config: DocsConfig | None = None,
    prelude: Sequence[str] = (),
) -> list[GeneratedFile]:
    """Render one Markdown document per interface of *model*.

    *prelude* is prepended verbatim to every document, typically the banner
    produced by :func:`svcdoc_tools.banner.render_banner`.

    Raises ``ValueError`` when two interfaces map to the same output path.
    """
    files: list[GeneratedFile] = []
    owners: dict[tuple[str, ...], str] = {}
    for interface in model.interfaces:
        path = output_path(interface, model, config)
        if path in owners:
            raise ValueError(
                f"interfaces '{owners[path]}' and '{interface.name}' "
                f"both map to '{'/'.join(path)}'"
            )
        owners[path] = interface.name
        lines = render_interface(model, interface, config, prelude)
        logger.debug("rendered %s (%d lines)", "/".join(path), len(lines))
        files.append(GeneratedFile(path=path, contents="\n".join(lines)))
    return files


def render_interface(
    model: ServiceModel,
    interface: Interface,
    config: DocsConfig | None = None,
    prelude: Sequence[str] = (),
) -> list[str]:
    """Return the lines of the document generated for *interface*."""
    context = _build_context(model, interface, config)

    lines: list[str] = []
    if prelude:
        lines.extend(prelude)
        lines.append("")
    lines.append(f"# {context.title}")
    lines.append("")
    lines.extend(_render_toc(context))
    lines.append("")

    if context.methods:
        lines.extend(["## Methods", ""])
        for method in context.methods:
            lines.extend(_render_method(model, method))
    if context.types:
        lines.extend(["## Types", ""])
        for type_ in context.types:
            lines.extend(_render_type(model, type_, context.types_namespace))
    if context.enums:
        lines.extend(["## Enums", ""])
        for enum in context.enums:
            lines.extend(_render_enum(enum, context.types_namespace))
    return lines


def _build_context(
    model: ServiceModel,
    interface: Interface,
    config: DocsConfig | None,
) -> DocumentContext:
    return DocumentContext(
        title=title_case(interface.name),
        methods=sort_by_name(interface.methods),
        types=sort_by_display_name(reachable_types(model, interface)),
        enums=sort_by_display_name(reachable_enums(model, interface)),
        types_namespace=types_namespace(model, config),
    )


def _render_toc(context: DocumentContext) -> list[str]:
    lines: list[str] = []
    if context.methods:
        lines.append("- Methods")
        lines.extend(_toc_entry(method.name) for method in context.methods)
    if context.types:
        lines.append("- Types")
        lines.extend(_toc_entry(_display_name(type_.name)) for type_ in context.types)
    if context.enums:
        lines.append("- Enums")
        lines.extend(_toc_entry(_display_name(enum.name)) for enum in context.enums)
    return lines


def _toc_entry(name: str) -> str:
    return f"  - [{name}]({anchor(name)})"


def _render_method(model: ServiceModel, method: Method) -> list[str]:
    parameters = sort_parameters(method.parameters)
    lines = [f"### {method.name}", "", f"`{_method_signature(method.name, parameters)}`"]
    if parameters:
        lines.append("")
        lines.extend(_render_member(model, param) for param in parameters)
    if method.returns is not None:
        lines.append("")
        lines.append(f"Returns: {linked_type_name(method.returns, model)}")
    for line in method.description:
        lines.extend(["", line])
    lines.append("")
    return lines


def _method_signature(name: str, parameters: list[Parameter]) -> str:
    if not parameters:
        return name
    rendered = ", ".join(
        f"{param.name}:" if param.is_required else f"{param.name}: nil" for param in parameters
    )
    return f"{name}({rendered})"


def _render_member(model: ServiceModel, member: Parameter | Property) -> str:
    optional = "" if member.is_required else " (optional)"
    description = f" - {' '.join(member.description)}" if member.description else ""
    return f"- `{member.name}` {linked_type_name(member, model)}{optional}{description}"


def _render_type(model: ServiceModel, type_: Type, namespace: str) -> list[str]:
    name = _display_name(type_.name)
    lines = [f"### {name}", "", f"`{qualified_name(namespace, name)}`"]
    for line in type_.description:
        lines.extend(["", line])
    if type_.properties:
        lines.append("")
        lines.extend(_render_member(model, prop) for prop in type_.properties)
    lines.append("")
    return lines


def _render_enum(enum: Enum, namespace: str) -> list[str]:
    name = _display_name(enum.name)
    lines = [f"### {name}", "", f"`{qualified_name(namespace, name)}`"]
    for line in enum.description:
        lines.extend(["", line])
    if enum.values:
        lines.append("")
        lines.extend(f"- `{value}`" for value in enum.values)
    lines.append("")
    return lines


def _display_name(name: str) -> str:
    return display_type_name(Named(name))
