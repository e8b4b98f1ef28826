"""Output locations and namespace labels for generated documents."""

from __future__ import annotations

from .config import DocsConfig
from .model import Interface, ServiceModel
from .naming import pascal_case, snake_case


def root_namespace(model: ServiceModel, config: DocsConfig | None = None) -> str:
    """Configured root namespace, or the model title in pascal case."""
    config = config or DocsConfig()
    if config.namespace:
        return config.namespace
    return pascal_case(model.title)


def types_namespace(model: ServiceModel, config: DocsConfig | None = None) -> str:
    """Namespace used in the fully-qualified labels of types and enums."""
    config = config or DocsConfig()
    return _join(root_namespace(model, config), config.types_module)


def interfaces_namespace(model: ServiceModel, config: DocsConfig | None = None) -> str:
    """Namespace the interface documents are placed under."""
    config = config or DocsConfig()
    return _join(root_namespace(model, config), config.interfaces_module)


def output_path(
    interface: Interface,
    model: ServiceModel,
    config: DocsConfig | None = None,
) -> tuple[str, ...]:
    """Return the path segments of the document generated for *interface*."""
    config = config or DocsConfig()
    namespace = interfaces_namespace(model, config)
    segments = [snake_case(part) for part in namespace.split("::") if snake_case(part)]
    segments.append(f"{snake_case(interface.name)}{config.extension}")
    return tuple(segments)


def _join(*parts: str) -> str:
    return "::".join(part for part in parts if part)
