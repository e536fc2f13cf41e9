"""Processor registry mapping type identifiers to factories.

Manifesto:
    A host pipeline names processors by type in its configuration
    (``{"feature": {"field": "location"}}``). The registry resolves that type
    to a factory without the host importing processor modules itself.

Tags:
    geospine, framework, registry, processor-discovery, lookup

Doc-Types:
    api-reference
"""

from collections.abc import Callable, Mapping
from typing import Any

from geospine.core.errors import ProcessorNotFoundError
from geospine.core.logging import get_logger
from geospine.framework.processors.base import Processor, ProcessorFactory

logger = get_logger(__name__)

# Global processor registry
_registry: dict[str, type[ProcessorFactory]] = {}
_loaded: bool = False


def register_processor(type_name: str) -> Callable[[type[ProcessorFactory]], type[ProcessorFactory]]:
    """Decorator to register a processor factory class under ``type_name``."""

    def decorator(cls: type[ProcessorFactory]) -> type[ProcessorFactory]:
        if type_name in _registry:
            raise ValueError(f"Processor '{type_name}' is already registered")
        _registry[type_name] = cls
        logger.debug("processor_registered", type=type_name, factory=cls.__name__)
        return cls

    return decorator


def _ensure_loaded() -> None:
    """Ensure built-in processors are registered (lazy initialization)."""
    global _loaded
    if not _loaded:
        _load_processors()
        _loaded = True


def get_processor_factory(type_name: str) -> type[ProcessorFactory]:
    """Get a processor factory class by type identifier."""
    _ensure_loaded()
    if type_name not in _registry:
        raise ProcessorNotFoundError(type_name, sorted(_registry))
    return _registry[type_name]


def create_processor(
    type_name: str,
    config: Mapping[str, Any],
    tag: str | None = None,
    description: str | None = None,
) -> Processor:
    """Build a processor of ``type_name`` from its configuration block."""
    factory = get_processor_factory(type_name)()
    processor = factory.create(tag, description, config)
    logger.debug("processor_created", type=type_name, tag=tag)
    return processor


def list_processors() -> list[str]:
    """List all registered processor type identifiers."""
    _ensure_loaded()
    return sorted(_registry.keys())


def clear_registry() -> None:
    """Clear registry (for testing). Built-ins come back on next lookup."""
    global _loaded
    _registry.clear()
    _loaded = False


def _load_processors() -> None:
    """
    Register the built-in processors.

    Called lazily so registration log events are emitted after logging is
    configured. Built-ins are registered here rather than by decorator so a
    cleared registry can be restored without re-importing modules.
    """
    from geospine.framework.processors.feature import FeatureProcessor, FeatureProcessorFactory

    _registry.setdefault(FeatureProcessor.TYPE, FeatureProcessorFactory)
    logger.debug("processor_registry_loaded", registered=len(_registry))
