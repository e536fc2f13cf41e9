"""
geospine framework - ingest processors and their registry.

This module provides:
- Processor / ProcessorFactory base classes
- The GeoJSON Feature processor
- Registration and lookup by type identifier
"""

from geospine.framework.processors import FeatureProcessor, FeatureProcessorFactory, Processor, ProcessorFactory
from geospine.framework.registry import (
    clear_registry,
    create_processor,
    get_processor_factory,
    list_processors,
    register_processor,
)

__all__ = [
    # Processors
    "Processor",
    "ProcessorFactory",
    "FeatureProcessor",
    "FeatureProcessorFactory",
    # Registry
    "register_processor",
    "get_processor_factory",
    "create_processor",
    "list_processors",
    "clear_registry",
]
