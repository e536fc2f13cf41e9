"""Ingest processors."""

from geospine.framework.processors.base import (
    Processor,
    ProcessorFactory,
    read_optional_string_property,
    read_string_property,
)
from geospine.framework.processors.feature import FeatureProcessor, FeatureProcessorFactory

__all__ = [
    "Processor",
    "ProcessorFactory",
    "read_string_property",
    "read_optional_string_property",
    "FeatureProcessor",
    "FeatureProcessorFactory",
]
