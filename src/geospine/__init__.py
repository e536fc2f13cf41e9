"""
geospine - GeoJSON Feature ingest processing.

- geospine.core: document, errors, logging, settings
- geospine.framework: processors and the processor registry
- geospine.cli: ``geospine`` command line
"""

__version__ = "0.1.0"

from geospine.core.document import IngestDocument
from geospine.core.errors import GeoSpineError, ValidationError
from geospine.framework.processors.feature import FeatureProcessor, FeatureProcessorFactory
from geospine.framework.registry import create_processor

__all__ = [
    "__version__",
    "IngestDocument",
    "GeoSpineError",
    "ValidationError",
    "FeatureProcessor",
    "FeatureProcessorFactory",
    "create_processor",
]
