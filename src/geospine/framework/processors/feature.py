"""
GeoJSON Feature processor.

Turns a document shaped like a GeoJSON Feature into a flat document: the
geometry moves to a configured field, the properties become root fields, and
the ``type``/``geometry``/``properties`` envelope disappears.

Example:
    >>> doc = {
    ...     "type": "Feature",
    ...     "properties": {"name": "Dinagat Islands"},
    ...     "geometry": {"type": "Point", "coordinates": [125.6, 10.1]},
    ... }
    >>> FeatureProcessor("geo", None, "location")(doc)
    IngestDocument({'name': 'Dinagat Islands', 'location': {'type': 'Point', 'coordinates': [125.6, 10.1]}})
"""

from collections.abc import Mapping, MutableMapping
from typing import Any

from geospine.core.document import IngestDocument
from geospine.core.errors import ValidationError
from geospine.core.geojson import ENVELOPE_KEYS, FEATURE_TYPE, GEOMETRY_KEY, PROPERTIES_KEY, TYPE_KEY
from geospine.core.logging import get_logger
from geospine.framework.processors.base import Processor, ProcessorFactory, read_string_property

logger = get_logger(__name__)

_MISSING: Any = object()


class FeatureProcessor(Processor):
    """Extracts a GeoJSON Feature's geometry and properties into the document."""

    TYPE = "feature"
    FIELD_KEY = "field"

    def __init__(self, tag: str | None, description: str | None, field: str) -> None:
        super().__init__(tag, description)
        self._field = field

    @property
    def field(self) -> str:
        """Destination field for the geometry."""
        return self._field

    def execute(self, document: IngestDocument | MutableMapping[str, Any]) -> IngestDocument:
        document = IngestDocument.wrap(document)
        geometry, properties = self._validate(document)

        # Work on a staged copy so a failure leaves the caller's mapping untouched.
        # The destination is written last so it survives both the envelope
        # cleanup and any same-named property.
        staged = document.staged()
        for key in ENVELOPE_KEYS:
            staged.remove_field(key)
        if properties:
            staged.source.update(properties)
        staged.set_field_value(self._field, geometry)
        document.commit(staged)

        logger.debug(
            "feature_extracted",
            tag=self.tag,
            field=self._field,
            properties=len(properties) if properties else 0,
        )
        return document

    def _validate(self, document: IngestDocument) -> tuple[Mapping[str, Any], Mapping[str, Any] | None]:
        source = document.source

        feature_type = source.get(TYPE_KEY, _MISSING)
        if feature_type is _MISSING or feature_type is None:
            raise self._invalid(f"{TYPE_KEY} cannot be null", TYPE_KEY, None)
        if not isinstance(feature_type, str) or feature_type != FEATURE_TYPE:
            raise self._invalid(f"Only type {FEATURE_TYPE} is supported", TYPE_KEY, feature_type)

        geometry = source.get(GEOMETRY_KEY, _MISSING)
        if geometry is _MISSING or geometry is None:
            raise self._invalid(f"{GEOMETRY_KEY} cannot be null", GEOMETRY_KEY, None)
        if not isinstance(geometry, Mapping):
            raise self._invalid(f"{GEOMETRY_KEY} is not an instance of type Map", GEOMETRY_KEY, geometry)

        properties = source.get(PROPERTIES_KEY)
        if properties is not None and not isinstance(properties, Mapping):
            raise self._invalid(f"{PROPERTIES_KEY} is not an instance of type Map", PROPERTIES_KEY, properties)

        return geometry, properties

    def _invalid(self, message: str, field: str, value: Any) -> ValidationError:
        error = ValidationError(message, field=field, value=value)
        error.with_context(processor_type=self.TYPE, tag=self.tag)
        return error


class FeatureProcessorFactory(ProcessorFactory):
    """Builds a FeatureProcessor from ``{"field": <destination>}``."""

    def create(
        self,
        tag: str | None,
        description: str | None,
        config: Mapping[str, Any],
    ) -> FeatureProcessor:
        field = read_string_property(FeatureProcessor.TYPE, tag, config, FeatureProcessor.FIELD_KEY)
        return FeatureProcessor(tag, description, field)
