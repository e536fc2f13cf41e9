"""GeoJSON Feature member names."""

TYPE_KEY = "type"
GEOMETRY_KEY = "geometry"
PROPERTIES_KEY = "properties"

FEATURE_TYPE = "Feature"

# Members of the Feature object that do not belong in the ingested document
ENVELOPE_KEYS = (TYPE_KEY, GEOMETRY_KEY, PROPERTIES_KEY)
