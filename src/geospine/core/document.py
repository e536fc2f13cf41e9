"""
Ingest document - the record a processor rewrites.

An ``IngestDocument`` is a thin view over a mapping owned by the caller. It
holds the mapping by reference, so every change made through the document is
visible through the caller's original object; nothing is copied on
construction.

Fields are addressed by dotted paths: ``"location"`` is a root key,
``"geo.location"`` is the ``location`` key of the mapping stored under
``geo``. Writes are last-write-wins and create missing intermediate mappings.

Examples:
    >>> source = {"name": "Dinagat Islands"}
    >>> doc = IngestDocument(source)
    >>> doc.set_field_value("geo.location", {"type": "Point"})
    >>> source["geo"]
    {'location': {'type': 'Point'}}
    >>> doc.remove_field("name")
    True
    >>> "name" in source
    False

Tags:
    document, ingest, mutable-mapping, dotted-path, geospine
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from geospine.core.errors import ValidationError

_MISSING: Any = object()
_MISSING_FIELD: Any = object()


class IngestDocument:
    """Mutable document passed through an ingest processor."""

    def __init__(self, source: MutableMapping[str, Any]) -> None:
        if not isinstance(source, MutableMapping):
            raise TypeError(f"source must be a mutable mapping, got {type(source).__name__}")
        self._source = source

    @classmethod
    def wrap(cls, document: IngestDocument | MutableMapping[str, Any]) -> IngestDocument:
        """Return ``document`` itself, or a document over the given mapping."""
        if isinstance(document, IngestDocument):
            return document
        return cls(document)

    @property
    def source(self) -> MutableMapping[str, Any]:
        """The caller-owned mapping this document writes through to."""
        return self._source

    @staticmethod
    def _split(path: str) -> list[str]:
        if not path:
            raise ValidationError("path cannot be null nor empty", field=path)
        return path.split(".")

    def get_field_value(self, path: str, default: Any = _MISSING) -> Any:
        """
        Resolve ``path`` and return its value.

        Raises:
            KeyError: If a segment is missing and no ``default`` was given.
        """
        current: Any = self._source
        for segment in self._split(path):
            if isinstance(current, Mapping) and segment in current:
                current = current[segment]
                continue
            if default is _MISSING:
                raise KeyError(f"field [{segment}] not present as part of path [{path}]")
            return default
        return current

    def has_field(self, path: str) -> bool:
        return self.get_field_value(path, _MISSING_FIELD) is not _MISSING_FIELD

    def set_field_value(self, path: str, value: Any) -> None:
        """
        Write ``value`` at ``path``, overwriting whatever is there.

        Existing intermediates are walked before anything is written, so a
        path blocked by a non-mapping value raises without touching the
        document.
        """
        segments = self._split(path)
        container: MutableMapping[str, Any] = self._source
        for index, segment in enumerate(segments[:-1]):
            if segment not in container:
                nested = value
                for name in reversed(segments[index + 1:]):
                    nested = {name: nested}
                container[segment] = nested
                return
            child = container[segment]
            if not isinstance(child, MutableMapping):
                raise ValidationError(
                    f"cannot set [{segments[index + 1]}] with parent object of type "
                    f"[{type(child).__name__}] as part of path [{path}]",
                    field=path,
                    value=child,
                )
            container = child
        container[segments[-1]] = value

    def remove_field(self, path: str, ignore_missing: bool = True) -> bool:
        """
        Delete the value at ``path``.

        Returns True if something was removed. A missing path is a no-op
        unless ``ignore_missing`` is False, in which case KeyError is raised.
        """
        segments = self._split(path)
        parent = self.get_field_value(".".join(segments[:-1]), None) if len(segments) > 1 else self._source
        if isinstance(parent, MutableMapping) and segments[-1] in parent:
            del parent[segments[-1]]
            return True
        if not ignore_missing:
            raise KeyError(f"field [{segments[-1]}] not present as part of path [{path}]")
        return False

    def staged(self) -> IngestDocument:
        """Return a document over a shallow copy of the root mapping."""
        return IngestDocument(dict(self._source))

    def commit(self, staged: IngestDocument) -> None:
        """Replace the caller's mapping content with ``staged`` in one step."""
        content = dict(staged.source)
        self._source.clear()
        self._source.update(content)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and bool(path) and self.has_field(path)

    def __iter__(self) -> Iterator[str]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"IngestDocument({self._source!r})"

