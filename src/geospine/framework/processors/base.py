"""Base processor interface and configuration readers.

A processor rewrites one ``IngestDocument`` in place. A factory turns a
configuration block (``{"field": "location"}``) into a processor bound to that
configuration; the registry routes a block to a factory by type identifier.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from typing import Any

from geospine.core.document import IngestDocument
from geospine.core.errors import InvalidConfigError, MissingConfigError


class Processor(ABC):
    """Base class for all ingest processors.

    Instances are immutable after construction: ``tag``, ``description`` and
    any configuration are fixed, and ``execute`` keeps no state between calls.
    """

    # Registration identity, set by subclasses
    TYPE: str = ""

    def __init__(self, tag: str | None, description: str | None) -> None:
        self._tag = tag
        self._description = description

    @property
    def type(self) -> str:
        return self.TYPE

    @property
    def tag(self) -> str | None:
        return self._tag

    @property
    def description(self) -> str | None:
        return self._description

    @abstractmethod
    def execute(self, document: IngestDocument | MutableMapping[str, Any]) -> IngestDocument:
        """Rewrite ``document`` in place and return it.

        A plain mapping is wrapped by reference with ``IngestDocument.wrap``.
        """
        ...

    def __call__(self, document: IngestDocument | MutableMapping[str, Any]) -> IngestDocument:
        return self.execute(document)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tag={self._tag!r})"


class ProcessorFactory(ABC):
    """Builds a processor from its configuration block."""

    @abstractmethod
    def create(
        self,
        tag: str | None,
        description: str | None,
        config: Mapping[str, Any],
    ) -> Processor:
        ...


# =============================================================================
# Configuration readers
# =============================================================================


def read_optional_string_property(
    processor_type: str,
    tag: str | None,
    config: Mapping[str, Any],
    key: str,
) -> str | None:
    """Read ``key`` from ``config``; None if absent, error if not a string."""
    value = config.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidConfigError(
            key, value, f"[{key}] property isn't a string, but of type [{type(value).__name__}]"
        ).with_context(processor_type=processor_type, tag=tag)
    return value


def read_string_property(
    processor_type: str,
    tag: str | None,
    config: Mapping[str, Any],
    key: str,
) -> str:
    """
    Read a required, non-empty string ``key`` from ``config``.

    Raises:
        MissingConfigError: ``key`` is absent or None
        InvalidConfigError: ``key`` is not a string, or is empty
    """
    value = read_optional_string_property(processor_type, tag, config, key)
    if value is None:
        raise MissingConfigError(key).with_context(processor_type=processor_type, tag=tag)
    if not value:
        raise InvalidConfigError(key, value, f"[{key}] property cannot be empty").with_context(
            processor_type=processor_type, tag=tag
        )
    return value
