"""
Tests for geospine.framework.registry module.

Tests cover:
- Built-in processor availability
- Processor registration via decorator
- Lookup and creation by type identifier
- Registry clearing (for test isolation)
"""

import pytest

from geospine.core.errors import MissingConfigError, ProcessorNotFoundError
from geospine.framework.processors.base import Processor, ProcessorFactory
from geospine.framework.processors.feature import FeatureProcessor, FeatureProcessorFactory
from geospine.framework.registry import (
    clear_registry,
    create_processor,
    get_processor_factory,
    list_processors,
    register_processor,
)


class _NoopProcessor(Processor):
    TYPE = "noop"

    def execute(self, document):
        return document


class TestBuiltins:
    def test_feature_registered(self):
        assert "feature" in list_processors()
        assert get_processor_factory("feature") is FeatureProcessorFactory

    def test_builtins_restored_after_clear(self):
        list_processors()
        clear_registry()
        assert "feature" in list_processors()


class TestRegisterProcessor:
    """Tests for register_processor decorator."""

    def test_register_processor_basic(self):
        @register_processor("test.noop")
        class NoopFactory(ProcessorFactory):
            def create(self, tag, description, config):
                return _NoopProcessor(tag, description)

        assert "test.noop" in list_processors()
        assert get_processor_factory("test.noop") is NoopFactory

    def test_register_duplicate_raises_error(self):
        @register_processor("test.duplicate")
        class First(ProcessorFactory):
            def create(self, tag, description, config):
                return _NoopProcessor(tag, description)

        with pytest.raises(ValueError, match="already registered"):

            @register_processor("test.duplicate")
            class Second(ProcessorFactory):
                def create(self, tag, description, config):
                    return _NoopProcessor(tag, description)

    def test_registering_builtin_name_after_load_raises(self):
        list_processors()
        with pytest.raises(ValueError, match="already registered"):
            register_processor("feature")(FeatureProcessorFactory)


class TestLookup:
    def test_unknown_type_raises(self):
        with pytest.raises(ProcessorNotFoundError) as exc_info:
            get_processor_factory("polygon")

        assert "polygon" in str(exc_info.value)
        assert "feature" in str(exc_info.value)
        assert exc_info.value.context.processor_type == "polygon"

    def test_list_is_sorted(self):
        @register_processor("aaa")
        class EarlyFactory(ProcessorFactory):
            def create(self, tag, description, config):
                return _NoopProcessor(tag, description)

        names = list_processors()
        assert names == sorted(names)
        assert names[0] == "aaa"


class TestCreateProcessor:
    def test_create_feature_processor(self):
        processor = create_processor("feature", {"field": "location"}, tag="unit-test", description="d")

        assert isinstance(processor, FeatureProcessor)
        assert processor.type == "feature"
        assert processor.tag == "unit-test"
        assert processor.description == "d"
        assert processor.field == "location"

    def test_create_with_missing_field(self):
        with pytest.raises(MissingConfigError):
            create_processor("feature", {})
