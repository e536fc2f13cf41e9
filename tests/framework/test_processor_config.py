"""Tests for the processor configuration readers."""

import pytest

from geospine.core.errors import ErrorCategory, InvalidConfigError, MissingConfigError
from geospine.framework.processors.base import read_optional_string_property, read_string_property


class TestReadStringProperty:
    def test_present(self):
        assert read_string_property("feature", "t", {"field": "location"}, "field") == "location"

    def test_missing(self):
        with pytest.raises(MissingConfigError) as exc_info:
            read_string_property("feature", "t", {}, "field")

        error = exc_info.value
        assert str(error) == "[field] required property is missing"
        assert error.key == "field"
        assert error.category == ErrorCategory.CONFIG
        assert error.context.to_dict() == {"processor_type": "feature", "tag": "t", "field_name": "field"}

    def test_none_is_missing(self):
        with pytest.raises(MissingConfigError):
            read_string_property("feature", None, {"field": None}, "field")

    def test_empty(self):
        with pytest.raises(InvalidConfigError, match=r"\[field\] property cannot be empty"):
            read_string_property("feature", None, {"field": ""}, "field")

    def test_not_a_string(self):
        with pytest.raises(InvalidConfigError, match="isn't a string, but of type \\[int\\]"):
            read_string_property("feature", None, {"field": 5}, "field")


class TestReadOptionalStringProperty:
    def test_absent_returns_none(self):
        assert read_optional_string_property("feature", None, {}, "target") is None

    def test_present(self):
        assert read_optional_string_property("feature", None, {"target": "x"}, "target") == "x"
