"""Tests for config.py: option validation."""

import pytest

from pomxml.config import DecodeOptions, EncodeOptions
from pomxml.shape import Kind, is_empty, shape_of
from pomxml.pom_models import Build, Dependency, Parent, Plugin, Project


class TestOptions:
    def test_defaults(self):
        assert DecodeOptions().strict_properties is False
        options = EncodeOptions()
        assert options.encoding == "UTF-8"
        assert options.indent == "  "
        assert options.namespace is None

    def test_chunk_size_must_be_positive(self):
        with pytest.raises(ValueError):
            DecodeOptions(chunk_size=0)

    def test_unknown_encoding(self):
        with pytest.raises(ValueError):
            EncodeOptions(encoding="no-such-codec")

    def test_indent_must_be_whitespace(self):
        with pytest.raises(ValueError):
            EncodeOptions(indent="--")


class TestShape:
    def test_project_table(self):
        table = {spec.attr: spec for spec in shape_of(Project)}
        assert table["properties"].kind is Kind.PROPERTIES
        assert table["modules"].path == ("modules", "module")
        assert table["dependencies"].item is Dependency
        assert table["parent"].kind is Kind.RECORD

    def test_is_empty(self):
        assert is_empty("")
        assert is_empty([])
        assert is_empty({})
        assert is_empty(Parent())
        assert is_empty(Build(plugins=[]))
        assert not is_empty(Build(plugins=[Plugin()]))
        assert not is_empty(Parent(version="1"))
