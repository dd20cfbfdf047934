"""Tests for BuildOptions."""

import pytest
from pydantic import ValidationError

from enumtable import BuildOptions


class TestBuildOptions:

    def test_defaults(self):
        opts = BuildOptions()
        assert opts.default_fields is None
        assert opts.freeze is True
        assert opts.allow_override is True

    def test_alias(self):
        opts = BuildOptions.model_validate({"defaultFields": {"a": 1}})
        assert opts.default_fields == {"a": 1}

    def test_field_name(self):
        assert BuildOptions(default_fields={"a": 1}).default_fields == {"a": 1}

    def test_rejects_non_mapping(self):
        with pytest.raises(ValidationError):
            BuildOptions(default_fields=[("a", 1)])

    def test_rejects_unknown_option(self):
        with pytest.raises(ValidationError):
            BuildOptions.model_validate({"defaults": {}})

    def test_frozen(self):
        opts = BuildOptions()
        with pytest.raises(ValidationError):
            opts.freeze = False
