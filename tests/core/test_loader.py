# tests/core/test_loader.py
from __future__ import annotations

from collections import OrderedDict
from pathlib import Path

import pytest

from structview.core.loader import import_attr, load_yaml_files, substitute_env_vars


class TestImportAttr:
    def test_imports_attribute(self):
        assert import_attr("collections:OrderedDict") is OrderedDict

    def test_imports_nested_attribute(self):
        assert import_attr("collections:OrderedDict.fromkeys") == OrderedDict.fromkeys

    def test_invalid_format(self):
        with pytest.raises(ValueError, match="expected 'module:attr'"):
            import_attr("collections.OrderedDict")

    def test_missing_module(self):
        with pytest.raises(ImportError, match="Cannot import module"):
            import_attr("nonexistent.module:Thing")

    def test_missing_attribute(self):
        with pytest.raises(AttributeError, match="has no attribute 'Nope'"):
            import_attr("collections:Nope")


class TestSubstituteEnvVars:
    def test_set_variable(self, monkeypatch):
        monkeypatch.setenv("SV_TEST_VAR", "value")

        assert substitute_env_vars("x-${SV_TEST_VAR}-y") == "x-value-y"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("SV_TEST_VAR", raising=False)

        assert substitute_env_vars("${SV_TEST_VAR:-fallback}") == "fallback"

    def test_missing_without_default_raises(self, monkeypatch):
        monkeypatch.delenv("SV_TEST_VAR", raising=False)

        with pytest.raises(ValueError, match="SV_TEST_VAR"):
            substitute_env_vars("${SV_TEST_VAR}")

    def test_recurses_into_structures(self, monkeypatch):
        monkeypatch.setenv("SV_TEST_VAR", "v")

        assert substitute_env_vars({"a": ["${SV_TEST_VAR}", 1], "b": None}) == {"a": ["v", 1], "b": None}


class TestLoadYamlFiles:
    def test_sorted_order(self, tmp_path: Path):
        (tmp_path / "b.yaml").write_text("name: b\n", encoding="utf-8")
        (tmp_path / "a.yaml").write_text("name: a\n", encoding="utf-8")

        docs = load_yaml_files([str(tmp_path / "*.yaml")])

        assert [d["name"] for d in docs] == ["a", "b"]

    def test_empty_file_is_empty_dict(self, tmp_path: Path):
        (tmp_path / "empty.yaml").write_text("", encoding="utf-8")

        assert load_yaml_files([str(tmp_path / "empty.yaml")]) == [{}]

    def test_no_match(self, tmp_path: Path):
        assert load_yaml_files([str(tmp_path / "*.yaml")]) == []
