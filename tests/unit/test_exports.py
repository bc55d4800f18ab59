"""
Tests for target helpers.
"""
import types

import pytest

from bindery.registry.errors import BadArgumentsError
from bindery.registry.exports import exported_entries, require_args, set_entry, set_type


class Widget:
    pass


class TestSetEntry:

    def test_mapping_target(self):
        target = {}
        set_entry(target, "answer", 42)
        assert target == {"answer": 42}

    def test_module_target(self):
        module = types.ModuleType("api")
        set_entry(module, "answer", 42)
        assert module.answer == 42

    def test_set_type(self):
        module = types.ModuleType("api")
        set_type(module, "Widget", Widget)
        assert module.Widget is Widget

    def test_set_type_rejects_instances(self):
        with pytest.raises(TypeError):
            set_type({}, "Widget", Widget())


class TestExportedEntries:

    def test_fresh_module_has_no_entries(self):
        assert exported_entries(types.ModuleType("api", "doc")) == {}

    def test_module_entries(self):
        module = types.ModuleType("api")
        module.answer = 42
        module.__version__ = "1.0"
        assert exported_entries(module) == {"answer": 42, "__version__": "1.0"}

    def test_mapping_entries(self):
        assert exported_entries({"a": 1, 2: "ignored"}) == {"a": 1}

    def test_snapshot_is_a_copy(self):
        target = {"a": 1}
        snapshot = exported_entries(target)
        target["b"] = 2
        assert snapshot == {"a": 1}


class TestRequireArgs:

    def test_accepts_matching_args(self):
        require_args("f", (1, "x"), int, str)

    def test_accepts_type_tuples(self):
        require_args("f", (b"x",), (bytes, str))

    def test_wrong_count(self):
        with pytest.raises(BadArgumentsError, match="expected 2 argument"):
            require_args("f", (1,), int, str)

    def test_wrong_type(self):
        with pytest.raises(BadArgumentsError) as exc:
            require_args("f", (1, 2), int, str)
        assert "argument 1 must be str, got int" in str(exc.value)

    def test_bad_arguments_is_type_error(self):
        with pytest.raises(TypeError):
            require_args("f", (), int)
