"""
Tests for RegistrationHandle and the register_api decorator.
"""
import pytest

from bindery.registry.api_registry import (
    Add,
    APIRegistry,
    RegistrationHandle,
    register_api,
)
from bindery.registry.errors import RegistrySealedError


def populate(exports):
    exports["populated"] = True


@pytest.fixture
def fresh_global(monkeypatch):
    """Swap in a fresh process-wide registry for the duration of a test."""
    registry = APIRegistry("global-under-test")
    monkeypatch.setattr(APIRegistry, "_instance", registry)
    return registry


class TestRegistrationHandle:
    """Tests for handle construction."""

    def test_registers_with_process_wide_registry(self, fresh_global):
        RegistrationHandle(populate)

        records = fresh_global.list_records()
        assert len(records) == 1
        assert records[0].callback is populate

    def test_registers_with_injected_registry(self, fresh_global):
        owned = APIRegistry("owned")
        RegistrationHandle(populate, name="populate", registry=owned)

        assert owned.count() == 1
        assert owned.list_records()[0].name == "populate"
        assert fresh_global.count() == 0

    def test_handle_carries_no_state(self, fresh_global):
        handle = RegistrationHandle(populate)
        with pytest.raises(AttributeError):
            handle.callback = populate
        assert not hasattr(handle, "__dict__")

    def test_add_alias(self, fresh_global):
        assert Add is RegistrationHandle
        Add(populate)
        assert fresh_global.count() == 1

    def test_handle_on_sealed_registry_raises(self, fresh_global):
        fresh_global.register_all_apis({})
        with pytest.raises(RegistrySealedError):
            RegistrationHandle(populate)

    def test_handles_feed_aggregation(self, fresh_global):
        RegistrationHandle(lambda exports: exports.setdefault("order", []).append("a"))
        RegistrationHandle(lambda exports: exports.setdefault("order", []).append("b"))

        target = APIRegistry.get_instance().register_all_apis({})

        assert target == {"order": ["a", "b"]}


class TestRegisterApiDecorator:
    """Tests for the register_api decorator."""

    def test_bare_decorator(self, fresh_global):
        @register_api
        def register(exports):
            exports["x"] = 1

        assert fresh_global.count() == 1
        assert fresh_global.list_records()[0].callback is register

    def test_decorator_with_arguments(self):
        owned = APIRegistry("owned")

        @register_api(name="feature-x", registry=owned)
        def register(exports):
            exports["x"] = 1

        assert owned.list_records()[0].name == "feature-x"

    def test_returns_function_unchanged(self):
        owned = APIRegistry("owned")

        @register_api(registry=owned)
        def register(exports):
            exports["x"] = 1

        target = {}
        register(target)
        assert target == {"x": 1}
