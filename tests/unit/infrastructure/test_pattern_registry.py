"""Tests for the pattern registry."""

import threading

import pytest

from src.domain.core.exceptions import PatternNotFoundError
from src.infrastructure.registry.pattern_registry import (
    PatternCategory,
    PatternRegistry,
    get_pattern_registry,
    normalize_name,
)
from src.patterns import PATTERN_CATALOGUE, register_patterns


def _runner(calls):
    def run(config=None):
        calls.append(config)
        return 0
    return run


class TestPatternRegistry:
    """Test registration, lookup and ordering."""

    def test_singleton_instance(self, fresh_registry):
        """Test the registry is shared process-wide."""
        assert get_pattern_registry() is fresh_registry
        assert PatternRegistry.get_instance() is fresh_registry

    def test_concurrent_get_instance(self, fresh_registry):
        """Test concurrent callers see one instance."""
        PatternRegistry.reset_instance()
        seen = []

        def grab():
            seen.append(PatternRegistry.get_instance())

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(r) for r in seen}) == 1

    def test_register_and_get(self, fresh_registry):
        """Test a registered pattern can be looked up by normalised name."""
        fresh_registry.register("Factory_Method", PatternCategory.CREATIONAL,
                                "pkg.factory", "summary", _runner([]))

        registration = fresh_registry.get("factory method")

        assert registration.name == "factory-method"
        assert registration.category is PatternCategory.CREATIONAL
        assert fresh_registry.is_registered("FACTORY-METHOD")

    def test_duplicate_registration(self, fresh_registry):
        """Test the same name cannot be registered twice."""
        fresh_registry.register("a", "creational", "m", "s", _runner([]))

        with pytest.raises(ValueError, match="already registered"):
            fresh_registry.register("A", "creational", "m", "s", _runner([]))

    def test_unknown_pattern(self, fresh_registry):
        """Test unknown names raise PatternNotFoundError."""
        with pytest.raises(PatternNotFoundError) as exc_info:
            fresh_registry.get("nope")

        assert str(exc_info.value) == "Pattern 'nope' not found"

    def test_list_orders_by_category_then_name(self, fresh_registry):
        """Test listing order follows the pattern families."""
        for name, category in [("visitor", "behavioral"), ("adapter", "structural"),
                               ("singleton", "creational"), ("builder", "creational")]:
            fresh_registry.register(name, category, "m", "s", _runner([]))

        assert fresh_registry.names() == ["builder", "singleton", "adapter", "visitor"]
        assert [r.name for r in fresh_registry.list(PatternCategory.CREATIONAL)] == [
            "builder", "singleton"]

    def test_run_passes_config(self, fresh_registry, fast_config):
        """Test run calls the runner with the given config."""
        calls = []
        fresh_registry.register("x", "behavioral", "m", "s", _runner(calls))

        assert fresh_registry.run("x", fast_config) == 0
        assert calls == [fast_config]

    def test_to_dict(self, fresh_registry):
        """Test the serialisable view of a registration."""
        fresh_registry.register("x", "structural", "pkg.x", "does x", _runner([]))

        assert fresh_registry.get("x").to_dict() == {
            "name": "x",
            "category": "structural",
            "module": "pkg.x",
            "summary": "does x",
        }

    def test_clear(self, fresh_registry):
        """Test clear empties the registry."""
        fresh_registry.register("x", "structural", "m", "s", _runner([]))
        fresh_registry.clear()

        assert fresh_registry.names() == []


class TestRegisterPatterns:
    """Test the built-in catalogue registration."""

    def test_registers_all_eighteen(self, fresh_registry):
        """Test every catalogue entry is registered."""
        register_patterns(fresh_registry)

        assert len(fresh_registry.names()) == len(PATTERN_CATALOGUE) == 18
        assert fresh_registry.names()[:4] == ["builder", "factory-method", "prototype", "singleton"]

    def test_idempotent(self, fresh_registry):
        """Test registering twice keeps one entry per pattern."""
        register_patterns(fresh_registry)
        register_patterns(fresh_registry)

        assert len(fresh_registry.names()) == 18

    def test_runner_is_module_main(self, fresh_registry):
        """Test registrations point at each module's main."""
        from src.patterns.behavioral import strategy

        register_patterns(fresh_registry)

        assert fresh_registry.get("strategy").runner is strategy.main

    @pytest.mark.parametrize("name", [entry[0] for entry in PATTERN_CATALOGUE])
    def test_every_demonstration_runs(self, name, fresh_registry, fast_config, reset_singleton, capsys):
        """Test each demonstration returns 0 and prints something."""
        register_patterns(fresh_registry)

        assert fresh_registry.run(name, fast_config) == 0
        assert capsys.readouterr().out

    def test_normalize_name(self):
        """Test name normalisation."""
        assert normalize_name("  Template_Method ") == "template-method"
