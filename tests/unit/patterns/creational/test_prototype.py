"""Tests for the Prototype demonstration."""

import pytest

from src.domain.core.exceptions import PatternNotFoundError
from src.patterns.creational import prototype
from src.patterns.creational.prototype import (
    ConcretePrototype1,
    ConcretePrototype2,
    PrototypeFactory,
    PrototypeType,
)


class TestPrototype:
    """Test cloning and the prototype factory."""

    def test_transcript(self, capsys):
        """Test the demonstration prints the documented narration."""
        assert prototype.main() == 0
        assert capsys.readouterr().out == (
            "Let's create a Prototype 1\n"
            "Call Method from PROTOTYPE_1 with field: 90\n"
            "\n"
            "Let's create a Prototype 2\n"
            "Call Method from PROTOTYPE_2 with field: 10\n"
            "\n"
        )

    def test_factory_returns_fresh_clones(self):
        """Test each request yields a distinct clone of the right class."""
        factory = PrototypeFactory()

        first = factory.create_prototype(PrototypeType.PROTOTYPE_1)
        second = factory.create_prototype(PrototypeType.PROTOTYPE_1)
        other = factory.create_prototype(PrototypeType.PROTOTYPE_2)

        assert isinstance(first, ConcretePrototype1)
        assert isinstance(other, ConcretePrototype2)
        assert first is not second

    def test_mutating_clone_leaves_exemplar_untouched(self, capsys):
        """Test clones do not share state with the stored prototype."""
        factory = PrototypeFactory()

        clone = factory.create_prototype(PrototypeType.PROTOTYPE_1)
        clone.method(90.0)
        fresh = factory.create_prototype(PrototypeType.PROTOTYPE_1)

        assert clone.prototype_field == 90.0
        assert fresh.prototype_field == 0.0

    def test_fractional_field_keeps_its_digits(self, capsys):
        """Test non-integral fields print without trailing zeros."""
        ConcretePrototype1("P ", 1.0).method(2.5)
        assert capsys.readouterr().out == "Call Method from P with field: 2.5\n"

    def test_unknown_type(self):
        """Test an unregistered prototype type is reported."""
        factory = PrototypeFactory()
        factory._prototypes.pop(PrototypeType.PROTOTYPE_2)

        with pytest.raises(PatternNotFoundError):
            factory.create_prototype(PrototypeType.PROTOTYPE_2)
