"""Tests for the catalogue's error taxonomy."""

import pytest

import src.domain as domain
from src.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    MementoRestoreError,
    PatternConfigurationError,
    PatternNotFoundError,
)


class TestDomainExceptions:
    """Test messages and structured fields of domain errors."""

    def test_public_taxonomy(self):
        """Test the domain package exports every error the catalogue raises."""
        assert sorted(domain.__all__) == [
            "ConfigurationError",
            "DomainException",
            "MementoRestoreError",
            "PatternConfigurationError",
            "PatternNotFoundError",
        ]

    @pytest.mark.parametrize("error", [
        ConfigurationError("bad"),
        PatternNotFoundError("x"),
        PatternConfigurationError("Director", "builder"),
        MementoRestoreError("m", "r"),
    ])
    def test_all_errors_are_domain_exceptions(self, error):
        """Test the CLI can catch every error through the base class."""
        assert isinstance(error, DomainException)

    def test_configuration_error_fields(self):
        """Test missing fields default to an empty list."""
        assert ConfigurationError("bad").missing_fields == []
        assert ConfigurationError("bad", ["demo.seed"]).missing_fields == ["demo.seed"]

    def test_not_found_message(self):
        """Test the kind appears in the message."""
        error = PatternNotFoundError("PROTOTYPE_3", kind="Prototype")

        assert str(error) == "Prototype 'PROTOTYPE_3' not found"
        assert error.name == "PROTOTYPE_3"

    def test_configuration_message(self):
        """Test participant wiring errors name the missing collaborator."""
        assert str(PatternConfigurationError("Director", "builder")) == "Director has no builder set"

    def test_memento_message(self):
        """Test restore errors carry the memento name and reason."""
        error = MementoRestoreError("snap", "foreign")

        assert str(error) == "Cannot restore memento snap: foreign"
        assert error.reason == "foreign"
