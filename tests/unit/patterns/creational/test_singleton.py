"""Tests for the Singleton demonstration."""

import copy
import threading

import pytest

from src.patterns.creational import singleton
from src.patterns.creational.singleton import Singleton


@pytest.mark.usefixtures("reset_singleton")
class TestSingleton:
    """Test lazy creation, thread safety and the two-thread narration."""

    def test_first_value_wins(self):
        """Test later calls return the first instance and ignore their value."""
        first = Singleton.get_instance("FOO")
        second = Singleton.get_instance("BAR")

        assert first is second
        assert second.value == "FOO"

    def test_direct_construction_refused(self):
        """Test the constructor cannot be used directly."""
        with pytest.raises(TypeError):
            Singleton("FOO")

    def test_copy_refused(self):
        """Test the instance cannot be cloned."""
        instance = Singleton.get_instance("FOO")
        with pytest.raises(TypeError):
            copy.copy(instance)
        with pytest.raises(TypeError):
            copy.deepcopy(instance)

    def test_concurrent_access_creates_one_instance(self):
        """Test many racing threads all see the same instance."""
        barrier = threading.Barrier(8)
        seen = []

        def worker(value):
            barrier.wait()
            seen.append(Singleton.get_instance(value))

        threads = [threading.Thread(target=worker, args=(str(i),)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(seen) == 8
        assert all(instance is seen[0] for instance in seen)

    def test_transcript(self, capsys, fast_config):
        """Test both threads print the same winning value."""
        assert singleton.main(fast_config) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0] == lines[1]
        assert lines[0] in ("FOO", "BAR")
