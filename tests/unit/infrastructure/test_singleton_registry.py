"""Tests for class-keyed singleton access."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from shared_registry.domain.core.exceptions import ConstructionFailureError
from shared_registry.infrastructure.patterns import SingletonRegistry, get_singleton


class TestSingletonRegistry:
    """Test SingletonRegistry and get_singleton."""

    def test_registry_itself_is_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_same_instance_per_class(self):
        class Settings:
            def __init__(self, value):
                self.value = value

        first = get_singleton(Settings, "a")
        second = get_singleton(Settings, "b")

        assert first is second
        assert first.value == "a"
        assert SingletonRegistry.get_instance().is_registered(Settings)
        assert Settings in SingletonRegistry.get_instance().registered_classes()

    def test_different_classes_get_different_instances(self):
        class First:
            pass

        class Second:
            pass

        assert get_singleton(First) is not get_singleton(Second)

    def test_concurrent_access_constructs_once(self):
        created = []
        lock = threading.Lock()

        class Expensive:
            def __init__(self):
                with lock:
                    created.append(self)
                threading.Event().wait(0.02)

        barrier = threading.Barrier(50, timeout=10)

        def access(_):
            barrier.wait()
            return get_singleton(Expensive)

        with ThreadPoolExecutor(max_workers=50) as executor:
            results = list(executor.map(access, range(50)))

        assert len(created) == 1
        assert all(result is created[0] for result in results)

    def test_constructor_failure_is_retried(self):
        attempts = []

        class Flaky:
            def __init__(self):
                attempts.append(1)
                if len(attempts) == 1:
                    raise ValueError("not yet")

        with pytest.raises(ConstructionFailureError):
            get_singleton(Flaky)
        assert not SingletonRegistry.get_instance().is_registered(Flaky)

        instance = get_singleton(Flaky)
        assert get_singleton(Flaky) is instance
        assert len(attempts) == 2


class TestPublicExports:
    """Test singleton helpers are importable from the package root."""

    def test_package_root_exports(self):
        import shared_registry
        from shared_registry.infrastructure import patterns

        assert shared_registry.get_singleton is patterns.get_singleton
        assert shared_registry.SingletonRegistry is patterns.SingletonRegistry
        assert "get_singleton" in shared_registry.__all__
        assert "SingletonRegistry" in shared_registry.__all__
