import logging
import threading
from typing import List

import pytest

from shared_registry.config.schemas import RegistryConfig
from shared_registry.infrastructure.logging import PACKAGE_LOGGER
from shared_registry.infrastructure.registry import SharedRegistry

SERVERS = ["ServerI", "ServerII", "ServerIII", "ServerIV", "ServerV"]


@pytest.fixture(autouse=True)
def clean_registry_env(monkeypatch):
    """Keep SHARED_REGISTRY_* variables from the host out of the tests."""
    for name in (
        "SHARED_REGISTRY_CONFIG_FILE",
        "SHARED_REGISTRY_RESOURCES",
        "SHARED_REGISTRY_SELECTION_POLICY",
        "SHARED_REGISTRY_SEED",
        "SHARED_REGISTRY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_package_log_level():
    """Undo log levels applied by registries built from configuration."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield
    package_logger.setLevel(level)


@pytest.fixture
def servers() -> List[str]:
    return list(SERVERS)


def make_registry_class(resources=None, selection_policy="random", fail_times=0, delay=0.0):
    """
    Create an independent SharedRegistry subclass with its own lifecycle slot.

    The returned class counts factory calls in ``factory_calls`` and raises
    RuntimeError for the first ``fail_times`` calls.
    """
    names = list(SERVERS) if resources is None else list(resources)
    calls_lock = threading.Lock()

    class CountingRegistry(SharedRegistry):
        factory_calls = 0

        @classmethod
        def _create_instance(cls):
            with calls_lock:
                cls.factory_calls += 1
                call_number = cls.factory_calls
            if delay:
                threading.Event().wait(delay)
            if call_number <= fail_times:
                raise RuntimeError(f"configuration source unavailable (call {call_number})")
            return cls.from_config(
                RegistryConfig(resources=names, selection_policy=selection_policy)
            )

    return CountingRegistry


@pytest.fixture
def registry_class():
    """Fresh registry class holding the five default servers."""
    return make_registry_class()


@pytest.fixture
def registry_class_factory():
    """Factory for registry classes with custom resources, policy or failures."""
    return make_registry_class
