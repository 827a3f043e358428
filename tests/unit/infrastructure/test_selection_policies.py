"""Tests for selection policies, their factory and statistics."""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest

from shared_registry.config.schemas import RegistryConfig
from shared_registry.domain.core.exceptions import EmptyResourceSetError
from shared_registry.domain.resource import ResourceId, ResourceSet
from shared_registry.infrastructure.selection import (
    RandomSelectionPolicy,
    RoundRobinSelectionPolicy,
    SelectionPolicy,
    SelectionStats,
    WeightedRandomSelectionPolicy,
    create_selection_policy,
)


@pytest.fixture
def resources(servers):
    return ResourceSet.from_names(servers)


class TestRandomSelectionPolicy:
    """Test uniform random selection."""

    def test_selection_is_member(self, resources):
        policy = RandomSelectionPolicy()
        for _ in range(200):
            assert policy.select(resources) in resources

    def test_seeded_selection_is_reproducible(self, resources):
        first = RandomSelectionPolicy(seed=42)
        second = RandomSelectionPolicy(seed=42)

        assert [first.select(resources) for _ in range(20)] == [
            second.select(resources) for _ in range(20)
        ]

    def test_empty_set(self):
        with pytest.raises(EmptyResourceSetError):
            RandomSelectionPolicy().select(ResourceSet.from_names([]))


class TestRoundRobinSelectionPolicy:
    """Test round-robin selection."""

    def test_cycles_in_order(self, resources, servers):
        policy = RoundRobinSelectionPolicy()
        picked = [str(policy.select(resources)) for _ in range(len(servers) * 2)]
        assert picked == servers * 2

    def test_concurrent_selection_keeps_counter_consistent(self, resources, servers):
        policy = RoundRobinSelectionPolicy()

        with ThreadPoolExecutor(max_workers=8) as executor:
            picked = list(executor.map(lambda _: str(policy.select(resources)), range(500)))

        # Every resource is handed out exactly 100 times when no update is lost
        assert Counter(picked) == {name: 100 for name in servers}

    def test_empty_set(self):
        with pytest.raises(EmptyResourceSetError):
            RoundRobinSelectionPolicy().select(ResourceSet.from_names([]))


class TestWeightedRandomSelectionPolicy:
    """Test weighted random selection."""

    def test_only_weighted_resources_dominate(self):
        resources = ResourceSet.from_names(["heavy", "light"])
        policy = WeightedRandomSelectionPolicy(weights={"heavy": 99}, seed=1)

        picked = Counter(str(policy.select(resources)) for _ in range(1000))

        assert picked["heavy"] > picked["light"]
        assert set(picked) <= {"heavy", "light"}

    def test_default_weight_is_one(self):
        policy = WeightedRandomSelectionPolicy(seed=3)
        resources = ResourceSet.from_names(["only"])
        assert policy.select(resources) == ResourceId.of("only")

    def test_non_positive_weight_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            WeightedRandomSelectionPolicy(weights={"a": 0})

    def test_weights_are_copied(self):
        weights = {"a": 2}
        policy = WeightedRandomSelectionPolicy(weights=weights)
        weights["a"] = 5
        assert policy.weights == {"a": 2}


class TestCreateSelectionPolicy:
    """Test the policy factory."""

    @pytest.mark.parametrize(
        "algorithm, policy_class",
        [
            ("random", RandomSelectionPolicy),
            ("round_robin", RoundRobinSelectionPolicy),
            ("weighted_random", WeightedRandomSelectionPolicy),
        ],
    )
    def test_creates_configured_policy(self, algorithm, policy_class):
        policy = create_selection_policy(RegistryConfig(selection_policy=algorithm))
        assert isinstance(policy, policy_class)
        assert policy.name == algorithm

    def test_weights_and_seed_passed_through(self):
        config = RegistryConfig(
            selection_policy="weighted_random", weights={"ServerI": 4}, seed=11
        )
        policy = create_selection_policy(config)
        assert policy.weights == {"ServerI": 4}

    def test_cannot_instantiate_abstract_base(self):
        with pytest.raises(TypeError):
            SelectionPolicy()


class TestSelectionStats:
    """Test selection statistics."""

    def test_records_counts(self):
        stats = SelectionStats()
        stats.record(ResourceId.of("ServerI"))
        stats.record(ResourceId.of("ServerI"))
        stats.record(ResourceId.of("ServerII"))

        assert stats.total == 3
        assert stats.count_for("ServerI") == 2
        assert stats.count_for("ServerV") == 0
        assert stats.snapshot() == {"ServerI": 2, "ServerII": 1}

    def test_snapshot_is_a_copy(self):
        stats = SelectionStats()
        stats.record(ResourceId.of("ServerI"))
        snapshot = stats.snapshot()
        snapshot["ServerI"] = 10
        assert stats.count_for("ServerI") == 1
