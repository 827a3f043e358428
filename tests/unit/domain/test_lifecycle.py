"""Tests for registry lifecycle states."""

import pytest

from shared_registry.domain.core.exceptions import InvalidStateTransitionError
from shared_registry.domain.registry import RegistryState


class TestRegistryState:
    """Test lifecycle transitions."""

    def test_uninitialized_to_ready(self):
        assert RegistryState.UNINITIALIZED.transition_to(RegistryState.READY) is RegistryState.READY

    def test_ready_is_absorbing(self):
        with pytest.raises(InvalidStateTransitionError) as exc_info:
            RegistryState.READY.transition_to(RegistryState.UNINITIALIZED)
        assert exc_info.value.current_state == "ready"
        assert exc_info.value.attempted_state == "uninitialized"

    def test_ready_to_ready_rejected(self):
        assert not RegistryState.READY.can_transition_to(RegistryState.READY)
        with pytest.raises(InvalidStateTransitionError):
            RegistryState.READY.transition_to(RegistryState.READY)

    def test_uninitialized_to_uninitialized_rejected(self):
        assert not RegistryState.UNINITIALIZED.can_transition_to(RegistryState.UNINITIALIZED)
