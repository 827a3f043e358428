"""Registry lifecycle states."""

from enum import Enum

from shared_registry.domain.core.exceptions import InvalidStateTransitionError


class RegistryState(str, Enum):
    """Lifecycle of a shared registry slot.

    A slot starts UNINITIALIZED and becomes READY exactly once, after the
    first successful construction. READY is absorbing: there is no teardown.
    """

    UNINITIALIZED = "uninitialized"
    READY = "ready"

    def can_transition_to(self, target: "RegistryState") -> bool:
        """Check whether the transition to target is allowed."""
        return self is RegistryState.UNINITIALIZED and target is RegistryState.READY

    def transition_to(self, target: "RegistryState") -> "RegistryState":
        """
        Validate and perform a state transition.

        Raises:
            InvalidStateTransitionError: For anything but UNINITIALIZED -> READY
        """
        if not self.can_transition_to(target):
            raise InvalidStateTransitionError(self.value, target.value)
        return target
