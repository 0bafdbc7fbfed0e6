# simplestate/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Optional, Protocol, runtime_checkable

from simplestate.interfaces.types import SharedData, StateID, TransitionFn


@runtime_checkable
class StateProtocol(Protocol):
    """
    State protocol for type checking.

    Methods:
        initialize(shared_data): Called exactly once, when the state is registered.
        load_state(previous_id, transition_fn, shared_data): Called on entry.
        unload_state(next_id, shared_data): Called on exit.

    Runtime Invariants:
    - A state instance belongs to exactly one Machine.
    - The Machine never inspects anything beyond these three methods.

    Error Handling:
    - Exceptions raised by a hook propagate out of the Machine operation that
      invoked it. The Machine does not isolate states from each other.
    """

    def initialize(self, shared_data: SharedData) -> None:
        """Prepare the state. Runs once, at registration time."""
        ...

    def load_state(
        self, previous_id: Optional[StateID], transition_fn: TransitionFn, shared_data: SharedData
    ) -> None:
        """
        Enter the state.

        ``previous_id`` is None on the machine's first transition. ``transition_fn``
        requests the next transition; states typically hand it to their own
        event handlers or timers.
        """
        ...

    def unload_state(self, next_id: StateID, shared_data: SharedData) -> None:
        """Leave the state. Anything started in load_state should be stopped here."""
        ...


@runtime_checkable
class TransitionObserver(Protocol):
    """
    Protocol for machine observers.

    Every method is optional at runtime; HookManager skips the ones an observer
    does not define.

    Runtime Invariants:
    - Observers don't modify machine behavior
    - Observers run after the state hook they mirror
    """

    def on_register(self, state_id: StateID) -> None: ...

    def on_enter(self, state_id: StateID) -> None: ...

    def on_exit(self, state_id: StateID) -> None: ...

    def on_transition(self, previous_id: Optional[StateID], next_id: StateID) -> None: ...

    def on_error(self, error: Exception) -> None: ...
