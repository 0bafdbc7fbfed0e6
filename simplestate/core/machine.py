# simplestate/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Machine: the state registry and transition controller.

A Machine owns three things that nothing else may touch directly:
- the registry mapping state identifiers to state objects
- the shared data dict handed to every state hook
- the identifier of the active state

States are registered once (which runs their ``initialize`` hook) and are then
entered and left through ``start``/``transition_to``. Transitions requested while
another transition is still running are queued and run, in order, as soon as the
running one completes.
"""

import logging
import weakref
from collections import deque
from enum import Enum, auto
from typing import Any, Deque, Dict, Iterator, List, Mapping, Optional, Tuple

from simplestate.core.errors import (
    AlreadyStartedError,
    DuplicateIdentifierError,
    InvalidStateError,
    MachineFaultedError,
    RegistrationError,
    StateOwnershipError,
    UnknownIdentifierError,
)
from simplestate.core.hooks import HookManager
from simplestate.core.states import is_state
from simplestate.interfaces.protocols import StateProtocol, TransitionObserver
from simplestate.interfaces.types import SharedData, StateID, TransitionFn

logger = logging.getLogger(__name__)


class MachineStatus(Enum):
    """Defines the possible states of a machine."""

    IDLE = auto()  # No state loaded yet
    TRANSITIONING = auto()  # Inside unload_state/load_state
    ACTIVE = auto()  # A state is loaded
    FAULTED = auto()  # A state hook or observer raised mid-transition


class ErrorRecoveryStrategy:
    """
    Interface for custom error recovery strategies.
    Subclasses can implement custom logic in `recover`.

    When a Machine has a strategy, an exception raised by a state hook during a
    transition is passed to ``recover`` instead of propagating to the caller.
    The machine is already FAULTED at that point; call ``machine.clear_fault()``
    to allow further transitions.
    """

    def recover(self, error: Exception, machine: "Machine") -> None:
        pass


class Machine:
    """
    A flat finite state machine. States are looked up by identifier; at most one
    is active at a time.

    :param shared_data: Optional initial contents of the shared data dict. The
        mapping is copied.
    :param transition_fn: Optional override passed to every ``load_state`` call
        in place of this machine's own ``transition_to``. Use it to intercept
        transition requests (logging, animation sequencing) without changing
        states. The override is responsible for eventually calling
        ``transition_to``.
    :param hooks: Optional list of observers (see TransitionObserver).
    :param error_recovery: Optional strategy handling exceptions raised by state
        hooks during a transition.
    """

    # id(state) -> owning machine. Entries vanish with their machine.
    _owners: "weakref.WeakValueDictionary[int, Machine]" = weakref.WeakValueDictionary()

    def __init__(
        self,
        shared_data: Optional[Mapping[str, Any]] = None,
        transition_fn: Optional[TransitionFn] = None,
        hooks: Optional[List[TransitionObserver]] = None,
        error_recovery: Optional[ErrorRecoveryStrategy] = None,
    ) -> None:
        self._states: Dict[StateID, StateProtocol] = {}
        self._shared_data: SharedData = dict(shared_data or {})
        self._current_state: Optional[StateID] = None
        self._status = MachineStatus.IDLE
        self._transition_fn = transition_fn
        self._hooks = HookManager(hooks)
        self._error_recovery = error_recovery
        self._pending: Deque[StateID] = deque()

    @property
    def current_state(self) -> Optional[StateID]:
        """Identifier of the active state, or None before the first transition."""
        return self._current_state

    @property
    def status(self) -> MachineStatus:
        return self._status

    @property
    def state_ids(self) -> Tuple[StateID, ...]:
        """Registered identifiers, in registration order."""
        return tuple(self._states)

    def is_registered(self, state_id: StateID) -> bool:
        return state_id in self._states

    def __contains__(self, state_id: object) -> bool:
        return state_id in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[StateID]:
        return iter(tuple(self._states))

    def __repr__(self) -> str:
        return f"<Machine current={self._current_state!r} status={self._status.name} states={len(self._states)}>"

    def add_hook(self, hook: TransitionObserver) -> None:
        self._hooks.register_hook(hook)

    def register(self, state_id: StateID, state: StateProtocol) -> None:
        """
        Add a state under ``state_id`` and run its ``initialize`` hook.

        :raises DuplicateIdentifierError: ``state_id`` is already registered. The
            existing state is kept and the new one is not initialized.
        :raises InvalidStateError: ``state`` lacks one of the lifecycle hooks.
        :raises StateOwnershipError: ``state`` belongs to another machine.
        """
        if state_id is None:
            raise RegistrationError("None cannot be used as a state identifier")
        if state_id in self._states:
            raise DuplicateIdentifierError(f"State '{state_id}' is already registered", state_id)
        if not is_state(state):
            raise InvalidStateError(
                f"Object registered as '{state_id}' must define initialize, load_state and unload_state",
                {"state_id": state_id, "type": type(state).__name__},
            )
        owner = Machine._owners.get(id(state))
        if owner is not None and owner is not self:
            raise StateOwnershipError(
                f"State registered as '{state_id}' already belongs to another machine",
                {"state_id": state_id},
            )

        self._states[state_id] = state
        Machine._owners[id(state)] = self
        try:
            state.initialize(self._shared_data)
            self._hooks.execute_on_register(state_id)
        except Exception:
            del self._states[state_id]
            if not any(other is state for other in self._states.values()):
                Machine._owners.pop(id(state), None)
            raise

        logger.debug("Registered %r as %r", state, state_id)

    def start(self, state_id: StateID) -> None:
        """
        Perform the first transition.

        :raises UnknownIdentifierError: ``state_id`` is not registered.
        :raises AlreadyStartedError: a state is already active.
        """
        self._require_registered(state_id)
        if self._current_state is not None or self._status is MachineStatus.TRANSITIONING:
            raise AlreadyStartedError(
                f"Machine already started in state '{self._current_state}'",
                {"state_id": state_id, "current_state": self._current_state},
            )
        self.transition_to(state_id)

    def transition_to(self, state_id: StateID) -> None:
        """
        Unload the active state (if any) and load ``state_id``.

        Self transitions are allowed and run both hooks. A call made from inside
        a hook is queued and runs once the current transition has completed.

        :raises UnknownIdentifierError: ``state_id`` is not registered; nothing
            runs and ``current_state`` is unchanged.
        :raises MachineFaultedError: an earlier transition failed and the fault
            has not been cleared.
        """
        self._require_registered(state_id)
        if self._status is MachineStatus.FAULTED:
            raise MachineFaultedError(
                "Machine is faulted; call clear_fault() before transitioning",
                {"state_id": state_id, "current_state": self._current_state},
            )

        self._pending.append(state_id)
        if self._status is MachineStatus.TRANSITIONING:
            logger.debug("Queued transition to %r", state_id)
            return

        while self._pending:
            self._execute_transition(self._pending.popleft())

    def clear_fault(self) -> None:
        """Leave the FAULTED status. ``current_state`` is not touched."""
        if self._status is not MachineStatus.FAULTED:
            return
        self._status = MachineStatus.IDLE if self._current_state is None else MachineStatus.ACTIVE
        logger.debug("Fault cleared, machine is %s", self._status.name)

    def _require_registered(self, state_id: StateID) -> None:
        if state_id not in self._states:
            raise UnknownIdentifierError(f"No state registered as '{state_id}'", state_id)

    def _execute_transition(self, target: StateID) -> None:
        """Run unload/load for one transition, then move the active-state pointer."""
        previous = self._current_state
        self._status = MachineStatus.TRANSITIONING
        logger.debug("Transition %r -> %r", previous, target)

        try:
            if previous is not None:
                self._states[previous].unload_state(target, self._shared_data)
                self._hooks.execute_on_exit(previous)

            self._states[target].load_state(previous, self._dispatch(), self._shared_data)
            self._hooks.execute_on_enter(target)
            self._hooks.execute_on_transition(previous, target)
        except Exception as error:
            self._fault(error, previous, target)
            if self._error_recovery is None:
                raise
            self._error_recovery.recover(error, self)
        else:
            self._current_state = target
            self._status = MachineStatus.ACTIVE

    def _dispatch(self) -> TransitionFn:
        return self._transition_fn or self.transition_to

    def _fault(self, error: Exception, previous: Optional[StateID], target: StateID) -> None:
        self._status = MachineStatus.FAULTED
        dropped = len(self._pending)
        self._pending.clear()
        logger.warning(
            "Transition %r -> %r failed with %s; machine faulted in state %r (%d queued transition(s) dropped)",
            previous,
            target,
            type(error).__name__,
            self._current_state,
            dropped,
        )
        self._hooks.execute_on_error(error)
