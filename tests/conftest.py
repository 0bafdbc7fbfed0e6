# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, List, Optional
from unittest.mock import MagicMock

import pytest

from simplestate.core.machine import Machine
from simplestate.core.states import State


class RecordingState(State):
    """A State that appends every hook call to a shared call log."""

    def __init__(self, name: str, log: List[Any]) -> None:
        super().__init__(name=name)
        self.log = log
        self.transition_fn = None

    def initialize(self, shared_data):
        self.log.append((self.name, "initialize"))

    def load_state(self, previous_id, transition_fn, shared_data):
        self.transition_fn = transition_fn
        self.log.append((self.name, "load", previous_id))

    def unload_state(self, next_id, shared_data):
        self.log.append((self.name, "unload", next_id))


class RecordingHook:
    """Observer collecting every notification it receives."""

    def __init__(self):
        self.events = []

    def on_register(self, state_id):
        self.events.append(("register", state_id))

    def on_enter(self, state_id):
        self.events.append(("enter", state_id))

    def on_exit(self, state_id):
        self.events.append(("exit", state_id))

    def on_transition(self, previous_id, next_id):
        self.events.append(("transition", previous_id, next_id))

    def on_error(self, error):
        self.events.append(("error", error))


@pytest.fixture
def call_log() -> List[Any]:
    return []


@pytest.fixture
def state_factory(call_log):
    """Returns a factory building RecordingStates that share one call log."""

    def _factory(name: str) -> RecordingState:
        return RecordingState(name, call_log)

    return _factory


@pytest.fixture
def machine() -> Machine:
    return Machine()


@pytest.fixture
def ab_machine(machine, state_factory):
    """A machine with states "A" and "B" registered and not yet started."""
    machine.register("A", state_factory("A"))
    machine.register("B", state_factory("B"))
    return machine


@pytest.fixture
def mock_state():
    """A MagicMock restricted to the three lifecycle hooks."""
    return MagicMock(spec=["initialize", "load_state", "unload_state"])


@pytest.fixture
def recording_hook() -> RecordingHook:
    return RecordingHook()


@pytest.fixture
def failing_state():
    """Returns a factory for states whose chosen hook raises RuntimeError."""

    def _factory(hook: str, message: Optional[str] = None) -> MagicMock:
        state = MagicMock(spec=["initialize", "load_state", "unload_state"])
        getattr(state, hook).side_effect = RuntimeError(message or f"{hook} failed")
        return state

    return _factory


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from simplestate.core.errors import (
        DuplicateIdentifierError,
        FSMError,
        RegistrationError,
        TransitionError,
        UnknownIdentifierError,
    )

    return (FSMError, RegistrationError, TransitionError, DuplicateIdentifierError, UnknownIdentifierError)
