# simplestate/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Callable, Optional

from simplestate.interfaces.types import SharedData, StateID, TransitionFn

_HOOK_NAMES = ("initialize", "load_state", "unload_state")


def is_state(obj: Any) -> bool:
    """Return True if ``obj`` provides all three callable lifecycle hooks."""
    return all(callable(getattr(obj, name, None)) for name in _HOOK_NAMES)


class State:
    """
    Base class for states. Every hook is a no-op, so subclasses only override
    the ones they need.

    Subclasses may carry any extra fields or methods; the Machine only ever calls
    the three lifecycle hooks.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        """
        :param name: Optional label, used in repr and log output only. The
            identifier a state is registered under is chosen by the caller.
        """
        self.name = name or type(self).__name__

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def initialize(self, shared_data: SharedData) -> None:
        pass

    def load_state(
        self, previous_id: Optional[StateID], transition_fn: TransitionFn, shared_data: SharedData
    ) -> None:
        pass

    def unload_state(self, next_id: StateID, shared_data: SharedData) -> None:
        pass


class CallbackState(State):
    """
    A state assembled from plain functions instead of a subclass.

    Example:
        splash = CallbackState(
            "Splash",
            on_load=lambda prev, go, data: go("menu"),
        )
    """

    def __init__(
        self,
        name: Optional[str] = None,
        on_initialize: Optional[Callable[[SharedData], None]] = None,
        on_load: Optional[Callable[[Optional[StateID], TransitionFn, SharedData], None]] = None,
        on_unload: Optional[Callable[[StateID, SharedData], None]] = None,
    ) -> None:
        """
        :param name: Label for repr and logging.
        :param on_initialize: Called with the shared data at registration.
        :param on_load: Called with (previous_id, transition_fn, shared_data) on entry.
        :param on_unload: Called with (next_id, shared_data) on exit.
        """
        super().__init__(name=name)
        self._on_initialize = on_initialize
        self._on_load = on_load
        self._on_unload = on_unload

    def initialize(self, shared_data: SharedData) -> None:
        if self._on_initialize:
            self._on_initialize(shared_data)

    def load_state(
        self, previous_id: Optional[StateID], transition_fn: TransitionFn, shared_data: SharedData
    ) -> None:
        if self._on_load:
            self._on_load(previous_id, transition_fn, shared_data)

    def unload_state(self, next_id: StateID, shared_data: SharedData) -> None:
        if self._on_unload:
            self._on_unload(next_id, shared_data)
