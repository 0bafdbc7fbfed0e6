# simplestate/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import List, Optional

from simplestate.interfaces.protocols import TransitionObserver
from simplestate.interfaces.types import StateID


class HookManager:
    """
    Manages the registration and execution of observers that listen to machine
    lifecycle events (on_register, on_enter, on_exit, on_transition, on_error).
    Users can attach logging, monitoring, or animation sequencing without
    altering state logic.
    """

    def __init__(self, hooks: Optional[List[TransitionObserver]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List[TransitionObserver] = list(hooks or [])

    @property
    def hooks(self) -> List[TransitionObserver]:
        return list(self._hooks)

    def register_hook(self, hook: TransitionObserver) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing some or all TransitionObserver methods.
        """
        self._hooks.append(hook)

    def execute_on_register(self, state_id: StateID) -> None:
        self._invoke("on_register", state_id)

    def execute_on_enter(self, state_id: StateID) -> None:
        """
        Run all hooks' on_enter logic after a state's load_state returned.
        """
        self._invoke("on_enter", state_id)

    def execute_on_exit(self, state_id: StateID) -> None:
        """
        Run all hooks' on_exit logic after a state's unload_state returned.
        """
        self._invoke("on_exit", state_id)

    def execute_on_transition(self, previous_id: Optional[StateID], next_id: StateID) -> None:
        self._invoke("on_transition", previous_id, next_id)

    def execute_on_error(self, error: Exception) -> None:
        """
        Run all hooks' on_error logic when a state hook raised.
        """
        self._invoke("on_error", error)

    def _invoke(self, method: str, *args) -> None:
        for hook in self._hooks:
            callback = getattr(hook, method, None)
            if callback is not None:
                callback(*args)
