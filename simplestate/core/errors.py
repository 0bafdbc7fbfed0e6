# simplestate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Dict, Optional


class FSMError(Exception):
    """
    Base exception class for errors within the state machine library.

    :param message: Human readable description.
    :param details: Optional context, e.g. the offending state identifier.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.details = details or {}


class RegistrationError(FSMError):
    """
    Raised when a state cannot be added to a machine.
    """


class DuplicateIdentifierError(RegistrationError):
    """
    Raised when a state identifier is registered twice on the same machine.
    """

    def __init__(self, message: str, state_id: Any) -> None:
        super().__init__(message, {"state_id": state_id})
        self.state_id = state_id


class InvalidStateError(RegistrationError):
    """
    Raised when the object being registered does not provide the lifecycle hooks.
    """


class StateOwnershipError(RegistrationError):
    """
    Raised when a state instance is already registered with another machine.
    """


class TransitionError(FSMError):
    """
    Raised when an attempted state transition is invalid or cannot be started.
    """


class UnknownIdentifierError(TransitionError):
    """
    Raised when a transition targets an identifier that was never registered.
    """

    def __init__(self, message: str, state_id: Any) -> None:
        super().__init__(message, {"state_id": state_id})
        self.state_id = state_id


class AlreadyStartedError(TransitionError):
    """
    Raised when start() is called on a machine that already has an active state.
    """


class MachineFaultedError(TransitionError):
    """
    Raised when a transition is requested while the machine is faulted.
    """
