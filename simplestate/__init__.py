"""simplestate: a minimal finite state machine runtime

A Machine keeps a registry of named states, shares one mutable data dict between
them, and moves between them one transition at a time.

Responsibilities:
    - State registration (runs each state's initialize hook once)
    - Transitions (unload_state on the outgoing state, load_state on the incoming one)
    - Shared data ownership

Cross-cutting Concerns:
    Thread Safety:
        - None. Machines are meant to be driven from a single thread.

    Error Handling:
        - Structured error hierarchy rooted at FSMError
        - Hook failures fault the machine and propagate unless a recovery
          strategy is installed

    Logging:
        - Standard library logging under the "simplestate" logger
"""

import logging

from .core.errors import (
    AlreadyStartedError,
    DuplicateIdentifierError,
    FSMError,
    InvalidStateError,
    MachineFaultedError,
    RegistrationError,
    StateOwnershipError,
    TransitionError,
    UnknownIdentifierError,
)
from .core.hooks import HookManager
from .core.machine import ErrorRecoveryStrategy, Machine, MachineStatus
from .core.states import CallbackState, State
from .interfaces.protocols import StateProtocol, TransitionObserver

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Machine",
    "MachineStatus",
    "ErrorRecoveryStrategy",
    "HookManager",
    "State",
    "CallbackState",
    "StateProtocol",
    "TransitionObserver",
    "FSMError",
    "RegistrationError",
    "DuplicateIdentifierError",
    "InvalidStateError",
    "StateOwnershipError",
    "TransitionError",
    "UnknownIdentifierError",
    "AlreadyStartedError",
    "MachineFaultedError",
]
