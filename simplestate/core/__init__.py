"""
Core package: states, the machine, observer hooks and errors.
"""

from .errors import FSMError
from .hooks import HookManager
from .machine import ErrorRecoveryStrategy, Machine, MachineStatus
from .states import CallbackState, State

__all__ = [
    "FSMError",
    "HookManager",
    "ErrorRecoveryStrategy",
    "Machine",
    "MachineStatus",
    "CallbackState",
    "State",
]
