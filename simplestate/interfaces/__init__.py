"""
Interfaces package: the contract between the Machine and caller-authored states.
"""

from .protocols import StateProtocol, TransitionObserver
from .types import SharedData, StateID, TransitionFn

__all__ = ["StateProtocol", "TransitionObserver", "SharedData", "StateID", "TransitionFn"]
