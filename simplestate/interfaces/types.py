# simplestate/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Dict, Hashable

StateID = Hashable
SharedData = Dict[str, Any]

# Callback Types
TransitionFn = Callable[[StateID], None]
