"""Live editing of currency text fields.

Provides the LiveEditEngine state machine plus the value types it exchanges
with a host text field. Depends on the formatting package.

Python 3.13+.
"""

from .edit_state import EditDelta, EditState
from .engine import EditResult, EngineState, LiveEditEngine
from .guard import ReentrancyGuard
from .hooks import EditingHooks, EngineObserver, EngineUpdate

__all__ = [
    "EditDelta",
    "EditResult",
    "EditState",
    "EditingHooks",
    "EngineObserver",
    "EngineState",
    "EngineUpdate",
    "LiveEditEngine",
    "ReentrancyGuard",
]
