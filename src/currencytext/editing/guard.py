"""Reentrancy protection for LiveEditEngine.

Observers and hooks run while the engine is still handling the call that
triggered them. Writing back into the same engine from there would
interleave two edits over one half-updated state, so the guard rejects it
immediately instead.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

from currencytext.diagnostics import EngineReentrancyError, ErrorTemplate

__all__ = ["ReentrancyGuard"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReentrancyGuard:
    """Tracks the engine operation currently in progress.

    Usage:
        guard = ReentrancyGuard()
        with guard.enter("on_text_changed"):
            ...  # a nested guard.enter() raises EngineReentrancyError

    Mutability Note:
        Intentionally mutable; `active` is set on entry and cleared on exit.

    Attributes:
        active: Name of the running operation, or None when idle
    """

    active: str | None = None

    @property
    def is_active(self) -> bool:
        return self.active is not None

    def check(self, operation: str) -> None:
        """Raise if an operation is already running.

        Raises:
            EngineReentrancyError: If called while another operation is active
        """
        if self.active is not None:
            logger.debug("Rejected reentrant %s() during %s()", operation, self.active)
            raise EngineReentrancyError(ErrorTemplate.reentrant_call(operation, self.active))

    @contextmanager
    def enter(self, operation: str) -> Generator[None]:
        """Mark operation as running for the duration of the block.

        Checks before marking, so a rejected entry leaves the running
        operation's state untouched.
        """
        self.check(operation)
        self.active = operation
        try:
            yield
        finally:
            self.active = None
