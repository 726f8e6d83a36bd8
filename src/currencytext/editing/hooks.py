"""Callbacks connecting the engine to its host text field.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

__all__ = ["EditingHooks", "EngineObserver", "EngineUpdate"]


@dataclass(frozen=True, slots=True)
class EngineUpdate:
    """Snapshot published to observers after the engine state changes.

    Attributes:
        text: Display text for the field
        unformatted_text: Minor units as a digit string, "" when empty
        input_amount: Current value, or None when the field is empty
    """

    text: str
    unformatted_text: str
    input_amount: Decimal | None


EngineObserver: TypeAlias = Callable[[EngineUpdate], None]


def _ignore_editing_changed(is_editing: bool) -> None:
    return None


def _ignore_commit() -> None:
    return None


@dataclass(frozen=True, slots=True)
class EditingHooks:
    """Focus and commit callbacks supplied by the host field.

    Missing callbacks are explicit no-ops rather than None, so the engine
    calls hooks unconditionally.

    Attributes:
        on_editing_changed: Called with True when editing begins and False
            when it ends
        on_commit: Called when the user commits (e.g. presses Return)
    """

    on_editing_changed: Callable[[bool], None] = _ignore_editing_changed
    on_commit: Callable[[], None] = _ignore_commit

    @classmethod
    def none(cls) -> EditingHooks:
        """Hooks that do nothing."""
        return _NO_HOOKS


_NO_HOOKS = EditingHooks()
