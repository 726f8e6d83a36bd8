"""Live edit engine for a currency text field.

LiveEditEngine owns the state of one field. Every keystroke the host
reports is parsed into a CanonicalAmount and formatted back, so the text
on screen is always the formatted amount. The cursor is carried across by
logical digit position: it stays after the same digit it followed in the
raw input, however many separators were inserted or removed around it.

State machine:
    EMPTY -> EDITING      first keystroke that produces content
    EDITING -> EDITING    each further keystroke
    EDITING -> EMPTY      input cleared, or zero committed with
                          clears_when_value_is_zero
    EDITING -> COMMITTED  focus loss or commit()
    COMMITTED -> EDITING  focus regained, or a keystroke arrives

Architecture:
    - EditState recovers the edit delta from the reported text
    - AmountParser and AmountFormatter do the conversions
    - Observers receive an EngineUpdate after every state change
    - ReentrancyGuard rejects calls made from observers and hooks

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from currencytext.constants import MAX_INPUT_DIGITS
from currencytext.formatting import (
    AmountFormatter,
    AmountParser,
    CanonicalAmount,
    CurrencyFormatSettings,
)
from currencytext.formatting.amount import decimal_from, fits_input_digits
from currencytext.formatting.parser import is_digit

from .edit_state import EditDelta, EditState
from .guard import ReentrancyGuard
from .hooks import EditingHooks, EngineObserver, EngineUpdate

__all__ = ["EditResult", "EngineState", "LiveEditEngine"]

logger = logging.getLogger(__name__)


class EngineState(StrEnum):
    """Lifecycle state of a field."""

    EMPTY = "empty"
    EDITING = "editing"
    COMMITTED = "committed"


@dataclass(frozen=True, slots=True)
class EditResult:
    """Text and cursor the host should apply to its field."""

    display_text: str
    cursor_index: int


def _digit_positions(text: str) -> list[int]:
    return [i for i, ch in enumerate(text) if is_digit(ch)]


class LiveEditEngine:
    """Parse-and-format loop behind a single currency text field.

    Example:
        >>> from currencytext import CurrencyFormatSettings
        >>> engine = LiveEditEngine(CurrencyFormatSettings.for_locale("USD", "en_US"))
        >>> engine.on_text_changed("1").display_text
        '$0.01'
        >>> engine.on_text_changed("$0.012").display_text
        '$0.12'
        >>> engine.on_text_changed("$0.123").display_text
        '$1.23'
        >>> engine.current_amount()
        Decimal('1.23')

    Thread Safety:
        Not thread-safe. Each field owns one engine, driven from one thread.
    """

    __slots__ = (
        "_amount",
        "_clears_when_value_is_zero",
        "_cursor",
        "_formatter",
        "_guard",
        "_has_focus",
        "_hooks",
        "_last_update",
        "_observers",
        "_parser",
        "_settings",
        "_state",
        "_text",
    )

    def __init__(
        self,
        settings: CurrencyFormatSettings,
        *,
        clears_when_value_is_zero: bool = False,
        hooks: EditingHooks | None = None,
        initial_amount: Decimal | int | float | None = None,
    ) -> None:
        """Create an engine for one field.

        Args:
            settings: Formatting configuration
            clears_when_value_is_zero: Clear the field instead of showing zero
                when editing ends on a zero amount
            hooks: Focus and commit callbacks; defaults to EditingHooks.none()
            initial_amount: Value shown before the first edit, committed and
                clamped to the configured limits
        """
        self._settings = settings
        self._parser = AmountParser(settings)
        self._formatter = AmountFormatter(settings)
        self._clears_when_value_is_zero = clears_when_value_is_zero
        self._hooks = hooks if hooks is not None else EditingHooks.none()
        self._guard = ReentrancyGuard()
        self._observers: list[EngineObserver] = []
        self._amount: CanonicalAmount | None = None
        self._text = ""
        self._cursor = 0
        self._state = EngineState.EMPTY
        self._has_focus = False
        self._last_update: EngineUpdate | None = None

        if initial_amount is not None:
            self._show(self._coerce(initial_amount), EngineState.COMMITTED)
        self._last_update = self._snapshot()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def settings(self) -> CurrencyFormatSettings:
        return self._settings

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def text(self) -> str:
        """Text currently displayed."""
        return self._text

    @property
    def cursor_index(self) -> int:
        return self._cursor

    @property
    def has_focus(self) -> bool:
        return self._has_focus

    @property
    def clears_when_value_is_zero(self) -> bool:
        return self._clears_when_value_is_zero

    def current_amount(self) -> Decimal | None:
        """Current value with fraction_digits places, or None when empty."""
        if self._amount is None:
            return None
        return self._amount.to_decimal(self._settings.fraction_digits)

    def current_unformatted_text(self) -> str:
        """Minor units as a digit string without leading zeros, "" when empty."""
        if self._amount is None:
            return ""
        return str(self._amount.minor_units)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, observer: EngineObserver) -> Callable[[], None]:
        """Register observer for EngineUpdate notifications.

        Returns:
            Function that removes the observer again; calling it twice is harmless
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _snapshot(self) -> EngineUpdate:
        return EngineUpdate(
            text=self._text,
            unformatted_text=self.current_unformatted_text(),
            input_amount=self.current_amount(),
        )

    def _publish(self) -> None:
        update = self._snapshot()
        if update == self._last_update:
            return
        self._last_update = update
        for observer in tuple(self._observers):
            observer(update)

    # ------------------------------------------------------------------
    # Host events
    # ------------------------------------------------------------------

    def on_text_changed(self, raw_input: str, cursor_index: int | None = None) -> EditResult:
        """Handle the text the field reports after a keystroke or paste.

        Args:
            raw_input: Field text after the user's edit
            cursor_index: Cursor position in raw_input; defaults to the end
                of the changed range

        Returns:
            EditResult with the text and cursor to apply
        """
        with self._guard.enter("on_text_changed"):
            if cursor_index is not None:
                cursor_index = max(0, min(cursor_index, len(raw_input)))
            edit = EditState.from_texts(self._text, self._cursor, raw_input, cursor_index)
            result = self._apply_edit(edit)
            self._publish()
        return result

    def replace_range(self, start: int, end: int, replacement: str) -> EditResult:
        """Handle replacement of text[start:end] by replacement.

        Mirrors the "should change characters in range" callback of
        platform text fields, which reports the exact range.
        """
        with self._guard.enter("replace_range"):
            edit = EditState.from_replacement(self._text, self._cursor, start, end, replacement)
            result = self._apply_edit(edit)
            self._publish()
        return result

    def on_focus_changed(self, has_focus: bool) -> EditResult:
        """Handle focus gain (begin editing) or loss (finalize)."""
        with self._guard.enter("on_focus_changed"):
            self._has_focus = has_focus
            self._hooks.on_editing_changed(has_focus)
            if has_focus:
                if self._state is EngineState.COMMITTED:
                    self._transition(EngineState.EDITING)
                    self._cursor = self._end_cursor(self._text)
                result = EditResult(self._text, self._cursor)
            else:
                result = self._finalize()
            self._publish()
        return result

    def commit(self) -> EditResult:
        """Finalize the value as if the user pressed Return."""
        with self._guard.enter("commit"):
            self._hooks.on_commit()
            result = self._finalize()
            self._publish()
        return result

    def on_settings_changed(self, new_settings: CurrencyFormatSettings) -> EditResult:
        """Swap settings and reformat the current amount.

        When the number of fraction digits shrinks the amount is truncated
        toward zero ($1.99 becomes $1 when decimals are turned off).
        """
        with self._guard.enter("on_settings_changed"):
            old_digits = self._settings.fraction_digits
            self._settings = new_settings
            self._parser = AmountParser(new_settings)
            self._formatter = AmountFormatter(new_settings)
            logger.debug(
                "Settings changed to %s in %s, fraction digits %d -> %d",
                new_settings.currency,
                new_settings.locale,
                old_digits,
                new_settings.fraction_digits,
            )
            if self._amount is not None:
                amount = self._amount.rescale(old_digits, new_settings.fraction_digits)
                if not new_settings.allows_negative:
                    amount = CanonicalAmount(amount.minor_units)
                amount = self._clamp(amount, editing=self._state is EngineState.EDITING)
                self._show(amount, self._state)
            result = EditResult(self._text, self._cursor)
            self._publish()
        return result

    def set_amount(self, value: Decimal | int | float | None) -> EditResult:
        """Set the value programmatically, e.g. from a model binding.

        Extra fraction digits are truncated toward zero and floats are read
        by their shortest repr, so 0.29 stays 0.29. The value is clamped to
        max_value, min_value and the digit limits, so the field always
        accepts further edits. None empties the field. The state becomes
        COMMITTED unless the user is editing.

        Raises:
            ValueError: If value is NaN or infinite
        """
        with self._guard.enter("set_amount"):
            if value is None:
                self._clear()
            else:
                editing = self._has_focus
                state = EngineState.EDITING if editing else EngineState.COMMITTED
                self._show(self._coerce(value, editing=editing), state)
            result = EditResult(self._text, self._cursor)
            self._publish()
        return result

    # ------------------------------------------------------------------
    # Edit handling
    # ------------------------------------------------------------------

    def _apply_edit(self, edit: EditState) -> EditResult:
        redirected = self._redirect_separator_deletion(edit)
        if redirected is None:
            logger.debug("Ignored deletion of %r with no digit before it", edit.delta.removed)
            return EditResult(self._text, self._cursor)

        raw, cursor = redirected.new_raw_input, redirected.new_cursor
        amount = self._parse(raw)
        if amount is None:
            self._clear()
            return EditResult(self._text, self._cursor)

        if not self._within_limits(amount):
            logger.debug("Rejected edit %r: amount %s out of limits", raw, amount)
            return EditResult(self._text, self._cursor)

        display = self._formatter.format(amount, show_negative_zero=True)
        self._amount = amount
        self._text = display.text
        self._cursor = self._relocate_cursor(raw, cursor, display.text)
        self._transition(EngineState.EDITING)
        return EditResult(self._text, self._cursor)

    def _redirect_separator_deletion(self, edit: EditState) -> EditState | None:
        """Turn deletion of a separator or symbol into deletion of a digit.

        Backspacing over "," in "$1,234.00" deletes the "1" and yields
        "$234.00". Deletions that remove a digit or sign marker pass
        through unchanged. Returns None when no digit precedes the range.
        """
        delta = edit.delta
        if not delta.is_deletion or self._parser.has_content(delta.removed):
            return edit

        previous = edit.previous_text
        for index in range(delta.start - 1, -1, -1):
            if is_digit(previous[index]):
                raw = previous[:index] + previous[index + 1 :]
                return EditState(
                    previous_text=previous,
                    previous_cursor=edit.previous_cursor,
                    new_raw_input=raw,
                    new_cursor=index,
                    delta=EditDelta(index, previous[index], ""),
                )
        return None

    def _parse(self, raw: str) -> CanonicalAmount | None:
        """Parse raw, or None when it holds nothing that makes an amount."""
        amount = self._parser.parse(raw)
        if not self._settings.allows_negative and amount.is_negative:
            amount = CanonicalAmount(amount.minor_units)
        if not amount.is_negative and not self._parser.digits_of(raw):
            return None
        return amount

    def _within_limits(self, amount: CanonicalAmount) -> bool:
        settings = self._settings
        if amount.minor_units > self._max_minor_units():
            return False
        value = amount.to_decimal(settings.fraction_digits)
        if settings.max_value is not None and value > settings.max_value:
            return False
        return not (
            amount.is_negative and settings.min_value is not None and value < settings.min_value
        )

    def _relocate_cursor(self, raw: str, cursor: int, text: str) -> int:
        """Place the cursor after the same logical digit it followed in raw.

        Digits the formatter added (zero padding) or dropped (leading zeros)
        are all at the left end, so the count is shifted by the difference
        in digit totals before locating it in text.
        """
        positions = _digit_positions(text)
        if not positions:
            return len(text)
        raw_digits = sum(1 for ch in raw if is_digit(ch))
        digits_before = sum(1 for ch in raw[:cursor] if is_digit(ch))
        target = digits_before + len(positions) - raw_digits
        target = max(0, min(target, len(positions)))
        if target == 0:
            return min(cursor, positions[0])
        return positions[target - 1] + 1

    # ------------------------------------------------------------------
    # State changes
    # ------------------------------------------------------------------

    def _max_minor_units(self) -> int:
        """Largest magnitude allowed by MAX_INPUT_DIGITS and max_integers."""
        settings = self._settings
        ceiling = 10**MAX_INPUT_DIGITS - 1
        if settings.max_integers is not None:
            ceiling = min(ceiling, 10 ** (settings.max_integers + settings.fraction_digits) - 1)
        return ceiling

    def _from_value(self, value: Decimal) -> CanonicalAmount:
        """Like CanonicalAmount.from_decimal, saturating instead of raising on size."""
        digits = self._settings.fraction_digits
        if value.is_finite() and not fits_input_digits(value, digits):
            return CanonicalAmount(10**MAX_INPUT_DIGITS - 1, is_negative=value < 0)
        return CanonicalAmount.from_decimal(value, digits)

    def _coerce(self, value: Decimal | int | float, *, editing: bool = False) -> CanonicalAmount:
        amount = self._from_value(decimal_from(value))
        if not self._settings.allows_negative:
            amount = CanonicalAmount(amount.minor_units)
        return self._clamp(amount, editing=editing)

    def _clamp(self, amount: CanonicalAmount, *, editing: bool = False) -> CanonicalAmount:
        """Bring amount inside the configured limits.

        While editing, a positive amount below min_value is kept so the user
        can still type up to it; committed amounts honor the full range.
        """
        settings = self._settings
        value = amount.to_decimal(settings.fraction_digits)
        clamped = amount
        if settings.max_value is not None and value > settings.max_value:
            clamped = self._from_value(settings.max_value)
        elif (
            settings.min_value is not None
            and value < settings.min_value
            and (amount.is_negative or not editing)
        ):
            clamped = self._from_value(settings.min_value)
        ceiling = self._max_minor_units()
        if clamped.minor_units > ceiling:
            clamped = CanonicalAmount(ceiling, clamped.is_negative)
        if clamped != amount:
            logger.debug("Clamped %s to %s", amount, clamped)
        return clamped

    def _finalize(self) -> EditResult:
        if self._amount is None:
            self._clear()
        elif self._clears_when_value_is_zero and self._amount.is_zero:
            logger.debug("Clearing zero amount on commit")
            self._clear()
        else:
            self._show(self._clamp(self._amount.normalized()), EngineState.COMMITTED)
        return EditResult(self._text, self._cursor)

    def _show(self, amount: CanonicalAmount, state: EngineState) -> None:
        display = self._formatter.format(
            amount, show_negative_zero=state is EngineState.EDITING
        )
        self._amount = amount
        self._text = display.text
        self._cursor = self._end_cursor(display.text)
        self._transition(state)

    def _clear(self) -> None:
        self._amount = None
        self._text = ""
        self._cursor = 0
        self._transition(EngineState.EMPTY)

    def _transition(self, state: EngineState) -> None:
        if state is not self._state:
            logger.debug("LiveEditEngine %s -> %s", self._state, state)
            self._state = state

    @staticmethod
    def _end_cursor(text: str) -> int:
        positions = _digit_positions(text)
        return positions[-1] + 1 if positions else len(text)
