"""Per-keystroke edit description.

A text field reports only the text after an edit. EditState recovers what
changed by diffing it against the text the engine last displayed, yielding
an EditDelta: where the edit happened, what was removed and what was
inserted. The engine consumes an EditState synchronously and drops it.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["EditDelta", "EditState"]


@dataclass(frozen=True, slots=True)
class EditDelta:
    """Single contiguous replacement: previous[start:start+len(removed)] -> inserted."""

    start: int
    removed: str
    inserted: str

    @property
    def is_deletion(self) -> bool:
        return bool(self.removed) and not self.inserted

    @property
    def end(self) -> int:
        """End of the replaced range in the previous text."""
        return self.start + len(self.removed)


@dataclass(frozen=True, slots=True)
class EditState:
    """Transient description of one edit.

    Attributes:
        previous_text: Display text before the edit
        previous_cursor: Cursor index before the edit
        new_raw_input: Unformatted text after the edit
        new_cursor: Cursor index in new_raw_input
        delta: The replacement that turned previous_text into new_raw_input
    """

    previous_text: str
    previous_cursor: int
    new_raw_input: str
    new_cursor: int
    delta: EditDelta

    @classmethod
    def from_texts(
        cls,
        previous_text: str,
        previous_cursor: int,
        new_raw_input: str,
        new_cursor: int | None = None,
    ) -> EditState:
        """Infer the delta between previous_text and new_raw_input.

        Uses the longest common prefix and suffix. When the cursor is known
        the changed range is anchored to it, so deleting one of two equal
        neighbors ("100" -> "10") is attributed to the character the user
        actually removed.

        Args:
            previous_text: Text the engine last displayed
            previous_cursor: Cursor index in previous_text
            new_raw_input: Text reported by the field
            new_cursor: Cursor index in new_raw_input; defaults to the end
                of the inserted text
        """
        limit = min(len(previous_text), len(new_raw_input))
        prefix = 0
        while prefix < limit and previous_text[prefix] == new_raw_input[prefix]:
            prefix += 1
        if new_cursor is not None:
            prefix = min(prefix, new_cursor)

        suffix_limit = limit - prefix
        if new_cursor is not None:
            suffix_limit = min(suffix_limit, len(new_raw_input) - new_cursor)
        suffix = 0
        while (
            suffix < suffix_limit
            and previous_text[-1 - suffix] == new_raw_input[-1 - suffix]
        ):
            suffix += 1

        delta = EditDelta(
            start=prefix,
            removed=previous_text[prefix : len(previous_text) - suffix],
            inserted=new_raw_input[prefix : len(new_raw_input) - suffix],
        )
        cursor = len(new_raw_input) - suffix if new_cursor is None else new_cursor
        return cls(previous_text, previous_cursor, new_raw_input, cursor, delta)

    @classmethod
    def from_replacement(
        cls,
        previous_text: str,
        previous_cursor: int,
        start: int,
        end: int,
        replacement: str,
    ) -> EditState:
        """Build from an exact range replacement, clamped to previous_text."""
        start = max(0, min(start, len(previous_text)))
        end = max(start, min(end, len(previous_text)))
        raw = previous_text[:start] + replacement + previous_text[end:]
        delta = EditDelta(start, previous_text[start:end], replacement)
        return cls(previous_text, previous_cursor, raw, start + len(replacement), delta)
