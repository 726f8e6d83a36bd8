"""Live typing example for currencytext.

Simulates a text field driven by LiveEditEngine: keystrokes appended at the
cursor, a backspace over a grouping separator, a sign toggle and a commit.

Note: Real integrations call on_text_changed() from the field's change
callback and write EditResult back to the field.
"""

from decimal import Decimal

from currencytext import (
    CurrencyFormatSettings,
    EditingHooks,
    EngineUpdate,
    LiveEditEngine,
)


def show(label: str, text: str, cursor: int) -> None:
    print(f"{label:<28} {text[:cursor]}|{text[cursor:]}")


# Example 1: Type-to-fill-cents
print("=" * 50)
print("Example 1: Type-to-fill-cents (USD, en_US)")
print("=" * 50)

settings = CurrencyFormatSettings.for_locale("USD", "en_US")
engine = LiveEditEngine(settings)
engine.on_focus_changed(True)

for key in "123456":
    result = engine.on_text_changed(engine.text + key)
    show(f"typed {key!r}", result.display_text, result.cursor_index)
# Output ends with: $1,234.56|

# Example 2: Backspace over a separator removes the digit before it
print("\n" + "=" * 50)
print("Example 2: Backspace over ','")
print("=" * 50)

comma = engine.text.index(",")
result = engine.replace_range(comma, comma + 1, "")
show("backspace at ','", result.display_text, result.cursor_index)
# Output: $|234.56

# Example 3: Sign handling
print("\n" + "=" * 50)
print("Example 3: Negative amounts")
print("=" * 50)

result = engine.replace_range(0, 0, "-")
show("typed '-' at start", result.display_text, result.cursor_index)
print("amount:", engine.current_amount())
# Output: -$234.56

# Example 4: Observers and hooks
print("\n" + "=" * 50)
print("Example 4: Commit with hooks (EUR, de_DE)")
print("=" * 50)


def on_update(update: EngineUpdate) -> None:
    print(f"  observer: {update.text!r} amount={update.input_amount}")


hooks = EditingHooks(
    on_editing_changed=lambda editing: print(f"  editing={editing}"),
    on_commit=lambda: print("  committed"),
)
eur = LiveEditEngine(CurrencyFormatSettings.for_locale("EUR", "de_DE"), hooks=hooks)
unsubscribe = eur.subscribe(on_update)
eur.on_focus_changed(True)
eur.set_amount(Decimal("1999.5"))
eur.on_focus_changed(False)
unsubscribe()
print("final:", eur.text)
# Output: final: 1.999,50 €
