"""Levenshtein edit scripts for reconciling ticker columns.

``compute_edit_script(old, new)`` aligns the current target text of a
column collection against a newly requested text and returns one action per
aligned position:

* ``"same"``   -- the column survives; it is retargeted to the new unit
  (which may or may not differ from its old one),
* ``"insert"`` -- a new column is created for a unit of *new*,
* ``"delete"`` -- the column collapses out.

A changed unit costs the same as a single insertion or deletion, so the
dynamic program prefers keeping a column alive and scrolling it over tearing
it down and building a new one. When several minimal paths exist the
backtrace prefers SAME, then DELETE, then INSERT.
"""

from __future__ import annotations

from typing import Literal, Sequence

from pi.ticker.errors import CorruptScriptError

EditAction = Literal["same", "insert", "delete"]

SAME: EditAction = "same"
INSERT: EditAction = "insert"
DELETE: EditAction = "delete"


def _cost_matrix(old: Sequence[str], new: Sequence[str]) -> list[list[int]]:
    rows = len(old) + 1
    cols = len(new) + 1
    matrix = [[0] * cols for _ in range(rows)]
    for row in range(rows):
        matrix[row][0] = row
    for col in range(cols):
        matrix[0][col] = col

    for row in range(1, rows):
        for col in range(1, cols):
            cost = 0 if old[row - 1] == new[col - 1] else 1
            matrix[row][col] = min(
                matrix[row - 1][col] + 1,
                matrix[row][col - 1] + 1,
                matrix[row - 1][col - 1] + cost,
            )
    return matrix


def compute_edit_script(old_text: Sequence[str], new_text: Sequence[str]) -> list[EditAction]:
    """Return the actions that transform *old_text* into *new_text*.

    Both arguments are sequences of display units (a ``str`` works when every
    unit is a single code point).
    """
    matrix = _cost_matrix(old_text, new_text)

    actions: list[EditAction] = []
    row = len(old_text)
    col = len(new_text)
    while row > 0 or col > 0:
        if row == 0:
            actions.append(INSERT)
            col -= 1
        elif col == 0:
            actions.append(DELETE)
            row -= 1
        else:
            current = matrix[row][col]
            cost = 0 if old_text[row - 1] == new_text[col - 1] else 1
            if matrix[row - 1][col - 1] + cost == current:
                actions.append(SAME)
                row -= 1
                col -= 1
            elif matrix[row - 1][col] + 1 == current:
                actions.append(DELETE)
                row -= 1
            else:
                actions.append(INSERT)
                col -= 1

    actions.reverse()
    return actions


def edit_distance(old_text: Sequence[str], new_text: Sequence[str]) -> int:
    """Unit-cost Levenshtein distance between *old_text* and *new_text*."""
    return _cost_matrix(old_text, new_text)[len(old_text)][len(new_text)]


def apply_edit_script(
    old_text: Sequence[str],
    new_text: Sequence[str],
    script: Sequence[str],
) -> list[str]:
    """Replay *script* over *old_text* and return the produced units.

    Raises ``CorruptScriptError`` when the script contains an unknown action
    or does not consume both sequences exactly.
    """
    result: list[str] = []
    old_index = 0
    new_index = 0
    for action in script:
        match action:
            case "insert":
                if new_index >= len(new_text):
                    raise CorruptScriptError("Insert past the end of the new text")
                result.append(new_text[new_index])
                new_index += 1
            case "same":
                if old_index >= len(old_text) or new_index >= len(new_text):
                    raise CorruptScriptError("Same past the end of the text")
                result.append(new_text[new_index])
                old_index += 1
                new_index += 1
            case "delete":
                if old_index >= len(old_text):
                    raise CorruptScriptError("Delete past the end of the old text")
                old_index += 1
            case _:
                raise CorruptScriptError(f"Unknown action: {action!r}")

    if old_index != len(old_text) or new_index != len(new_text):
        raise CorruptScriptError(
            f"Script consumed {old_index}/{len(old_text)} old and "
            f"{new_index}/{len(new_text)} new units"
        )
    return result
