"""Locate the editable span under the cursor.

Two scanners are provided:
- ``scan_word`` finds the word around the cursor for term lookups.
- ``scan_definition`` finds an inline ``!!!Term: description!!!`` region
  for minting new terms.
"""

from dataclasses import dataclass


# Characters that terminate a word. Order matters only for readability.
SEPARATORS: tuple[str, ...] = (
    ' ', '\t', '.', '!', '?', '#', '$', '@', '%', '^', '&', '*', '(', ')',
    '[', ']', '{', '}', ';', ':', "'", '"', ',', '/', '<', '>', '~', '`', '+',
)

DEFINITION_MARKER = "!!!"
DEFINITION_SEPARATOR = ": "


@dataclass(frozen=True)
class TriggerContext:
    """Span on a single line that a suggestion would replace.

    Attributes:
        start: First character of the span
        end: One past the last character of the span
        query: Text the suggestion provider works with
        line: Zero-based line number the span lives on
    """
    start: int
    end: int
    query: str
    line: int = 0


def scan_word(line: str, cursor: int, separators=SEPARATORS) -> TriggerContext | None:
    """Find the word surrounding ``cursor``.

    Args:
        line: Text of the current line
        cursor: Cursor offset within the line
        separators: Characters that end a word

    Returns:
        TriggerContext for the word, or None when there is nothing to complete
    """
    if not line or cursor <= 0 or cursor > len(line):
        return None

    if line[cursor - 1] in separators:
        return None

    start, end = 0, len(line)

    for i in range(cursor - 1, -1, -1):
        if line[i] in separators:
            start = i + 1
            break

    for i in range(cursor, len(line)):
        if line[i] in separators:
            end = i
            break

    if end - start <= 1:
        return None

    return TriggerContext(start=start, end=end, query=line[start:end])


def scan_definition(line: str, cursor: int = 0, marker: str = DEFINITION_MARKER) -> TriggerContext | None:
    """Find an inline term definition such as ``!!!Foo: a bar!!!``.

    The first marked region on the line is used regardless of the cursor.

    Args:
        line: Text of the current line
        cursor: Cursor offset (unused, kept for scanner symmetry)
        marker: Opening/closing marker

    Returns:
        TriggerContext spanning both markers whose query is the
        ``"name: description"`` body, or None
    """
    open_index = line.find(marker)
    if open_index == -1:
        return None

    body_start = open_index + len(marker)
    close_index = line.find(marker, body_start)
    if close_index == -1 or close_index == body_start:
        return None

    body = line[body_start:close_index]
    separator_index = body.find(DEFINITION_SEPARATOR)
    if separator_index <= 0:
        return None

    if not body[separator_index + len(DEFINITION_SEPARATOR):]:
        return None

    return TriggerContext(start=open_index, end=close_index + len(marker), query=body)


def split_definition(query: str) -> tuple[str, str]:
    """Split a definition body into (name, description)."""
    name, _, description = query.partition(DEFINITION_SEPARATOR)
    return name, description
