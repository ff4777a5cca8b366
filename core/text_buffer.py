"""Interfaces the completion engine uses to talk to the editor."""

from dataclasses import dataclass


class NoActiveDocumentError(Exception):
    """Raised when an operation needs a document but none is active."""


@dataclass(frozen=True)
class Position:
    """Cursor or range position: zero-based line and character offset."""
    line: int
    ch: int


class TextBuffer:
    """Editable text the suggestions are applied to."""

    def get_line(self, line: int) -> str:
        """Return the text of ``line`` without its line break."""
        raise NotImplementedError

    def get_cursor(self) -> Position:
        """Return the current cursor position."""
        raise NotImplementedError

    def replace_range(self, text: str, start: Position, end: Position):
        """Replace the text between ``start`` and ``end`` with ``text``."""
        raise NotImplementedError


class ActiveDocument:
    """Document currently being edited.

    Attributes:
        path: Path of the document relative to the project root
        buffer: TextBuffer holding its content
    """

    path: str
    buffer: TextBuffer


class StringBuffer(TextBuffer):
    """In-memory TextBuffer."""

    def __init__(self, text: str = "", cursor: Position | None = None):
        self.lines = text.split('\n')
        if cursor is None:
            cursor = Position(len(self.lines) - 1, len(self.lines[-1]))
        self.cursor = cursor

    @property
    def text(self) -> str:
        return '\n'.join(self.lines)

    def get_line(self, line: int) -> str:
        if 0 <= line < len(self.lines):
            return self.lines[line]
        return ""

    def get_cursor(self) -> Position:
        return self.cursor

    def set_cursor(self, line: int, ch: int):
        self.cursor = Position(line, ch)

    def replace_range(self, text: str, start: Position, end: Position):
        before = self.lines[:start.line]
        after = self.lines[end.line + 1:]
        head = self.lines[start.line][:start.ch]
        tail = self.lines[end.line][end.ch:]
        new_lines = (head + text + tail).split('\n')
        self.lines = before + new_lines + after
        # Cursor ends up right after the inserted text
        last = new_lines[-1]
        self.cursor = Position(start.line + len(new_lines) - 1, len(last) - len(tail))


class BufferDocument(ActiveDocument):
    """ActiveDocument wrapping any TextBuffer."""

    def __init__(self, path: str, buffer: TextBuffer | None = None):
        self.path = path
        self.buffer = buffer if buffer is not None else StringBuffer()
