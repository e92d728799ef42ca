"""Multi-line text buffer backing the EditText operation."""

from __future__ import annotations


class TextEdit:
    """A line list plus a (row, col) cursor.

    Keys are plain strings: a single printable character inserts itself;
    named keys are ``enter``, ``backspace``, ``delete``, ``left``, ``right``,
    ``up``, ``down``, ``home`` and ``end``.
    """

    def __init__(self, text: str = "", row: int = 0, col: int = 0) -> None:
        self.lines: list[str] = text.split("\n")
        self.row = 0
        self.col = 0
        self.jump(row, col)

    def text(self) -> str:
        return "\n".join(self.lines)

    def jump(self, row: int, col: int) -> None:
        """Move the cursor, clamped to the existing text."""
        self.row = max(0, min(row, len(self.lines) - 1))
        self.col = max(0, min(col, len(self.lines[self.row])))

    def input(self, key: str) -> bool:
        """Apply one key press. Returns False if the key is not an editing key."""
        line = self.lines[self.row]
        match key:
            case "enter":
                self.lines[self.row] = line[: self.col]
                self.lines.insert(self.row + 1, line[self.col :])
                self.row += 1
                self.col = 0
            case "backspace":
                if self.col > 0:
                    self.lines[self.row] = line[: self.col - 1] + line[self.col :]
                    self.col -= 1
                elif self.row > 0:
                    prev = self.lines[self.row - 1]
                    self.lines[self.row - 1] = prev + line
                    del self.lines[self.row]
                    self.row -= 1
                    self.col = len(prev)
            case "delete":
                if self.col < len(line):
                    self.lines[self.row] = line[: self.col] + line[self.col + 1 :]
                elif self.row < len(self.lines) - 1:
                    self.lines[self.row] = line + self.lines.pop(self.row + 1)
            case "left":
                if self.col > 0:
                    self.col -= 1
                elif self.row > 0:
                    self.row -= 1
                    self.col = len(self.lines[self.row])
            case "right":
                if self.col < len(line):
                    self.col += 1
                elif self.row < len(self.lines) - 1:
                    self.row += 1
                    self.col = 0
            case "up":
                self.jump(self.row - 1, self.col)
            case "down":
                self.jump(self.row + 1, self.col)
            case "home":
                self.col = 0
            case "end":
                self.col = len(line)
            case _ if len(key) == 1 and key.isprintable():
                self.lines[self.row] = line[: self.col] + key + line[self.col :]
                self.col += 1
            case _:
                return False
        return True
