"""
Quote tracking shared by every markup scanner.
"""

from typing import Optional

QUOTES = ("'", '"')


class QuoteCursor:
    """
    Tracks whether a character stream is inside a single or double quoted
    run. Each scan creates its own cursor.
    """

    def __init__(self):
        self.quote: Optional[str] = None

    @property
    def in_quote(self) -> bool:
        return self.quote is not None

    def feed(self, c: str) -> bool:
        """
        Advance over one character.

        Returns:
            bool: True if ``c`` is quoted (including the quote characters
            themselves) and must be taken literally
        """
        if self.quote is not None:
            if c == self.quote:
                self.quote = None
            return True
        if c in QUOTES:
            self.quote = c
            return True
        return False
