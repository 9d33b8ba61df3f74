# codegate/validation/scanner.py
"""
Lexical scanner - single forward pass over source text.

Tracks whether the cursor is inside a single-quoted string, a double-quoted
string or a template literal, and whether the next character is escaped.
Every checker built on top treats characters inside a literal as opaque.

Comments and regex literals are NOT recognised here; only quotes, backticks
and backslashes have meaning at this level.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class QuoteMode(Enum):
    NONE = ""
    SINGLE = "'"
    DOUBLE = '"'
    TEMPLATE = "`"


_OPENERS = {
    "'": QuoteMode.SINGLE,
    '"': QuoteMode.DOUBLE,
    "`": QuoteMode.TEMPLATE,
}


@dataclass
class ScanState:
    """Scan-local lexical state. Never shared between scans."""
    quote: QuoteMode = QuoteMode.NONE
    escaped: bool = False

    @property
    def in_literal(self) -> bool:
        return self.quote is not QuoteMode.NONE


class LexicalScanner:
    """
    Character classifier for one scan.

    feed() returns True when the character is code: outside every string and
    template literal and not itself a literal delimiter.
    """

    def __init__(self):
        self.state = ScanState()

    @property
    def in_literal(self) -> bool:
        return self.state.in_literal

    @property
    def quote(self) -> QuoteMode:
        return self.state.quote

    def feed(self, char: str) -> bool:
        state = self.state

        # 1. Escaped character is consumed verbatim
        if state.escaped:
            state.escaped = False
            return False

        if state.in_literal:
            # 2. Backslash escapes exactly the next character
            if char == "\\":
                state.escaped = True
            # 3/4. Matching delimiter closes the literal
            elif char == state.quote.value:
                state.quote = QuoteMode.NONE
            return False

        # 3/4. Delimiter outside any literal opens one
        opener = _OPENERS.get(char)
        if opener is not None:
            state.quote = opener
            return False

        return True

    def abandon_literal(self) -> None:
        """Drop out of the current literal (used to resync after an unterminated string)."""
        self.state.quote = QuoteMode.NONE
        self.state.escaped = False

    def scan(self, text: str) -> Iterator[Tuple[int, str, bool]]:
        """Yield (index, char, is_code) for every character of text."""
        for index, char in enumerate(text):
            yield index, char, self.feed(char)
