# codegate/validation/syntax.py
"""
Syntax phase - minimal tokenizer for JS/TS/JSX snippets.

Not a grammar: it reuses the lexical scanner's string/template/escape rules,
adds comment, regex-literal and JSX markup awareness, and reports only errors
that no structural heuristic could make sense of:

- string literals running into a newline or the end of input
- template literals / block comments running to the end of input
- operators with no operand ("const x = ++;", "a = ;", "f(a +)")

JSX child text is opaque, so "<p>Don't stop</p>" is text, not a string.
Bracket balance and tag matching are NOT checked here; the structural
phase owns them.
"""
import re
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

from codegate.core.logging import log

from .models import SyntaxDiagnostic
from .scanner import LexicalScanner, QuoteMode

UNTERMINATED_STRING = "Unterminated string literal."
UNTERMINATED_TEMPLATE = "Unterminated template literal."
UNTERMINATED_COMMENT = "Unterminated block comment."
EXPRESSION_EXPECTED = "Expression expected."

_OPERAND = "operand"
_LITERAL = "literal"
_OPERATOR = "operator"
_PUNCT = "punct"

_OPERATORS = [
    ">>>=", "===", "!==", "**=", "<<=", ">>=", ">>>", "&&=", "||=", "??=", "...",
    "=>", "==", "!=", "<=", ">=", "&&", "||", "??", "?.", "++", "--",
    "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "**", "<<", ">>",
    "=", "+", "-", "*", "/", "%", "<", ">", "!", "~", "&", "|", "^", ".",
]
_OPERATOR_RE = re.compile("|".join(re.escape(op) for op in _OPERATORS))
_WORD_RE = re.compile(r"[A-Za-z0-9_$#@\\]+")
_REGEX_FLAGS_RE = re.compile(r"[A-Za-z]*")

# "<div" or "<>" where an expression may start; "</" as well inside markup
_CODE_TAG_RE = re.compile(r"<[A-Za-z>]")
_TEXT_TAG_RE = re.compile(r"<[A-Za-z/>]")

# "<", ">" and "/" are left out: JSX puts them right before ")" and ";"
_NEEDS_RIGHT_OPERAND = frozenset({
    "=", "+=", "-=", "*=", "/=", "%=", "**=", "&=", "|=", "^=",
    "<<=", ">>=", ">>>=", "&&=", "||=", "??=",
    "==", "===", "!=", "!==", "&&", "||", "??", "+", "-", "%", "**",
})
_UPDATE_OPERATORS = frozenset({"++", "--"})
_TERMINATORS = frozenset({";", ")", "]"})

# Words after which an expression starts, so "/" opens a regex and "<" a tag
_EXPRESSION_KEYWORDS = frozenset({
    "return", "typeof", "instanceof", "in", "of", "new", "delete", "void",
    "throw", "case", "do", "else", "yield", "await", "default",
})

# Tokenizer contexts
_CODE = "code"
_TAG = "tag"
_CLOSING_TAG = "closing_tag"
_TEXT = "text"


class _Token(NamedTuple):
    kind: str
    text: str
    line: int


@dataclass
class _Frame:
    kind: str
    braces: int = 0


def _is_operand_end(token: Optional[_Token]) -> bool:
    if token is None:
        return False
    return token.kind in (_OPERAND, _LITERAL) or token.text in (")", "]")


def _is_operand_start(token: Optional[_Token]) -> bool:
    if token is None:
        return False
    return token.kind in (_OPERAND, _LITERAL) or token.text in ("(", "[")


def _expects_operand(token: Optional[_Token]) -> bool:
    if token is not None and token.kind == _OPERAND and token.text in _EXPRESSION_KEYWORDS:
        return True
    return not _is_operand_end(token)


def _regex_end(code: str, start: int) -> int:
    """
    Index just past the regex literal whose opening slash is at start.

    Returns -1 when no closing slash appears on the same line, in which
    case the slash is a plain division operator.
    """
    i = start + 1
    in_class = False
    while i < len(code):
        char = code[i]
        if char == "\n":
            return -1
        if char == "\\":
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == "/":
            return _REGEX_FLAGS_RE.match(code, i + 1).end()
        i += 1
    return -1


class _Tokenizer:
    """
    One pass over a snippet, switching between code and JSX markup.

    Frames form a stack: a tag opened in code pushes a tag frame, the tag's
    ">" swaps it for a text frame, and a "{" in markup pushes a code frame
    that its matching "}" pops again.
    """

    def __init__(self, code: str):
        self.code = code
        self.tokens: List[_Token] = []
        self.diagnostics: List[SyntaxDiagnostic] = []
        self.scanner = LexicalScanner()
        self.frames: List[_Frame] = [_Frame(_CODE)]
        self.line = 1
        self.literal_line = 1
        self.i = 0

    def run(self) -> Tuple[List[_Token], List[SyntaxDiagnostic]]:
        while self.i < len(self.code):
            char = self.code[self.i]

            if self.scanner.in_literal:
                self._literal_char(char)
                continue

            kind = self.frames[-1].kind
            if kind == _TEXT:
                self._text_char(char)
            elif kind in (_TAG, _CLOSING_TAG):
                if not self._tag_char(char):
                    break
            elif not self._code_char(char):
                break

        if self.scanner.in_literal:
            message = UNTERMINATED_TEMPLATE if self.scanner.quote is QuoteMode.TEMPLATE else UNTERMINATED_STRING
            self.diagnostics.append(SyntaxDiagnostic(self.literal_line, message))

        return self.tokens, self.diagnostics

    @property
    def previous(self) -> Optional[_Token]:
        return self.tokens[-1] if self.tokens else None

    def _emit(self, kind: str, text: str, line: Optional[int] = None) -> None:
        self.tokens.append(_Token(kind, text, self.line if line is None else line))

    def _open_expression(self) -> None:
        self.frames.append(_Frame(_CODE))
        self._emit(_PUNCT, "{")
        self.i += 1

    def _literal_char(self, char: str) -> None:
        state = self.scanner.state
        if char == "\n" and state.quote is not QuoteMode.TEMPLATE and not state.escaped:
            # Newline itself is handled by the code frame on the next turn
            self.diagnostics.append(SyntaxDiagnostic(self.literal_line, UNTERMINATED_STRING))
            self.scanner.abandon_literal()
            self._emit(_LITERAL, "", self.literal_line)
            return

        self.scanner.feed(char)
        if char == "\n":
            self.line += 1
        if not self.scanner.in_literal:
            self._emit(_LITERAL, "", self.literal_line)
        self.i += 1

    def _code_char(self, char: str) -> bool:
        code = self.code
        i = self.i

        if char == "\n":
            self.line += 1
            self.i += 1
            return True

        if char.isspace():
            self.i += 1
            return True

        if code.startswith("//", i):
            end = code.find("\n", i)
            self.i = len(code) if end == -1 else end
            return True

        if code.startswith("/*", i):
            end = code.find("*/", i + 2)
            if end == -1:
                self.diagnostics.append(SyntaxDiagnostic(self.line, UNTERMINATED_COMMENT))
                return False
            self.line += code.count("\n", i, end)
            self.i = end + 2
            return True

        previous = self.previous
        if char == "/" and _expects_operand(previous) and (previous is None or previous.text != "<"):
            end = _regex_end(code, i)
            if end != -1:
                self._emit(_LITERAL, code[i:end])
                self.i = end
                return True

        if char == "<" and _expects_operand(previous) and _CODE_TAG_RE.match(code, i):
            self._emit(_LITERAL, "<")
            self.frames.append(_Frame(_TAG))
            self.i += 1
            return True

        if not self.scanner.feed(char):
            # Opened a string or template literal
            self.literal_line = self.line
            self.i += 1
            return True

        word = _WORD_RE.match(code, i)
        if word:
            self._emit(_OPERAND, word.group())
            self.i = word.end()
            return True

        operator = _OPERATOR_RE.match(code, i)
        if operator:
            self._emit(_OPERATOR, operator.group())
            self.i = operator.end()
            return True

        frame = self.frames[-1]
        if char == "{":
            frame.braces += 1
        elif char == "}":
            if frame.braces == 0 and len(self.frames) > 1:
                # Closes a JSX attribute or child expression
                self.frames.pop()
            else:
                frame.braces = max(frame.braces - 1, 0)

        self._emit(_PUNCT, char)
        self.i += 1
        return True

    def _tag_char(self, char: str) -> bool:
        code = self.code
        frame = self.frames[-1]

        if char == "\n":
            self.line += 1
        elif char in ("'", '"'):
            # JSX attribute strings have no escapes and may span lines
            end = code.find(char, self.i + 1)
            if end == -1:
                self.diagnostics.append(SyntaxDiagnostic(self.line, UNTERMINATED_STRING))
                return False
            self.line += code.count("\n", self.i, end)
            self.i = end
        elif char == "{":
            self._open_expression()
            return True
        elif code.startswith("/>", self.i):
            self.frames.pop()
            self.i += 2
            return True
        elif char == ">":
            self.frames.pop()
            if frame.kind == _CLOSING_TAG:
                if self.frames[-1].kind == _TEXT:
                    self.frames.pop()
            else:
                self.frames.append(_Frame(_TEXT))

        self.i += 1
        return True

    def _text_char(self, char: str) -> None:
        code = self.code

        if char == "{":
            self._open_expression()
            return

        if char == "<" and _TEXT_TAG_RE.match(code, self.i):
            if code.startswith("</", self.i):
                self.frames.append(_Frame(_CLOSING_TAG))
                self.i += 2
                return
            self.frames.append(_Frame(_TAG))
        elif char == "\n":
            self.line += 1

        self.i += 1


def _tokenize(code: str) -> Tuple[List[_Token], List[SyntaxDiagnostic]]:
    return _Tokenizer(code).run()


def _missing_operands(tokens: List[_Token]) -> List[SyntaxDiagnostic]:
    diagnostics: List[SyntaxDiagnostic] = []

    for index, token in enumerate(tokens):
        if token.kind != _OPERATOR:
            continue
        preceding = tokens[index - 1] if index > 0 else None
        following = tokens[index + 1] if index + 1 < len(tokens) else None

        if token.text in _NEEDS_RIGHT_OPERAND:
            if following is not None and following.kind == _PUNCT and following.text in _TERMINATORS:
                diagnostics.append(SyntaxDiagnostic(following.line, EXPRESSION_EXPECTED))
        elif token.text in _UPDATE_OPERATORS:
            if not _is_operand_end(preceding) and not _is_operand_start(following):
                diagnostics.append(SyntaxDiagnostic(token.line, EXPRESSION_EXPECTED))

    return diagnostics


def check_syntax(code: str) -> List[SyntaxDiagnostic]:
    """
    Return parse diagnostics for code, ordered by line.

    An empty list means the structural phase may run.
    """
    tokens, diagnostics = _tokenize(code)
    diagnostics.extend(_missing_operands(tokens))
    diagnostics.sort(key=lambda d: d.line)

    if diagnostics:
        log("SYNTAX", f"{len(diagnostics)} syntax diagnostic(s), first at line {diagnostics[0].line}")

    return diagnostics
