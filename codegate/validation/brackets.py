# codegate/validation/brackets.py
"""
Bracket balance checker.

Counts one open/close token pair outside strings and template literals.
"""
from .scanner import LexicalScanner

UNBALANCED_BRACES = "Unbalanced braces detected"
UNMATCHED_PARENTHESES = "Unmatched parentheses detected"


def brackets_balanced(code: str, open_token: str, close_token: str) -> bool:
    """
    True iff every close token has a preceding open token and the final
    count is zero. Fails as soon as a close token appears with nothing open.
    """
    if len(open_token) != 1 or len(close_token) != 1:
        raise ValueError("Bracket tokens must be single characters")

    depth = 0
    for _, char, is_code in LexicalScanner().scan(code):
        if not is_code:
            continue
        if char == open_token:
            depth += 1
        elif char == close_token:
            depth -= 1
            if depth < 0:
                return False

    return depth == 0


def has_unbalanced_braces(code: str) -> bool:
    return not brackets_balanced(code, "{", "}")


def has_unmatched_parentheses(code: str) -> bool:
    return not brackets_balanced(code, "(", ")")
