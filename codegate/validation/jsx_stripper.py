# codegate/validation/jsx_stripper.py
"""
JSX expression stripper.

Drops the bodies of {...} expression blocks that sit in markup context so
that arrow functions, comparisons and nested markup inside them are not
misread by the tag matcher.

A top-level "{" opens an expression block when the last LOOKBACK_WINDOW
characters of emitted output either end right after a ">" or sit inside an
open tag's attribute list ("<Tag ..." with no ">" yet). This is a local
heuristic, not a parse: it can misclassify nested object literals inside
attribute expressions and generic angle brackets that look like tags.
"""
import re
from typing import List

from .scanner import LexicalScanner

LOOKBACK_WINDOW = 50

_AFTER_TAG_CLOSE = re.compile(r">\s*$")
_INSIDE_OPEN_TAG = re.compile(r"<[A-Za-z][^>]*$")


def _in_markup_context(window: str) -> bool:
    return bool(_AFTER_TAG_CLOSE.search(window) or _INSIDE_OPEN_TAG.search(window))


def strip_jsx_expressions(code: str) -> str:
    """
    Return code with expression-block bodies removed.

    The opening and closing braces of each block are kept as placeholders;
    everything outside expression blocks is copied through unchanged.
    """
    scanner = LexicalScanner()
    output: List[str] = []
    depth = 0
    in_expression = False

    for _, char, is_code in scanner.scan(code):
        if in_expression:
            if is_code and char == "{":
                depth += 1
            elif is_code and char == "}":
                depth -= 1
                if depth == 0:
                    in_expression = False
                    output.append("}")
            continue

        if is_code and char == "{":
            if depth == 0 and _in_markup_context("".join(output[-LOOKBACK_WINDOW:])):
                in_expression = True
            depth += 1
        elif is_code and char == "}" and depth > 0:
            # Stray "}" at depth zero is left to the brace checker
            depth -= 1

        output.append(char)

    return "".join(output)
