# codegate/validation/tags.py
"""
Tag stack validator - matches JSX/HTML-like open and close tags.
"""
import re
from typing import List

from .jsx_stripper import strip_jsx_expressions

VOID_ELEMENTS = frozenset({
    "img", "br", "hr", "input", "meta", "link", "area",
    "base", "col", "embed", "param", "source", "track", "wbr",
})

# Tag names may contain dots for namespaced components (<Menu.Item>)
TAG_PATTERN = re.compile(r"</?([A-Za-z][A-Za-z0-9.]*)[^>]*/?>")


def find_tag_errors(code: str) -> List[str]:
    """
    Report unexpected closing tags and tags left open.

    Names are compared case-sensitively since they double as component
    identifiers. A mismatched closing tag is reported and skipped; the stack
    is left untouched so the scan can continue.
    """
    errors: List[str] = []
    stack: List[str] = []

    for match in TAG_PATTERN.finditer(strip_jsx_expressions(code)):
        token = match.group(0)
        name = match.group(1)

        if token.endswith("/>") or name.lower() in VOID_ELEMENTS:
            continue

        if token.startswith("</"):
            if stack and stack[-1] == name:
                stack.pop()
            else:
                errors.append(f"Unexpected closing tag: </{name}>")
        else:
            stack.append(name)

    # Outermost first
    for name in stack:
        errors.append(f"Unclosed tag: <{name}>")

    return errors
