"""
Bracket balance checker.
"""
import pytest

from codegate.validation.brackets import (
    brackets_balanced,
    has_unbalanced_braces,
    has_unmatched_parentheses,
)


def test_balanced_braces():
    assert brackets_balanced("function f() { return { a: 1 }; }", "{", "}")


def test_unclosed_brace():
    assert has_unbalanced_braces("function f() { const x = 1;")


def test_close_before_open_fails_even_if_counts_match():
    assert not brackets_balanced("} {", "{", "}")
    assert has_unmatched_parentheses(")(")


def test_brackets_inside_strings_are_ignored():
    assert brackets_balanced('const s = "{";', "{", "}")
    assert brackets_balanced("const s = '(';", "(", ")")


def test_brackets_inside_template_are_ignored():
    assert brackets_balanced("const t = `${a} {`;", "{", "}")


def test_escaped_quote_keeps_string_open():
    assert brackets_balanced('const s = "\\"{";', "{", "}")


def test_unmatched_parentheses():
    assert has_unmatched_parentheses("console.log((1 + 2);")
    assert not has_unmatched_parentheses("console.log((1 + 2));")


def test_pairs_are_checked_independently():
    code = "f({)"
    assert has_unbalanced_braces(code)
    assert not has_unmatched_parentheses(code)


def test_tokens_must_be_single_characters():
    with pytest.raises(ValueError):
        brackets_balanced("{{}}", "{{", "}}")
