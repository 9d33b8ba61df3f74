"""
Syntax phase tokenizer.
"""
from codegate.validation.models import SyntaxDiagnostic
from codegate.validation.syntax import (
    EXPRESSION_EXPECTED,
    UNTERMINATED_COMMENT,
    UNTERMINATED_STRING,
    UNTERMINATED_TEMPLATE,
    check_syntax,
)


def test_clean_component_has_no_diagnostics(react_counter):
    assert check_syntax(react_counter) == []


def test_prefix_increment_without_operand():
    assert check_syntax("const x = ++;") == [SyntaxDiagnostic(1, EXPRESSION_EXPECTED)]


def test_diagnostic_reports_line_of_error():
    code = "function test() {\n  const x = ++;\n}"
    assert check_syntax(code) == [SyntaxDiagnostic(2, EXPRESSION_EXPECTED)]
    assert check_syntax(code)[0].format() == "Line 2: Expression expected."


def test_update_operators_with_operand_are_fine():
    assert check_syntax("x++;\n++i;\nfor (let i = 0; i < n; i++) {}") == []


def test_assignment_without_right_hand_side():
    assert check_syntax("a = ;") == [SyntaxDiagnostic(1, EXPRESSION_EXPECTED)]
    assert check_syntax("f(a +)") == [SyntaxDiagnostic(1, EXPRESSION_EXPECTED)]


def test_jsx_closing_before_paren_is_not_an_operator_error():
    code = "return (\n  <div>\n    <br />\n  </div>\n);"
    assert check_syntax(code) == []


def test_unterminated_string_at_newline():
    code = "const s = 'abc;\nconst t = 1;"
    assert check_syntax(code) == [SyntaxDiagnostic(1, UNTERMINATED_STRING)]


def test_unterminated_template_at_end():
    assert check_syntax("const t = `abc") == [SyntaxDiagnostic(1, UNTERMINATED_TEMPLATE)]


def test_multiline_template_is_fine():
    assert check_syntax("const t = `a\nb`;") == []


def test_unterminated_block_comment():
    assert check_syntax("/* open\nconst x = 1;") == [SyntaxDiagnostic(1, UNTERMINATED_COMMENT)]


def test_comments_are_skipped():
    assert check_syntax("// don't = ;\nconst x = 1;") == []
    assert check_syntax("/* a = ; */ const y = 2;") == []


def test_escapes_inside_strings():
    assert check_syntax("const s = 'it\\'s';") == []
    assert check_syntax("const s = 'a\\\nb';") == []


def test_bracket_balance_is_not_a_syntax_concern():
    assert check_syntax("function f() { const x = 1;") == []


# ═══════════════════════════════════════════════════════
# JSX MARKUP
# ═══════════════════════════════════════════════════════

def test_apostrophes_in_jsx_text_are_not_strings():
    code = (
        "function Hint() {\n"
        "  return (\n"
        "    <div>\n"
        "      <p>Don't stop</p>\n"
        "      <p>It's fine</p>\n"
        "    </div>\n"
        "  );\n"
        "}"
    )
    assert check_syntax(code) == []


def test_single_apostrophe_in_jsx_text():
    assert check_syntax("const el = <p>Don't panic</p>;\nconst y = 1;") == []


def test_jsx_text_after_return_keyword():
    assert check_syntax("function A() {\n  return <span>We're here</span>;\n}") == []


def test_attribute_and_child_expressions_are_code():
    code = "<button onClick={() => setCount(count + )}>Add</button>"
    assert check_syntax(code) == [SyntaxDiagnostic(1, EXPRESSION_EXPECTED)]


def test_quotes_inside_child_expression_still_checked():
    code = "<ul>\n  {items.map(i => <li>{'oops}</li>)}\n</ul>"
    assert check_syntax(code) == [SyntaxDiagnostic(2, UNTERMINATED_STRING)]


def test_attribute_strings_and_fragments():
    code = '<>\n  <img alt="it\'s" src="a.png" />\n  <Menu.Item title=\'x\'>ok</Menu.Item>\n</>'
    assert check_syntax(code) == []


def test_comparison_is_not_a_tag():
    assert check_syntax("if (a <b) {\n  const s = 'x\n}") == [SyntaxDiagnostic(2, UNTERMINATED_STRING)]


# ═══════════════════════════════════════════════════════
# REGEX LITERALS
# ═══════════════════════════════════════════════════════

def test_regex_literal_with_group_and_quantifier():
    assert check_syntax("const words = text.match(/(\\w+)/g);\n") == []


def test_quote_inside_regex_literal():
    assert check_syntax("const clean = s.replace(/'/g, '');\nconst y = 1;\n") == []


def test_slash_inside_character_class():
    assert check_syntax("const parts = path.split(/[/\\\\]/);") == []


def test_regex_after_return_keyword():
    assert check_syntax("function isId(s) {\n  return /^[a-z]+$/i.test(s);\n}") == []


def test_division_is_not_a_regex():
    assert check_syntax("const half = total / 2;\nconst r = a / b / c;") == []
    assert check_syntax("const label = count / total + '/';") == []
