import string

import pytest
from hypothesis import given, strategies as st

from egg.debug_utils.pprint import DEFAULT_OPTIONS, pprint_expr, unparse
from egg.errors import EggSyntaxError
from egg.reader.cursor import SourceCursor
from egg.reader.parser import parse, parse_apply, parse_expression, skip_space
from egg.types.expression import Apply, Value, Word


@pytest.mark.parametrize(
    "source, expected",
    [
        ("42", Value(42)),
        ("3.25", Value(3.25)),
        ("007", Value(7)),
        ('"hi"', Value("hi")),
        ('""', Value("")),
        ('"a # not a comment"', Value("a # not a comment")),
        ('"two\nlines"', Value("two\nlines")),
        ("foo", Word("foo")),
        ("==", Word("==")),
        ("!=", Word("!=")),
        ("&&", Word("&&")),
        ("x1", Word("x1")),
        ("+(1,2)", Apply(Word("+"), (Value(1), Value(2)))),
        ("+( 1 , 2 )", Apply(Word("+"), (Value(1), Value(2)))),
        ("f()", Apply(Word("f"), ())),
        ("f()(x)", Apply(Apply(Word("f"), ()), (Word("x"),))),
        (
            "makeAdder(5)(10)",
            Apply(Apply(Word("makeAdder"), (Value(5),)), (Value(10),)),
        ),
        ('"s"(1)', Apply(Value("s"), (Value(1),))),
        (
            "if(true, print(\"yes\"), false)",
            Apply(
                Word("if"),
                (Word("true"), Apply(Word("print"), (Value("yes"),)), Word("false")),
            ),
        ),
        ("  # leading comment\n  x  # trailing\n", Word("x")),
        ("f # comment\n (1)", Apply(Word("f"), (Value(1),))),
    ],
)
def test_parser(source, expected):
    assert parse(source) == expected


def test_number_literals_are_floats():
    node = parse("42")
    assert isinstance(node.value, float)


def test_numeral_is_never_a_word():
    node = parse("12")
    assert isinstance(node, Value)


def test_positions_are_recorded():
    tree = parse("do(\n  define(x, 10),\n  x)")
    assert (tree.line, tree.column) == (1, 1)
    define = tree.args[0]
    assert (define.line, define.column) == (2, 3)
    assert (define.operator.line, define.operator.column) == (2, 3)
    assert (define.args[1].line, define.args[1].column) == (2, 13)
    assert (tree.args[1].line, tree.args[1].column) == (3, 3)


def test_equality_ignores_positions():
    assert parse("  x") == Word("x", 1, 1)


def test_nodes_are_immutable():
    node = parse("f(1)")
    with pytest.raises(AttributeError):
        node.args = ()


def test_skip_space_is_idempotent():
    cur = SourceCursor("  # c1\n\t# c2\n  rest")
    skip_space(cur)
    first = (cur.pos, cur.line, cur.column)
    skip_space(cur)
    assert (cur.pos, cur.line, cur.column) == first
    assert cur.remaining() == "rest"
    assert (cur.line, cur.column) == (3, 3)


def test_parse_expression_leaves_rest_unconsumed():
    cur = SourceCursor("f(1) g")
    assert parse_expression(cur) == Apply(Word("f"), (Value(1),))
    assert cur.remaining() == " g"


def test_parse_apply_without_call_returns_expr_unchanged():
    cur = SourceCursor("  , x")
    expr = Word("a")
    assert parse_apply(expr, cur) is expr


@pytest.mark.parametrize(
    "source, message, line, column",
    [
        ("", "Unexpected syntax", 1, 1),
        ("f(1 2)", "Expected ',' or ')'", 1, 5),
        ("f(1,)", "Unexpected syntax", 1, 5),
        ("f(", "Unexpected syntax", 1, 3),
        ("(1)", "Unexpected syntax", 1, 1),
        ('"abc', "Unexpected syntax", 1, 1),
        ("x y", "Unexpected text after program", 1, 3),
        ("1abc", "Unexpected text after program", 1, 2),
        ("do(\n  1,\n  2", "Expected ',' or ')'", 3, 4),
    ],
)
def test_syntax_errors(source, message, line, column):
    with pytest.raises(EggSyntaxError) as info:
        parse(source)
    err = info.value
    assert message in err.message
    assert (err.line, err.column) == (line, column)
    assert f"at line {line}, column {column}" in str(err)


# -----------------------------------------------------
# Round trip: unparse then parse yields an equal tree
# -----------------------------------------------------

_word_chars = string.ascii_letters + string.digits + "+-*/<>=!&|_?.:"
words = st.text(alphabet=_word_chars, min_size=1, max_size=8).filter(
    lambda w: not w[0].isdigit()
).map(Word)
numbers = st.one_of(
    st.integers(min_value=0, max_value=10**12).map(float),
    st.floats(min_value=0, max_value=1e15, allow_nan=False, allow_infinity=False).map(abs),
).map(Value)
strings = st.text(
    alphabet=st.characters(blacklist_characters='"', blacklist_categories=("Cs",)),
    max_size=12,
).map(Value)
leaves = st.one_of(words, numbers, strings)
expressions = st.recursive(
    leaves,
    lambda children: st.builds(
        Apply, children, st.lists(children, max_size=4).map(tuple)
    ),
    max_leaves=25,
)


@given(expressions)
def test_unparse_round_trip(expr):
    assert parse(unparse(expr)) == expr


@given(expressions)
def test_pretty_printed_round_trip(expr):
    options = {**DEFAULT_OPTIONS, "max_line_length": 20, "max_depth": 1000}
    assert parse(pprint_expr(expr, options=options)) == expr
