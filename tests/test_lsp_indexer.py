import pytest

from egg_lsp.indexer import BUILTIN_SIGNATURES, build_index
from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.interpreter import Interpreter

DOC = """# demo
do(define(square, fun(n, *(n, n))),
   define(limit, 10),
   class(Point, fun(self, false)))
"""

BROKEN = """define(a, 1)
do(define(b, fun(x, x)),
  define(c,"""


def test_index_collects_bindings():
    idx = build_index(DOC)
    assert idx.diagnostics == []
    got = {name: (s.kind, s.line, s.col) for name, s in idx.symbols.items()}
    assert got == {
        "square": ("function", 1, 10),
        "limit": ("var", 2, 10),
        "Point": ("class", 3, 9),
    }


def test_index_collects_params():
    idx = build_index(DOC)
    assert set(idx.params) == {"n", "self"}
    assert (idx.params["n"].line, idx.params["n"].col) == (1, 22)
    assert idx.paren_balance == 0
    assert not idx.has_unmatched_quote


def test_syntax_error_becomes_zero_based_diagnostic():
    idx = build_index("f(1 2)")
    assert len(idx.diagnostics) == 1
    d = idx.diagnostics[0]
    assert d.message == "Expected ',' or ')'"
    assert (d.line, d.col) == (0, 4)


def test_broken_buffer_falls_back_to_regex_scan():
    idx = build_index(BROKEN)
    assert [d.message for d in idx.diagnostics] == ["Unexpected text after program"]
    assert (idx.diagnostics[0].line, idx.diagnostics[0].col) == (1, 0)
    got = {name: (s.line, s.col) for name, s in idx.symbols.items()}
    assert got == {"a": (0, 7), "b": (1, 10), "c": (2, 9)}
    assert idx.paren_balance == 2


def test_unmatched_quote():
    idx = build_index('print("abc')
    assert idx.has_unmatched_quote
    assert idx.diagnostics


def test_comment_parens_and_strings_do_not_count():
    idx = build_index('# (((\nconcat("(", ")")')
    assert idx.paren_balance == 0
    assert idx.diagnostics == []


@pytest.mark.parametrize("text", ["", "   \n", "# just a comment\n# another"])
def test_blank_buffer_has_no_diagnostics(text):
    idx = build_index(text)
    assert idx.diagnostics == []
    assert idx.symbols == {}


def test_signatures_cover_language():
    top = Interpreter(prelude=None).top
    names = set(top.vars) - {"true", "false"}
    assert names | set(SPECIAL_FORMS) <= set(BUILTIN_SIGNATURES)
