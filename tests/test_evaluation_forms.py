import pytest

from egg.errors import EggArityError, EggReferenceError, EggSyntaxError, EggTypeError
from egg.types.function import Function


# -------------------------------
# if
# -------------------------------
@pytest.mark.parametrize(
    "src, expected",
    [
        ("if(true, 1, 2)", 1),
        ("if(false, 1, 2)", 2),
        ("if(0, \"zero\", \"no\")", "zero"),
        ("if(\"\", \"empty\", \"no\")", "empty"),
        ("if(array(), 1, 2)", 1),
    ],
)
def test_if_only_false_is_falsy(run, src, expected):
    assert run(src) == expected


def test_if_evaluates_one_branch(run):
    assert run("if(true, 1, undefinedThing)") == 1
    assert run("if(false, undefinedThing, 2)") == 2


@pytest.mark.parametrize("src", ["if(true, 1)", "if(true)", "if(true, 1, 2, 3)"])
def test_if_arity(run, src):
    with pytest.raises(EggSyntaxError, match="Wrong number of args to if"):
        run(src)


# -------------------------------
# while / do
# -------------------------------
def test_while_accumulates(run):
    src = """
    do(define(i, 1),
       define(sum, 0),
       while(<(i, 4),
             do(set(sum, +(sum, i)),
                set(i, +(i, 1)))),
       sum)
    """
    assert run(src) == 6


def test_while_initially_false_skips_body(run):
    assert run("do(define(hit, 0), while(false, set(hit, 1)))") is False
    assert run("do(define(hit, 0), while(false, set(hit, 1)), hit)") == 0


def test_while_returns_false(run):
    assert run("do(define(i, 0), while(<(i, 2), set(i, +(i, 1))))") is False


def test_while_arity(run):
    with pytest.raises(EggSyntaxError, match="Wrong number of args to while"):
        run("while(true)")


def test_do_returns_last(run):
    assert run("do(1, 2, 3)") == 3
    assert run("do()") is False


# -------------------------------
# define / set
# -------------------------------
def test_define_returns_value(run):
    assert run("define(x, 10)") == 10
    assert run("do(define(x, 10), x)") == 10


@pytest.mark.parametrize("src", ["define(x)", "define(\"x\", 1)", "define(f(x), 1)"])
def test_define_malformed(run, src):
    with pytest.raises(EggSyntaxError, match="Incorrect use of define"):
        run(src)


def test_set_updates_existing_binding(run):
    assert run("do(define(x, 1), define(f, fun(set(x, 2))), f(), x)") == 2


def test_set_unbound_is_reference_error(run):
    with pytest.raises(EggReferenceError, match="Undefined binding: ghost"):
        run("set(ghost, 1)")


def test_set_returns_value(run):
    assert run("do(define(x, 1), set(x, 5))") == 5


def test_set_malformed(run):
    with pytest.raises(EggSyntaxError, match="Incorrect use of set"):
        run("set(1, 2)")


def test_define_inside_function_shadows(run):
    src = """
    do(define(x, 1),
       define(f, fun(do(define(x, 50), x))),
       +(f(), x))
    """
    assert run(src) == 51


# -------------------------------
# fun
# -------------------------------
def test_fun_returns_function(run):
    fn = run("fun(a, b, +(a, b))")
    assert isinstance(fn, Function)
    assert fn.params == ("a", "b")
    assert fn.arity == 2
    assert str(fn) == "<fun(a, b)>"


def test_fun_call(run):
    assert run("do(define(plus, fun(a, b, +(a, b))), plus(1, 2))") == 3


def test_zero_arity_function(run):
    assert run("do(define(answer, fun(42)), answer())") == 42


def test_chained_closure(run):
    assert run("fun(n, fun(x, +(x, n)))(5)(10)") == 15


def test_redefining_in_defining_scope_is_visible(run):
    # The closure reads x from its defining scope at call time.
    src = "do(define(x,5), define(f, fun(y, +(x,y))), define(x,999), f(3))"
    assert run(src) == 1002


def test_lexical_not_dynamic(run):
    src = """
    do(define(x, 5),
       define(f, fun(y, +(x, y))),
       define(g, fun(x, f(1))),
       g(100))
    """
    assert run(src) == 6


def test_closures_keep_private_state(run):
    src = """
    do(define(counter, fun(do(define(n, 0), fun(set(n, +(n, 1)))))),
       define(a, counter()),
       define(b, counter()),
       a(), a(),
       array(a(), b()))
    """
    assert run(src) == [3, 1]


def test_recursion(run):
    src = """
    do(define(fact, fun(n, if(<(n, 2), 1, *(n, fact(-(n, 1)))))),
       fact(10))
    """
    assert run(src) == 3628800


@pytest.mark.parametrize("call", ["f(1)", "f(1, 2, 3)"])
def test_arity_mismatch(run, call):
    with pytest.raises(EggArityError, match="expected 2") as info:
        run(f"do(define(f, fun(a, b, a)), {call})")
    assert isinstance(info.value, EggTypeError)


def test_fun_needs_body(run):
    with pytest.raises(EggSyntaxError, match="Functions need a body"):
        run("fun()")


def test_fun_param_names_must_be_words(run):
    with pytest.raises(EggSyntaxError, match="Parameter names must be words") as info:
        run("fun(a, 1, a)")
    assert (info.value.line, info.value.column) == (1, 8)
