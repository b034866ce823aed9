import pytest

from egg.errors import EggRangeError, EggTypeError


@pytest.mark.parametrize(
    "src, expected",
    [
        ("concat(\"a\", 1, true)", "a1true"),
        ("concat()", ""),
        ("substring(\"hello\", 1, 3)", "el"),
        ("substring(\"hello\", 3, 1)", "el"),
        ("substring(\"hello\", 2)", "llo"),
        ("substring(\"hello\", -5, 100)", "hello"),
        ("charAt(\"abc\", 1)", "b"),
        ("charAt(\"abc\", 9)", ""),
        ("toLowerCase(\"MiXeD\")", "mixed"),
        ("toUpperCase(\"MiXeD\")", "MIXED"),
        ("trim(\"  padded \")", "padded"),
        ("split(\"a,b,c\", \",\")", ["a", "b", "c"]),
        ("split(\"abc\", \"\")", ["a", "b", "c"]),
        ("replace(\"aaa\", \"a\", \"b\")", "baa"),
        ("startsWith(\"egg\", \"eg\")", True),
        ("endsWith(\"egg\", \"x\")", False),
        ("repeat(\"ab\", 3)", "ababab"),
        ("repeat(\"ab\", 0)", ""),
    ],
)
def test_string_builtins(run, src, expected):
    assert run(src) == expected


def test_strings_are_not_mutated(run):
    assert run("do(define(s, \"abc\"), toUpperCase(s), s)") == "abc"


@pytest.mark.parametrize("src", ["repeat(\"a\", -1)", "repeat(\"a\", 1.5)"])
def test_repeat_count_range(run, src):
    with pytest.raises(EggRangeError):
        run(src)


@pytest.mark.parametrize("src", ["toUpperCase(1)", "trim(array())", "split(\"a\", 1)"])
def test_string_type_errors(run, src):
    with pytest.raises(EggTypeError, match="requires a string"):
        run(src)
