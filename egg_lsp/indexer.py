"""
Static indexer for Egg documents.

The buffer is parsed with the real reader but never evaluated. From the tree
we collect:
- bindings: define(name, ...) and class(Name, ...), with fun-valued defines
  reported as functions
- parameters of every fun(...)
- the syntax error, if any, as a diagnostic

Editors send incomplete buffers all the time, so when parsing fails a
tolerant regex scan still recovers define/class names. Positions in the
index are 0-based (LSP convention); the reader's are 1-based.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from egg.errors import EggSyntaxError
from egg.reader.parser import SPACE_RE, parse
from egg.types.expression import Apply, Expression, Word

# Scanner tokens: comments, strings (possibly unterminated), parens, words
TOKEN_REGEX = re.compile(r'#[^\n]*|"[^"]*"?|\(|\)|,|[^\s(),#"]+')

DEFINITION_REGEX = re.compile(r'(?:^|(?<=[\s(),]))(define|class)\s*\(\s*([^\s(),#"]+)', re.MULTILINE)


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function" | "class" | "param"
    line: int
    col: int


@dataclass
class ParseDiagnostic:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    params: Dict[str, SymbolDef] = field(default_factory=dict)
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)
    paren_balance: int = 0
    has_unmatched_quote: bool = False


def _iter_tokens(text: str) -> Iterator[Tuple[str, int]]:
    for m in TOKEN_REGEX.finditer(text):
        yield m.group(0), m.start()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _scan_structure(text: str, idx: DocumentIndex) -> None:
    for tok, _ in _iter_tokens(text):
        if tok == "(":
            idx.paren_balance += 1
        elif tok == ")":
            idx.paren_balance -= 1
        elif tok.startswith('"') and (len(tok) == 1 or not tok.endswith('"')):
            idx.has_unmatched_quote = True


def _scan_definitions(text: str, idx: DocumentIndex) -> None:
    """Regex fallback used when the buffer does not parse."""
    for m in DEFINITION_REGEX.finditer(text):
        head, name = m.group(1), m.group(2)
        line, col = _position_from_offset(text, m.start(2))
        kind = "class" if head == "class" else "var"
        idx.symbols.setdefault(name, SymbolDef(name=name, kind=kind, line=line, col=col))


def _definition_kind(head: str, value: Expression | None) -> str:
    if head == "class":
        return "class"
    if isinstance(value, Apply) and isinstance(value.operator, Word) and value.operator.name == "fun":
        return "function"
    return "var"


def _walk(expr: Expression, idx: DocumentIndex) -> None:
    if not isinstance(expr, Apply):
        return
    op = expr.operator
    if isinstance(op, Word) and expr.args:
        target = expr.args[0]
        if op.name in ("define", "class") and isinstance(target, Word):
            value = expr.args[1] if len(expr.args) > 1 else None
            idx.symbols.setdefault(
                target.name,
                SymbolDef(
                    name=target.name,
                    kind=_definition_kind(op.name, value),
                    line=target.line - 1,
                    col=target.column - 1,
                ),
            )
        elif op.name == "fun":
            for param in expr.args[:-1]:
                if isinstance(param, Word):
                    idx.params.setdefault(
                        param.name,
                        SymbolDef(param.name, "param", param.line - 1, param.column - 1),
                    )
    _walk(op, idx)
    for arg in expr.args:
        _walk(arg, idx)


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    _scan_structure(text, idx)

    # Blank or comment-only buffers are not programs yet; no diagnostic.
    if SPACE_RE.fullmatch(text):
        return idx

    try:
        tree = parse(text)
    except EggSyntaxError as err:
        idx.diagnostics.append(
            ParseDiagnostic(
                message=err.message,
                line=max((err.line or 1) - 1, 0),
                col=max((err.column or 1) - 1, 0),
            )
        )
        _scan_definitions(text, idx)
        return idx
    except RecursionError:
        idx.diagnostics.append(ParseDiagnostic("Program nested too deeply", 0, 0))
        return idx

    _walk(tree, idx)
    return idx


# Signatures for hover/completion without evaluation
BUILTIN_SIGNATURES: Dict[str, str] = {
    "if": "if(cond, then, else)",
    "while": "while(cond, body)",
    "do": "do(expr...)",
    "define": "define(name, value)",
    "set": "set(name, value)",
    "fun": "fun(param..., body)",
    "class": "class(Name, constructor, method(name, fn)...)",
    "+": "+(a, b)",
    "-": "-(a, b)",
    "*": "*(a, b)",
    "/": "/(a, b)",
    "==": "==(a, b)",
    "!=": "!=(a, b)",
    "<": "<(a, b)",
    ">": ">(a, b)",
    "<=": "<=(a, b)",
    ">=": ">=(a, b)",
    "&&": "&&(a, b)",
    "||": "||(a, b)",
    "!": "!(a)",
    "print": "print(value)",
    "type": "type(value)",
    "array": "array(values...)",
    "length": "length(seq)",
    "element": "element(arr, n)",
    "push": "push(arr, values...)",
    "pop": "pop(arr)",
    "slice": "slice(seq, start, end)",
    "join": "join(arr, sep)",
    "map": "map(arr, fn)",
    "filter": "filter(arr, fn)",
    "reduce": "reduce(arr, fn, init)",
    "forEach": "forEach(arr, fn)",
    "sort": "sort(arr, cmp)",
    "reverse": "reverse(arr)",
    "includes": "includes(seq, value)",
    "find": "find(arr, fn)",
    "indexOf": "indexOf(seq, value)",
    "concat": "concat(values...)",
    "substring": "substring(s, start, end)",
    "charAt": "charAt(s, i)",
    "toLowerCase": "toLowerCase(s)",
    "toUpperCase": "toUpperCase(s)",
    "trim": "trim(s)",
    "split": "split(s, sep)",
    "replace": "replace(s, old, new)",
    "startsWith": "startsWith(s, prefix)",
    "endsWith": "endsWith(s, suffix)",
    "repeat": "repeat(s, n)",
    "abs": "abs(x)",
    "min": "min(xs...)",
    "max": "max(xs...)",
    "floor": "floor(x)",
    "ceil": "ceil(x)",
    "round": "round(x)",
    "random": "random()",
    "getField": "getField(obj, name)",
    "setField": "setField(obj, name, value)",
    "hasField": "hasField(obj, name)",
    "invoke": "invoke(obj, name, args...)",
}
