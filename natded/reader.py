"""
Reading expressions from text.

    (and P (not Q))   -> ("and", "P", ("not", "Q"))
    (at [i j] A)      -> ("at", Group(("i", "j")), "A")
    ?                 -> WILDCARD
"""

import re

from .core.engine import WILDCARD
from .core.errors import MalformedTemplate
from .core.unification import Group, format_expr

_TOKEN = re.compile(r"\s*([()\[\]]|[^\s()\[\]]+)")
_CLOSE = {"(": ")", "[": "]"}


def tokenize(s: str) -> list:
    tokens = []
    pos = 0
    s = s.rstrip()
    while pos < len(s):
        m = _TOKEN.match(s, pos)
        if m is None:
            raise MalformedTemplate(f"cannot read {s[pos:]!r}")
        tokens.append(m.group(1))
        pos = m.end()
    return tokens


def parse_expr(s: str):
    """Read one expression. "?" on its own is the wildcard."""
    tokens = tokenize(s)
    if not tokens:
        raise MalformedTemplate("empty expression")
    pos = 0

    def consume():
        nonlocal pos
        if pos >= len(tokens):
            raise MalformedTemplate(f"unexpected end of input in {s!r}")
        tok = tokens[pos]
        pos += 1
        return tok

    def parse():
        tok = consume()
        if tok in _CLOSE:
            items = []
            while pos < len(tokens) and tokens[pos] != _CLOSE[tok]:
                items.append(parse())
            if consume() != _CLOSE[tok]:
                raise MalformedTemplate(f"unbalanced {tok!r} in {s!r}")
            if tok == "[":
                return Group(tuple(items))
            if len(items) < 2 or not isinstance(items[0], str):
                raise MalformedTemplate(
                    f"compound needs an operator and arguments in {s!r}")
            return tuple(items)
        if tok in (")", "]"):
            raise MalformedTemplate(f"unexpected {tok!r} in {s!r}")
        return tok

    result = parse()
    if pos != len(tokens):
        raise MalformedTemplate(f"extra tokens after expression in {s!r}")
    if result == "?":
        return WILDCARD
    if "?" in _atoms(result):
        raise MalformedTemplate(f"the wildcard must stand alone: {s!r}")
    return result


def _atoms(expr):
    if isinstance(expr, tuple):
        return {a for t in expr[1:] for a in _atoms(t)}
    if isinstance(expr, Group):
        return {a for t in expr for a in _atoms(t)}
    return {expr}


def parse_args(texts) -> list:
    return [parse_expr(t) for t in texts]


__all__ = ["tokenize", "parse_expr", "parse_args", "format_expr"]
