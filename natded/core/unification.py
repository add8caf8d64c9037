"""
Term model and syntactic unification.

This is the logical foundation that everything else builds on.
Given two terms, find a substitution that makes them identical --
or report that no such substitution exists.

Terms (Expr):
    str                    -> atom:      "P", "contradiction"
    tuple                  -> compound:  ("and", "P", "Q"), ("at", Group(("i",)), "A")
    Group                  -> group:     Group(("i", "j")), written [i j]
    Var                    -> logic variable, only ever created by the engine

Inside a roth template every atom that is not a reserved constant
(KEYWORDS) is a pattern variable. Concrete proof arguments contain no
pattern variables: their atoms are literal propositions.

Substitutions are plain dicts: {Var("A", 3): ("not", "P")}
"""

import itertools
from dataclasses import dataclass

from .errors import MalformedTemplate, UnboundVariable, UnificationConflict


# Reserved literal constants of the object logics; never pattern variables.
KEYWORDS = frozenset({"truth", "contradiction", "true", "false"})

_serials = itertools.count(1)


@dataclass(frozen=True)
class Var:
    """A logic variable. The serial keeps variables of different calls apart."""
    name: str
    serial: int = 0

    def __repr__(self):
        return f"Var({self.name}#{self.serial})"


@dataclass(frozen=True)
class Group:
    """A bracketed list of expressions, e.g. the index list in (at [i] A)."""
    items: tuple = ()

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __repr__(self):
        return format_expr(self)


def fresh_var(name: str) -> Var:
    """A variable no other call has seen."""
    return Var(name, next(_serials))


def is_var(term) -> bool:
    return isinstance(term, Var)


def is_atom(term) -> bool:
    return isinstance(term, str)


def is_keyword(term) -> bool:
    return isinstance(term, str) and term in KEYWORDS


def is_pattern_variable(term) -> bool:
    """Template atoms that are not reserved constants are pattern variables."""
    return isinstance(term, str) and term not in KEYWORDS


def is_compound(term) -> bool:
    """Compounds are tuples: (operator, arg1, arg2, ...)."""
    return isinstance(term, tuple)


def is_group(term) -> bool:
    return isinstance(term, Group)


def head(term):
    """Operator name of a compound, None for anything else."""
    if is_compound(term) and term:
        return term[0]
    return None


def to_expr(value):
    """
    Normalize an authored expression.

    Lists become Groups, tuples are checked recursively. Anything that
    is not an atom, a compound with a string operator and at least one
    argument, or a group raises MalformedTemplate.
    """
    if isinstance(value, str):
        if not value:
            raise MalformedTemplate("empty atom")
        return value
    if isinstance(value, Var):
        return value
    if isinstance(value, (list, Group)):
        return Group(tuple(to_expr(item) for item in value))
    if isinstance(value, tuple):
        if len(value) < 2 or not isinstance(value[0], str) or not value[0]:
            raise MalformedTemplate(
                f"compound needs an operator name and arguments: {value!r}")
        return (value[0],) + tuple(to_expr(arg) for arg in value[1:])
    raise MalformedTemplate(f"not an atom, compound or group: {value!r}")


def pattern_variables(template) -> list:
    """Pattern variables of a template, left to right, without duplicates."""
    found = []

    def walk(term):
        if is_pattern_variable(term):
            if term not in found:
                found.append(term)
        elif is_compound(term):
            for arg in term[1:]:
                walk(arg)
        elif is_group(term):
            for item in term:
                walk(item)

    walk(template)
    return found


def free_vars(term) -> list:
    """Logic variables occurring in term, left to right, without duplicates."""
    found = []

    def walk(t):
        if is_var(t):
            if t not in found:
                found.append(t)
        elif is_compound(t):
            for arg in t[1:]:
                walk(arg)
        elif is_group(t):
            for item in t:
                walk(item)

    walk(term)
    return found


def contains_head(term, operator: str) -> bool:
    """Is there a compound headed by operator anywhere inside term?"""
    if is_compound(term):
        return term[0] == operator or any(contains_head(a, operator) for a in term[1:])
    if is_group(term):
        return any(contains_head(item, operator) for item in term)
    return False


def reconstruct(template, bindings: dict):
    """
    Build a concrete expression from a template.

    bindings maps pattern-variable names to expressions. Reserved
    constants and operator names are copied as they are.
    """
    if is_pattern_variable(template):
        if template not in bindings:
            raise UnboundVariable(template)
        return bindings[template]
    if is_compound(template):
        return (template[0],) + tuple(reconstruct(arg, bindings) for arg in template[1:])
    if is_group(template):
        return Group(tuple(reconstruct(item, bindings) for item in template))
    return template  # keyword


def occurs_in(var, term) -> bool:
    """Does variable var occur anywhere in term? Prevents infinite substitutions."""
    if var == term:
        return True
    if is_compound(term):
        return any(occurs_in(var, arg) for arg in term[1:])
    if is_group(term):
        return any(occurs_in(var, item) for item in term)
    return False


def apply_substitution(sub: dict, term):
    """Apply a substitution dict to a single term. Follows chains."""
    if is_var(term):
        if term in sub:
            return apply_substitution(sub, sub[term])
        return term
    if is_compound(term):
        return (term[0],) + tuple(apply_substitution(sub, arg) for arg in term[1:])
    if is_group(term):
        return Group(tuple(apply_substitution(sub, item) for item in term))
    return term  # atom


def unify_terms(t1, t2, sub=None, occurs_check: bool = True):
    """
    Unify two terms under substitution sub.

    Returns the updated substitution dict, or None if unification fails.
    The input substitution is never modified.
    """
    if sub is None:
        sub = {}

    t1 = apply_substitution(sub, t1)
    t2 = apply_substitution(sub, t2)

    if t1 == t2:
        return sub

    if is_var(t1):
        if occurs_check and occurs_in(t1, t2):
            return None
        sub = dict(sub)
        sub[t1] = t2
        return sub

    if is_var(t2):
        if occurs_check and occurs_in(t2, t1):
            return None
        sub = dict(sub)
        sub[t2] = t1
        return sub

    if is_compound(t1) and is_compound(t2):
        if t1[0] != t2[0] or len(t1) != len(t2):
            return None  # different operator or arity
        for a1, a2 in zip(t1[1:], t2[1:]):
            sub = unify_terms(a1, a2, sub, occurs_check)
            if sub is None:
                return None
        return sub

    if is_group(t1) and is_group(t2):
        if len(t1) != len(t2):
            return None
        for a1, a2 in zip(t1, t2):
            sub = unify_terms(a1, a2, sub, occurs_check)
            if sub is None:
                return None
        return sub

    return None  # different atoms or shapes


def unify(t1, t2, sub=None, occurs_check: bool = True) -> dict:
    """Like unify_terms, but raises UnificationConflict instead of returning None."""
    result = unify_terms(t1, t2, sub, occurs_check)
    if result is None:
        raise UnificationConflict(
            f"cannot unify {format_expr(t1)} with {format_expr(t2)}")
    return result


def reify(terms: list) -> list:
    """
    Replace unbound variables by the atoms _0, _1, ... in order of
    first appearance across all terms.
    """
    names = {}

    def walk(t):
        if is_var(t):
            if t not in names:
                names[t] = f"_{len(names)}"
            return names[t]
        if is_compound(t):
            return (t[0],) + tuple(walk(arg) for arg in t[1:])
        if is_group(t):
            return Group(tuple(walk(item) for item in t))
        return t

    return [walk(t) for t in terms]


def format_expr(term) -> str:
    """Render a term as an s-expression: (and P (not Q)), [i j]."""
    if is_compound(term):
        return "(" + " ".join(format_expr(t) for t in term) + ")"
    if is_group(term):
        return "[" + " ".join(format_expr(t) for t in term) + "]"
    if is_var(term):
        return f"{term.name}#{term.serial}"
    return str(term)
